from __future__ import annotations
from typing import Any, Dict

from fastapi import APIRouter

from ...status.services.local import detect_platform


def get_router(cfg: Dict[str, Any], mounted: Dict[str, bool]) -> APIRouter:
    r = APIRouter()

    @r.get("/healthz")
    def healthz():
        return {"ok": True, "platform": detect_platform(), "modules": sorted(mounted)}

    @r.get("/status")
    def status():
        include_cfg = dict(cfg.get("include", {}))
        configured_on = [k for k, v in include_cfg.items() if bool(v)]
        return {
            "ok": True,
            "configured": include_cfg,
            "mounted": sorted(mounted),
            "not_mounted": [k for k in configured_on if k not in mounted],
        }

    return r
