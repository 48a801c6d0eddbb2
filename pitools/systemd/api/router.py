from __future__ import annotations
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from ..services import systemctl


def get_router(cfg: Dict[str, Any]) -> APIRouter:
    r = APIRouter(prefix="/systemd", tags=["systemd"])
    known: List[str] = list(cfg.get("services", []))
    allow_any = bool(cfg.get("allow_any", False))

    def _denied(names: List[str]):
        if allow_any:
            return None
        blocked = [n for n in names if n not in known]
        if blocked:
            return JSONResponse(
                {"ok": False, "error": f"service not allowed: {', '.join(blocked)}"}, status_code=403
            )
        return None

    def _control(action: str, service: str):
        denied = _denied([service])
        if denied is not None:
            return denied
        message, ok = getattr(systemctl, f"systemctl_{action}")(service)
        return {"ok": ok, "message": message}

    @r.get("/healthz")
    def healthz():
        return {"ok": True, "services": known}

    @r.get("/status")
    def status(services: Optional[List[str]] = Query(None)):
        names = services or known
        denied = _denied(names)
        if denied is not None:
            return denied
        statuses, ok = systemctl.systemctl_status(names)
        return {"ok": ok, "statuses": statuses}

    @r.post("/{service}/start")
    def start(service: str):
        return _control("start", service)

    @r.post("/{service}/stop")
    def stop(service: str):
        return _control("stop", service)

    @r.post("/{service}/restart")
    def restart(service: str):
        return _control("restart", service)

    return r
