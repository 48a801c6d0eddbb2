from __future__ import annotations
from typing import Any, Dict

from fastapi import APIRouter

from ..services import local, remote, text, values
from ..services.remote import USER_AGENT


def get_router(cfg: Dict[str, Any]) -> APIRouter:
    r = APIRouter(prefix="/status", tags=["status"])
    ext_cfg = cfg.get("external_ip", {})
    geo_cfg = cfg.get("geoip", {})

    @r.get("/healthz")
    def healthz():
        return {"ok": True, "platform": local.detect_platform()}

    @r.get("/hostname")
    def hostname():
        return text.hostname().to_dict()

    @r.get("/uname")
    def uname():
        return text.uname().to_dict()

    @r.get("/uptime")
    def uptime():
        return text.uptime().to_dict()

    @r.get("/disk")
    def disk():
        return text.free_spaces().to_dict()

    @r.get("/memory")
    def memory():
        return text.free_memory().to_dict()

    @r.get("/memory/split")
    def memory_split():
        items, err = text.memory_split()
        out: Dict[str, Any] = {"ok": err is None, "items": items}
        if err is not None:
            out["error"] = str(err)
        return out

    @r.get("/memory/usage")
    def memory_usage():
        sys_bytes, heap_bytes = local.memory_usage()
        return {"ok": True, "sys": sys_bytes, "heap": heap_bytes}

    @r.get("/cpu/temperature")
    def cpu_temperature():
        return values.cpu_temperature().to_dict()

    @r.get("/cpu/frequency")
    def cpu_frequency():
        return values.cpu_frequency().to_dict()

    @r.get("/cpu/throttled")
    def cpu_throttled():
        return values.cpu_throttled().to_dict()

    @r.get("/cpu/info")
    def cpu_info():
        return text.cpu_info().to_dict()

    @r.get("/network/ips")
    def network_ips():
        return {"ok": True, "items": local.ip_addresses()}

    @r.get("/network/external")
    def network_external():
        ip, err = remote.external_ip_address(
            url=str(ext_cfg.get("url", remote.EXTERNAL_IP_URL)),
            timeout=float(ext_cfg.get("timeout_s", 5.0)),
            user_agent=str(ext_cfg.get("user_agent") or USER_AGENT),
        )
        out: Dict[str, Any] = {"ok": err is None, "ip": ip}
        if err is not None:
            out["error"] = str(err)
        return out

    @r.get("/network/geo")
    def network_geo(ip: str):
        info, err = remote.geo_location(
            ip,
            base_url=str(geo_cfg.get("base_url", remote.GEOIP_BASE_URL)),
            timeout=float(geo_cfg.get("timeout_s", 10.0)),
        )
        out: Dict[str, Any] = {"ok": err is None, "geo": info.model_dump()}
        if err is not None:
            out["error"] = str(err)
        return out

    @r.get("/board")
    def board():
        return {"ok": True, "model": local.board_model(), "platform": local.detect_platform()}

    return r
