from __future__ import annotations
from typing import Any, Dict, Optional

from fastapi import APIRouter, Response
from fastapi.responses import JSONResponse

from ...errors import CommandTimeout
from ..services import camera, power


def get_router(cfg: Dict[str, Any]) -> APIRouter:
    r = APIRouter(prefix="/hardware", tags=["hardware"])
    power_enabled = bool(cfg.get("power", {}).get("enabled", False))
    cam = cfg.get("camera", {})

    def _power_disabled() -> JSONResponse:
        return JSONResponse({"ok": False, "error": "power actions are disabled"}, status_code=403)

    @r.get("/healthz")
    def healthz():
        return {"ok": True, "power_enabled": power_enabled, "camera_backend": cam.get("backend", "libcamera")}

    @r.post("/reboot")
    def reboot():
        if not power_enabled:
            return _power_disabled()
        return power.reboot_now().to_dict()

    @r.post("/shutdown")
    def shutdown():
        if not power_enabled:
            return _power_disabled()
        return power.shutdown_now().to_dict()

    @r.get("/camera/still")
    def camera_still(width: Optional[int] = None, height: Optional[int] = None):
        data, err = camera.capture_still_image(
            int(width or cam.get("width", 1280)),
            int(height or cam.get("height", 720)),
            cam.get("params") or {},
            backend=str(cam.get("backend", "libcamera")),
            bin_path=cam.get("bin"),
            timeout_s=float(cam.get("timeout_s", camera.CAPTURE_TIMEOUT_S)),
        )
        if err is not None:
            status = 504 if isinstance(err, CommandTimeout) else 500
            return JSONResponse({"ok": False, "error": str(err)}, status_code=status)
        return Response(data, media_type="image/jpeg")

    return r
