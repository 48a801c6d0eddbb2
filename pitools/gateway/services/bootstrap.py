from __future__ import annotations
from typing import Any, Callable, Dict, Optional

import logging

from fastapi import FastAPI

logger = logging.getLogger("gateway.bootstrap")


def _include_status(app: FastAPI, cfg_path: str | None) -> None:
    from ...status.api.router import get_router
    from ...status.config_loader import load_config

    app.include_router(get_router(load_config(cfg_path)))


def _include_hardware(app: FastAPI, cfg_path: str | None) -> None:
    from ...hardware.api.router import get_router
    from ...hardware.config_loader import load_config

    hcfg = load_config(cfg_path)
    if hcfg.get("power", {}).get("enabled"):
        logger.warning("power actions enabled: reboot/shutdown reachable over HTTP")
    app.include_router(get_router(hcfg))


def _include_systemd(app: FastAPI, cfg_path: str | None) -> None:
    from ...systemd.api.router import get_router
    from ...systemd.config_loader import load_config

    app.include_router(get_router(load_config(cfg_path)))


def _include_logs(app: FastAPI, cfg_path: str | None) -> None:
    from ...logwrapper import get_router

    app.include_router(get_router())


_MODULES: Dict[str, Callable[[FastAPI, Optional[str]], None]] = {
    "status": _include_status,
    "hardware": _include_hardware,
    "systemd": _include_systemd,
    "logs": _include_logs,
}


def bootstrap(app: FastAPI, cfg: Dict[str, Any]) -> Dict[str, bool]:
    """Mount module routers according to cfg.include; return what got mounted."""
    mounted: Dict[str, bool] = {}
    include = cfg.get("include", {})
    configs = cfg.get("configs", {}) or {}

    for name, mount in _MODULES.items():
        if not include.get(name):
            continue
        try:
            mount(app, configs.get(name))
        except Exception as exc:
            logger.warning("module %s failed to mount: %s", name, exc)
            continue
        mounted[name] = True
        logger.info("module %s mounted", name)
    return mounted
