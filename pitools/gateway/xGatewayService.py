from __future__ import annotations
import logging

from fastapi import FastAPI

from .. import __version__
from ..status.services.local import detect_platform
from .api.router import get_router
from .config_loader import load_config
from .services.bootstrap import bootstrap

logger = logging.getLogger("gateway")


def create_app(config_path: str | None = None) -> FastAPI:
    cfg = load_config(config_path)
    app = FastAPI(title="pitools gateway", version=__version__)
    app.state.cfg = cfg

    platform = detect_platform()
    if platform != "rpi":
        logger.warning("not running on a Raspberry Pi (%s); vcgencmd and camera calls will fail", platform)

    mounted = bootstrap(app, cfg)
    app.state.mounted = mounted
    app.include_router(get_router(cfg, mounted))
    return app
