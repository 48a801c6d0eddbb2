from __future__ import annotations

import logging
import logging.config
import os
from typing import Any, Dict, Optional

from .config_loader import load_config
from .services.handlers import InMemoryLogHandler, build_formatter

_MEMORY_HANDLER: Optional[InMemoryLogHandler] = None


def _ensure_log_dir(path: str) -> None:
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)


def init_logging(overrides: Optional[Dict[str, Any]] = None, force: bool = False) -> None:
    """Configure the root logger once for every pitools module.

    Handlers: in-memory ring buffer (always), console and rotating file
    (both optional). Already configured -> no-op unless ``force``.
    """
    global _MEMORY_HANDLER

    if _MEMORY_HANDLER is not None and logging.getLogger().handlers and not force:
        return

    cfg = load_config(overrides=overrides)
    formatter = build_formatter(bool(cfg.get("json_format", False)))

    handlers: Dict[str, Dict[str, Any]] = {
        "in_memory": {
            "()": InMemoryLogHandler,
            "maxlen": int(cfg.get("buffer_size", 500)),
            "level": "DEBUG",
        }
    }
    if cfg.get("enable_console", True):
        handlers["console"] = {
            "class": "logging.StreamHandler",
            "level": str(cfg.get("console_level", "INFO")).upper(),
            "stream": "ext://sys.stdout",
        }
    if cfg.get("enable_file", True):
        path = str(cfg.get("file_path", "logs/pitools.log"))
        _ensure_log_dir(path)
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "DEBUG",
            "filename": path,
            "maxBytes": int(cfg.get("rotate_bytes", 1024 * 1024)),
            "backupCount": int(cfg.get("backup_count", 3)),
            "encoding": "utf-8",
        }

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"default": {"()": lambda: formatter}},
            "handlers": {name: {**opts, "formatter": "default"} for name, opts in handlers.items()},
            "root": {"level": "DEBUG", "handlers": list(handlers)},
        }
    )

    if cfg.get("capture_warnings", True):
        logging.captureWarnings(True)

    _MEMORY_HANDLER = next(
        (h for h in logging.getLogger().handlers if isinstance(h, InMemoryLogHandler)),
        None,
    )

    for name, level in (cfg.get("module_levels") or {}).items():
        logging.getLogger(name).setLevel(str(level).upper())


def get_memory_handler() -> Optional[InMemoryLogHandler]:
    return _MEMORY_HANDLER


def get_router():
    from .api.router import router

    return router


if __name__ == "__main__":
    init_logging()
    log = logging.getLogger("logwrapper.demo")
    log.info("logwrapper started")
    log.warning("this is a warning")
