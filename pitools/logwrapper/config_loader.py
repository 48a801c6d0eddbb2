from __future__ import annotations

import os
from typing import Any, Dict, Optional

import yaml

DEFAULT_CONFIG: Dict[str, Any] = {
    "enable_console": True,
    "console_level": "INFO",
    "enable_file": True,
    "file_path": "logs/pitools.log",
    "rotate_bytes": 1024 * 1024,
    "backup_count": 3,
    "json_format": False,
    "buffer_size": 500,
    "capture_warnings": True,
    # e.g. {"uvicorn.access": "WARNING"}
    "module_levels": {},
}


def load_config(base_dir: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Defaults, then the first config.yml found, then ``overrides``, then env.

    Search order: <base_dir>/config/config.yml, pitools/logwrapper/config/config.yml.
    LOG_LEVEL and LOG_FILE win over everything else.
    """
    cfg: Dict[str, Any] = dict(DEFAULT_CONFIG)

    candidates = []
    if base_dir:
        candidates.append(os.path.join(base_dir, "config", "config.yml"))
    candidates.append(os.path.join(os.path.dirname(__file__), "config", "config.yml"))

    for path in candidates:
        if os.path.exists(path):
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            if isinstance(data, dict):
                cfg.update(data)
            break

    if overrides:
        cfg.update({k: v for k, v in overrides.items() if v is not None})

    env_level = os.getenv("LOG_LEVEL")
    if env_level:
        cfg["console_level"] = env_level
    env_file = os.getenv("LOG_FILE")
    if env_file:
        cfg["file_path"] = env_file
    return cfg
