from __future__ import annotations
import os
from typing import Any, Dict, Optional

import yaml

DEFAULT_CONFIG: Dict[str, Any] = {
    "server": {"host": "0.0.0.0", "port": 8100},
    "include": {
        "status": True,
        "hardware": True,
        "systemd": True,
        "logs": True,
    },
    # per-module config files; None -> module default
    "configs": {
        "status": None,
        "hardware": None,
        "systemd": None,
    },
}


def _deep_update(base: Dict[str, Any], up: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(base)
    for k, v in up.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_update(out[k], v)
        else:
            out[k] = v
    return out


def load_config(path: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    cfg: Dict[str, Any] = dict(DEFAULT_CONFIG)
    candidates = []
    if path:
        candidates.append(path)
    # explicit env var path beats the packaged default
    env_path = os.getenv("GATEWAY_CONFIG")
    if env_path:
        candidates.append(env_path)
    candidates.append(os.path.join(os.path.dirname(__file__), "config", "config.yml"))
    for candidate in candidates:
        if os.path.exists(candidate):
            with open(candidate, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            if isinstance(data, dict):
                cfg = _deep_update(cfg, data)
            break
    if overrides:
        cfg = _deep_update(cfg, overrides)
    return cfg
