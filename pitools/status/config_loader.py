from __future__ import annotations
import os
from pathlib import Path
from typing import Any, Dict

import yaml

_DEFAULT_CFG_PATH = Path(__file__).parent / "config" / "config.yml"

DEFAULT_CONFIG: Dict[str, Any] = {
    "server": {"host": "0.0.0.0", "port": 8101},
    "external_ip": {
        "url": "https://domains.google.com/checkip",
        "timeout_s": 5.0,
        "user_agent": None,  # None -> pitools/<version>
    },
    "geoip": {
        "base_url": "https://geoip.nekudo.com/api/",
        "timeout_s": 10.0,
    },
}


def _deep_update(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_update(out[k], v)
        else:
            out[k] = v
    return out


def load_config(path: str | os.PathLike | None = None) -> Dict[str, Any]:
    cfg_path = Path(path or os.getenv("PITOOLS_STATUS_CONFIG") or _DEFAULT_CFG_PATH)
    if not cfg_path.exists():
        cfg_path = _DEFAULT_CFG_PATH
    data: Dict[str, Any] = {}
    if cfg_path.exists():
        with open(cfg_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    return _deep_update(DEFAULT_CONFIG, data if isinstance(data, dict) else {})
