from __future__ import annotations
import os
from pathlib import Path
from typing import Any, Dict

import yaml

_DEFAULT_CFG_PATH = Path(__file__).parent / "config" / "config.yml"

DEFAULT_CONFIG: Dict[str, Any] = {
    "server": {"host": "0.0.0.0", "port": 8103},
    "services": [],  # queried by GET /systemd/status and allowed for control
    "allow_any": False,  # control units outside `services`
}


def load_config(path: str | os.PathLike | None = None) -> Dict[str, Any]:
    cfg_path = Path(path or os.getenv("PITOOLS_SYSTEMD_CONFIG") or _DEFAULT_CFG_PATH)
    if not cfg_path.exists():
        cfg_path = _DEFAULT_CFG_PATH
    data: Dict[str, Any] = {}
    if cfg_path.exists():
        with open(cfg_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    cfg: Dict[str, Any] = {k: (dict(v) if isinstance(v, dict) else v) for k, v in DEFAULT_CONFIG.items()}
    for k, v in (data if isinstance(data, dict) else {}).items():
        if isinstance(v, dict) and isinstance(cfg.get(k), dict):
            cfg[k].update(v)
        else:
            cfg[k] = v
    cfg["services"] = [str(s) for s in (cfg.get("services") or [])]
    return cfg
