from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..xLogService import get_memory_handler

router = APIRouter(prefix="/logs", tags=["logs"])

_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}


class LevelChange(BaseModel):
    logger: str
    level: str


@router.get("/")
def list_logs(n: int = 200) -> Dict[str, Any]:
    handler = get_memory_handler()
    items = handler.tail(n) if handler else []
    return {"count": len(items), "items": items}


@router.post("/level")
def set_level(payload: LevelChange):
    level = payload.level.upper()
    if level not in _LEVELS:
        return JSONResponse({"ok": False, "error": f"unknown level: {payload.level}"}, status_code=400)
    logging.getLogger(payload.logger).setLevel(level)
    return {"ok": True}
