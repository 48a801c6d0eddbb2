"""logwrapper module: central logging for pitools.

- init_logging(overrides: dict | None, force: bool = False) -> None
- get_memory_handler() -> InMemoryLogHandler | None
- get_router() -> fastapi.APIRouter
"""
from .xLogService import get_memory_handler, get_router, init_logging

__all__ = [
    "init_logging",
    "get_memory_handler",
    "get_router",
]
