"""command module: runs OS programs and captures their output.

- run(*args, elevated=False) -> CommandResult
- run_with_deadline(args, timeout_s, elevated=False) -> (bytes | None, error)
"""
from .services.runner import CommandResult, run, run_with_deadline

__all__ = [
    "CommandResult",
    "run",
    "run_with_deadline",
]
