from __future__ import annotations
from typing import Optional


class PiToolsError(Exception):
    """Base for every error value returned by reporters and actuators."""


class NoCommandError(PiToolsError):
    def __init__(self, message: str = "no command provided") -> None:
        super().__init__(message)


class ProcessError(PiToolsError):
    """Non-zero exit status or a process that could not be launched."""

    def __init__(self, message: str, returncode: Optional[int] = None) -> None:
        super().__init__(message)
        self.returncode = returncode


class CommandTimeout(PiToolsError):
    def __init__(self, path: str, killed: bool = True) -> None:
        if killed:
            msg = f"Command timed out: {path}"
        else:
            msg = f"Command timed out, but failed to kill process: {path}"
        super().__init__(msg)
        self.path = path
        self.killed = killed


class TransportError(PiToolsError):
    """HTTP failure, unexpected status code or unreadable body."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class DecodeError(PiToolsError):
    """Malformed JSON or command output in an unexpected format."""
