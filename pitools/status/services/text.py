"""Reporters that return command output verbatim."""
from __future__ import annotations
from typing import List, Optional, Tuple

from ...command import CommandResult, run
from ...errors import PiToolsError


def hostname() -> CommandResult:
    return run("hostname")


def uname() -> CommandResult:
    return run("uname", "-a")


def uptime() -> CommandResult:
    return run("uptime")


def free_spaces() -> CommandResult:
    """Disk usage (`df -h`)."""
    return run("df", "-h")


def free_memory() -> CommandResult:
    return run("free", "-h")


def cpu_info() -> CommandResult:
    return run("cat", "/proc/cpuinfo")


def memory_split() -> Tuple[List[str], Optional[PiToolsError]]:
    """ARM and GPU memory split (`vcgencmd get_mem arm|gpu`).

    The GPU query is skipped when the ARM one fails; the failed output is
    still part of the result.
    """
    result: List[str] = []
    for target in ("arm", "gpu"):
        res = run("vcgencmd", "get_mem", target)
        result.append(res.output)
        if not res.ok:
            return result, res.error
    return result, None
