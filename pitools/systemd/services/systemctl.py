from __future__ import annotations
import logging
from typing import Dict, Sequence, Tuple

from ...command import run

logger = logging.getLogger("systemd.systemctl")

UNKNOWN = "unknown"

_VERBS = {
    "start": ("Started", "start"),
    "stop": ("Stopped", "stop"),
    "restart": ("Restarted", "restart"),
}


def _valid_name(service: str) -> bool:
    return bool(service) and not service.startswith("-")


def systemctl_status(services: Sequence[str]) -> Tuple[Dict[str, str], bool]:
    """`systemctl is-active` for several units in one call.

    systemctl prints one state per unit in argument order; the lines are
    paired with ``services`` by position. A line count that does not match
    marks the unpaired units as "unknown" and reports failure.
    """
    services = list(services)
    if not services:
        return {}, True
    bad = [s for s in services if not _valid_name(s)]
    if bad:
        logger.warning("refusing to query invalid service names: %s", bad)
        return {s: UNKNOWN for s in services}, False

    # exits non-zero as soon as one unit is not active; the output is still valid
    res = run("systemctl", "is-active", *services, elevated=True)
    lines = res.output.split("\n") if res.output else []

    statuses = {name: UNKNOWN for name in services}
    for name, line in zip(services, lines):
        statuses[name] = line.strip()
    if len(lines) != len(services):
        logger.warning(
            "systemctl is-active returned %d line(s) for %d service(s): %r",
            len(lines), len(services), res.output,
        )
        return statuses, False
    return statuses, True


def _control(action: str, service: str) -> Tuple[str, bool]:
    done, verb = _VERBS[action]
    if not _valid_name(service):
        return f"Invalid service name: {service!r}", False
    res = run("systemctl", action, service, elevated=True)
    if not res.ok:
        logger.warning("systemctl %s %s failed: %s (%s)", action, service, res.error, res.output)
        return f"Failed to {verb} service: {service}", False
    logger.info("systemctl %s %s", action, service)
    return res.output or f"{done} service: {service}", True


def systemctl_start(service: str) -> Tuple[str, bool]:
    return _control("start", service)


def systemctl_stop(service: str) -> Tuple[str, bool]:
    return _control("stop", service)


def systemctl_restart(service: str) -> Tuple[str, bool]:
    return _control("restart", service)
