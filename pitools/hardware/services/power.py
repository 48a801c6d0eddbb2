from __future__ import annotations
import logging

from ...command import CommandResult, run

logger = logging.getLogger("hardware.power")


def reboot_now() -> CommandResult:
    logger.warning("rebooting system")
    return run("shutdown", "-r", "now", elevated=True)


def shutdown_now() -> CommandResult:
    logger.warning("shutting down system")
    return run("shutdown", "-h", "now", elevated=True)
