"""Reporters that parse `vcgencmd` key=value output."""
from __future__ import annotations
import logging
from typing import Callable, List, Optional

from ...command import CommandResult, run
from ...errors import DecodeError

logger = logging.getLogger("status.values")

# (bit, label); "before" bits are only reported when their "now" bit is clear
THROTTLE_NOW = (
    (0, "under-voltage"),
    (1, "frequency capped"),
    (2, "throttled"),
)
THROTTLE_BEFORE_OFFSET = 16


def extract_value(result: CommandResult, convert: Optional[Callable[[str], str]] = None) -> CommandResult:
    """Keep the part after the first '=' of a `key=value` output.

    A failed command is returned untouched. Output without '=' or a value
    that ``convert`` rejects turns into a DecodeError, keeping the raw output.
    """
    if not result.ok:
        return result
    key, sep, value = result.output.partition("=")
    if not sep:
        return CommandResult(result.output, DecodeError(f"unexpected output: {result.output!r}"), result.returncode)
    if convert is None:
        return CommandResult(value, None, result.returncode)
    try:
        return CommandResult(convert(value), None, result.returncode)
    except (ValueError, DecodeError) as exc:
        logger.debug("failed to convert %s value %r: %s", key, value, exc)
        return CommandResult(result.output, DecodeError(f"cannot parse {key} value {value!r}: {exc}"), result.returncode)


def hz_to_mhz(value: str) -> str:
    return f"{int(value.strip()) / 1e6:.1f} MHz"


def decode_throttled(flags: int) -> str:
    found: List[str] = []
    for bit, label in THROTTLE_NOW:
        if flags & (1 << bit):
            found.append(label)
    for bit, label in THROTTLE_NOW:
        if flags & (1 << (bit + THROTTLE_BEFORE_OFFSET)) and not flags & (1 << bit):
            found.append(f"{label} before")
    return ", ".join(found) if found else "ok"


def parse_throttled(value: str) -> str:
    return decode_throttled(int(value.strip(), 16))


def cpu_temperature() -> CommandResult:
    """`temp=48.3'C` -> `48.3'C`"""
    return extract_value(run("vcgencmd", "measure_temp"))


def cpu_frequency() -> CommandResult:
    """`frequency(48)=600169920` -> `600.2 MHz`"""
    return extract_value(run("vcgencmd", "measure_clock", "arm"), hz_to_mhz)


def cpu_throttled() -> CommandResult:
    return extract_value(run("vcgencmd", "get_throttled"), parse_throttled)
