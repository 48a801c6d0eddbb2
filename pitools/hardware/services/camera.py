"""Still image capture through `libcamera-still` or `raspistill`."""
from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional, Tuple

from ...command import run_with_deadline
from ...errors import PiToolsError

logger = logging.getLogger("hardware.camera")

LIBCAMERA_STILL_BIN = "/usr/bin/libcamera-still"
RASPISTILL_BIN = "raspistill"
CAPTURE_TIMEOUT_S = 10.0


def _libcamera_args(width: int, height: int) -> List[str]:
    return [
        "--width", str(int(width)),
        "--height", str(int(height)),
        "--encoding", "jpg",
        "--output", "-",  # stdout
    ]


def _raspistill_args(width: int, height: int) -> List[str]:
    return ["-w", str(int(width)), "-h", str(int(height)), "-o", "-"]


_BACKENDS = {
    "libcamera": (LIBCAMERA_STILL_BIN, _libcamera_args),
    "raspistill": (RASPISTILL_BIN, _raspistill_args),
}


def build_command(
    width: int,
    height: int,
    camera_params: Optional[Dict[str, Any]] = None,
    backend: str = "libcamera",
    bin_path: Optional[str] = None,
) -> List[str]:
    if backend not in _BACKENDS:
        raise ValueError(f"unknown camera backend: {backend!r}")
    default_bin, make_args = _BACKENDS[backend]
    cmd = [bin_path or default_bin] + make_args(width, height)
    for flag, value in (camera_params or {}).items():
        cmd.append(str(flag))
        if value is not None:
            cmd.append(str(value))
    return cmd


def capture_still_image(
    width: int,
    height: int,
    camera_params: Optional[Dict[str, Any]] = None,
    *,
    backend: str = "libcamera",
    bin_path: Optional[str] = None,
    timeout_s: float = CAPTURE_TIMEOUT_S,
) -> Tuple[Optional[bytes], Optional[PiToolsError]]:
    """Capture one JPEG frame and return its bytes.

    ``camera_params`` maps extra flags to values; a None value adds the flag
    alone (e.g. ``{"--nopreview": None, "--rotation": 180}``).
    """
    cmd = build_command(width, height, camera_params, backend, bin_path)
    logger.debug("capturing still image: %s", " ".join(cmd))
    return run_with_deadline(cmd, timeout_s)
