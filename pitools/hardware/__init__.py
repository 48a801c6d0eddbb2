"""Hardware module: power actions and still image capture on the Raspberry Pi.

Provides a FastAPI router; power actions are off unless enabled in config.
"""
from .services.camera import build_command, capture_still_image
from .services.power import reboot_now, shutdown_now

__all__ = [
    "build_command",
    "capture_still_image",
    "reboot_now",
    "shutdown_now",
]
