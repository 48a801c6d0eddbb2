"""pitools: Raspberry Pi status reporters and hardware/service helpers.

Every module lives under its own package (command, status, hardware, systemd)
and exposes plain functions under ``services`` plus an optional FastAPI
router under ``api``. The gateway mounts those routers into one app.
"""

__version__ = "0.3.0"
