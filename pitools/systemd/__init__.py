from .services.systemctl import systemctl_restart, systemctl_start, systemctl_status, systemctl_stop

__all__ = [
    "systemctl_restart",
    "systemctl_start",
    "systemctl_status",
    "systemctl_stop",
]
