from __future__ import annotations
import ipaddress
import logging
import os
import socket
import sys
from typing import List, Optional, Tuple

import psutil

logger = logging.getLogger("status.local")

_MODEL_PATH = "/proc/device-tree/model"


def _as_ipv4(address: str) -> Optional[str]:
    try:
        ip = ipaddress.ip_address(address.split("%", 1)[0])
    except ValueError:
        return None
    if ip.is_loopback:
        return None
    if isinstance(ip, ipaddress.IPv6Address):
        mapped = ip.ipv4_mapped
        if mapped is None or mapped.is_loopback:
            return None
        return str(mapped)
    return str(ip)


def _is_loopback_iface(stats) -> bool:
    flags = str(getattr(stats, "flags", "") or "")
    return "loopback" in flags.split(",")


def ip_addresses() -> List[str]:
    """IPv4 addresses of every interface that is up and not a loopback."""
    ips: List[str] = []
    try:
        addrs = psutil.net_if_addrs()
        stats = psutil.net_if_stats()
    except (OSError, psutil.Error) as exc:
        logger.warning("failed to enumerate network interfaces: %s", exc)
        return ips

    for name, entries in addrs.items():
        st = stats.get(name)
        if st is None or not st.isup or _is_loopback_iface(st):
            continue
        for entry in entries:
            if entry.family not in (socket.AF_INET, socket.AF_INET6):
                continue
            ip = _as_ipv4(entry.address)
            if ip is not None:
                ips.append(ip)
    return ips


def memory_usage() -> Tuple[int, int]:
    """(resident set size, data segment size) of this process in bytes."""
    info = psutil.Process().memory_info()
    return info.rss, getattr(info, "data", info.rss)


def board_model() -> Optional[str]:
    try:
        with open(_MODEL_PATH, "r", encoding="utf-8", errors="ignore") as f:
            return f.read().strip("\x00\n ") or None
    except OSError:
        return None


def detect_platform() -> str:
    """Return "windows" | "rpi" | "linux" | "macos"."""
    plat = sys.platform
    if plat.startswith("win"):
        return "windows"
    if plat == "darwin":
        return "macos"
    if os.path.exists(_MODEL_PATH):
        model = (board_model() or "").lower()
        if "raspberry pi" in model:
            return "rpi"
    return "linux"
