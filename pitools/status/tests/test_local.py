from __future__ import annotations

import socket
from types import SimpleNamespace

from pitools.status.services import local


def _addr(family, address):
    return SimpleNamespace(family=family, address=address, netmask=None, broadcast=None, ptp=None)


def _stats(isup=True, flags="up,broadcast,running,multicast"):
    return SimpleNamespace(isup=isup, duplex=0, speed=0, mtu=1500, flags=flags)


def test_ip_addresses_filters_loopback_and_non_ipv4(monkeypatch):
    addrs = {
        "lo": [_addr(socket.AF_INET, "127.0.0.1"), _addr(socket.AF_INET6, "::1")],
        "eth0": [
            _addr(socket.AF_INET, "192.168.0.10"),
            _addr(socket.AF_INET6, "fe80::1%eth0"),
            _addr(socket.AF_INET6, "::ffff:10.0.0.7"),
            _addr(getattr(socket, "AF_PACKET", 17), "b8:27:eb:00:00:01"),
        ],
        "wlan0": [_addr(socket.AF_INET, "192.168.0.11")],
        "tun0": [_addr(socket.AF_INET, "127.0.0.2")],
        "usb0": [_addr(socket.AF_INET, "172.16.0.2")],
    }
    stats = {
        "lo": _stats(flags="up,loopback,running"),
        "eth0": _stats(),
        "wlan0": _stats(),
        "tun0": _stats(),
        "usb0": _stats(isup=False),
    }
    monkeypatch.setattr(local.psutil, "net_if_addrs", lambda: addrs)
    monkeypatch.setattr(local.psutil, "net_if_stats", lambda: stats)

    assert local.ip_addresses() == ["192.168.0.10", "10.0.0.7", "192.168.0.11"]


def test_ip_addresses_enumeration_failure(monkeypatch):
    def boom():
        raise OSError("no netlink")

    monkeypatch.setattr(local.psutil, "net_if_addrs", boom)
    assert local.ip_addresses() == []


def test_memory_usage_returns_positive_sizes():
    sys_bytes, heap_bytes = local.memory_usage()
    assert sys_bytes > 0
    assert heap_bytes > 0


def test_board_model_and_platform(monkeypatch, tmp_path):
    model = tmp_path / "model"
    model.write_bytes(b"Raspberry Pi 4 Model B Rev 1.4\x00")
    monkeypatch.setattr(local, "_MODEL_PATH", str(model))
    monkeypatch.setattr(local.sys, "platform", "linux")
    assert local.board_model() == "Raspberry Pi 4 Model B Rev 1.4"
    assert local.detect_platform() == "rpi"


def test_board_model_missing(monkeypatch, tmp_path):
    monkeypatch.setattr(local, "_MODEL_PATH", str(tmp_path / "missing"))
    monkeypatch.setattr(local.sys, "platform", "linux")
    assert local.board_model() is None
    assert local.detect_platform() == "linux"
