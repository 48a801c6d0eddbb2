from __future__ import annotations

from fastapi.testclient import TestClient

from pitools.command import CommandResult
from pitools.errors import CommandTimeout, ProcessError
from pitools.hardware.services import camera, power
from pitools.hardware.xHardwareService import create_app


def _client(tmp_path, yml: str = "") -> TestClient:
    cfg = tmp_path / "hardware.yml"
    cfg.write_text(yml or "{}", encoding="utf-8")
    return TestClient(create_app(str(cfg)))


def test_healthz(tmp_path):
    r = _client(tmp_path).get("/hardware/healthz")
    assert r.status_code == 200
    assert r.json()["ok"] is True
    assert r.json()["power_enabled"] is False


def test_power_disabled_by_default(tmp_path, monkeypatch):
    called = False

    def fake_reboot():
        nonlocal called
        called = True
        return CommandResult("")

    monkeypatch.setattr(power, "reboot_now", fake_reboot)
    r = _client(tmp_path).post("/hardware/reboot")
    assert r.status_code == 403
    assert called is False


def test_power_enabled(tmp_path, monkeypatch):
    monkeypatch.setattr(power, "shutdown_now", lambda: CommandResult("bye"))
    r = _client(tmp_path, "power:\n  enabled: true\n").post("/hardware/shutdown")
    assert r.status_code == 200
    assert r.json() == {"ok": True, "output": "bye"}


def test_camera_still(tmp_path, monkeypatch):
    seen = {}

    def fake_capture(width, height, params, backend, bin_path, timeout_s):
        seen.update(width=width, height=height, backend=backend, timeout_s=timeout_s)
        return b"\xff\xd8\xff", None

    monkeypatch.setattr(camera, "capture_still_image", fake_capture)
    client = _client(tmp_path, "camera:\n  backend: raspistill\n  timeout_s: 3\n")
    r = client.get("/hardware/camera/still", params={"width": 640})
    assert r.status_code == 200
    assert r.headers["content-type"] == "image/jpeg"
    assert r.content == b"\xff\xd8\xff"
    assert seen == {"width": 640, "height": 720, "backend": "raspistill", "timeout_s": 3.0}


def test_camera_still_timeout(tmp_path, monkeypatch):
    monkeypatch.setattr(
        camera,
        "capture_still_image",
        lambda *a, **k: (None, CommandTimeout("/usr/bin/libcamera-still")),
    )
    r = _client(tmp_path).get("/hardware/camera/still")
    assert r.status_code == 504
    assert r.json()["error"] == "Command timed out: /usr/bin/libcamera-still"


def test_camera_still_process_error(tmp_path, monkeypatch):
    monkeypatch.setattr(
        camera,
        "capture_still_image",
        lambda *a, **k: (None, ProcessError("Error running x: exit status 1", 1)),
    )
    r = _client(tmp_path).get("/hardware/camera/still")
    assert r.status_code == 500
