from __future__ import annotations

from pitools.command import CommandResult
from pitools.errors import ProcessError
from pitools.status.services import text


def test_passthrough_commands(monkeypatch):
    calls = []

    def fake_run(*args, **kwargs):
        calls.append(args)
        return CommandResult("out")

    monkeypatch.setattr(text, "run", fake_run)
    for fn in (text.hostname, text.uname, text.uptime, text.free_spaces, text.free_memory, text.cpu_info):
        assert fn().output == "out"
    assert calls == [
        ("hostname",),
        ("uname", "-a"),
        ("uptime",),
        ("df", "-h"),
        ("free", "-h"),
        ("cat", "/proc/cpuinfo"),
    ]


def test_memory_split(monkeypatch):
    outputs = {"arm": "arm=948M", "gpu": "gpu=76M"}
    monkeypatch.setattr(text, "run", lambda *args: CommandResult(outputs[args[-1]]))
    items, err = text.memory_split()
    assert err is None
    assert items == ["arm=948M", "gpu=76M"]


def test_memory_split_stops_on_first_failure(monkeypatch):
    calls = []

    def fake_run(*args):
        calls.append(args)
        return CommandResult("not found", ProcessError("failed", 127), 127)

    monkeypatch.setattr(text, "run", fake_run)
    items, err = text.memory_split()
    assert isinstance(err, ProcessError)
    assert items == ["not found"]
    assert len(calls) == 1
