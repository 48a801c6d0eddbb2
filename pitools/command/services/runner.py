from __future__ import annotations
import logging
import subprocess
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from ...errors import CommandTimeout, NoCommandError, PiToolsError, ProcessError

logger = logging.getLogger("command.runner")

SUDO = ("sudo",)


@dataclass
class CommandResult:
    output: str
    error: Optional[PiToolsError] = None
    returncode: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        out = {"ok": self.ok, "output": self.output}
        if self.error is not None:
            out["error"] = str(self.error)
        return out


def _argv(args: Sequence[str], elevated: bool) -> list[str]:
    argv = [str(a) for a in args]
    return list(SUDO) + argv if elevated else argv


def run(*args: str, elevated: bool = False) -> CommandResult:
    """Run a program and return its combined stdout/stderr.

    Trailing newlines are stripped. A non-zero exit or a launch failure is
    reported through ``CommandResult.error``; output captured before the
    failure is still returned.
    """
    if not args:
        return CommandResult("", NoCommandError())

    argv = _argv(args, elevated)
    try:
        proc = subprocess.run(argv, stdout=subprocess.PIPE, stderr=subprocess.STDOUT)
    except OSError as exc:
        logger.debug("failed to launch %s: %s", argv[0], exc)
        return CommandResult("", ProcessError(f"failed to launch {argv[0]}: {exc}"))

    output = proc.stdout.decode("utf-8", errors="replace").rstrip("\n")
    if proc.returncode != 0:
        err = ProcessError(f"{' '.join(argv)} exited with status {proc.returncode}", proc.returncode)
        return CommandResult(output, err, proc.returncode)
    return CommandResult(output, None, proc.returncode)


def run_with_deadline(
    args: Sequence[str], timeout_s: float, elevated: bool = False
) -> Tuple[Optional[bytes], Optional[PiToolsError]]:
    """Run a program under a wall-clock deadline and return its raw stdout.

    On timeout the process is killed and no bytes are returned, whatever it
    may have written so far.
    """
    if not args:
        return None, NoCommandError()

    argv = _argv(args, elevated)
    path = str(args[0])
    try:
        proc = subprocess.Popen(argv, stdout=subprocess.PIPE, stderr=subprocess.PIPE)
    except OSError as exc:
        logger.warning("Error running %s: %s", path, exc)
        return None, ProcessError(f"Error running {path}: {exc}")

    try:
        stdout, stderr = proc.communicate(timeout=timeout_s)
    except subprocess.TimeoutExpired:
        try:
            proc.kill()
        except OSError as exc:
            logger.error("failed to kill %s (pid %s): %s", path, proc.pid, exc)
            # no untimed wait here: the process may never exit
            _close_pipes(proc)
            return None, CommandTimeout(path, killed=False)
        _close_pipes(proc)
        proc.wait()
        logger.warning("%s timed out after %ss, killed", path, timeout_s)
        return None, CommandTimeout(path, killed=True)

    if proc.returncode != 0:
        tail = (stderr or b"").decode("utf-8", errors="replace").strip().splitlines()[-1:]
        msg = f"Error running {path}: exit status {proc.returncode}"
        if tail:
            msg = f"{msg} ({tail[0]})"
        logger.warning(msg)
        return None, ProcessError(msg, proc.returncode)
    return stdout, None


def _close_pipes(proc: subprocess.Popen) -> None:
    for pipe in (proc.stdout, proc.stderr):
        if pipe is not None:
            pipe.close()
