"""Shell command execution with Result-based error handling.

Release steps are expressed as shell command strings. ``run_shell`` streams
the merged stdout/stderr of a command into a caller-supplied sink as lines
arrive, so quiet steps can discard output while verbose steps echo it.

Usage:
    result = run_shell("make release", echo)
    match result:
        case Ok():
            ...
        case Err(error):
            print(f"Failed: {error}")
"""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import TypeAlias

from relman.core.result import Err, Ok, Result

__all__ = ["OutputSink", "ProcessError", "capture_shell", "echo", "ignore", "run_shell"]

OutputSink: TypeAlias = Callable[[str], None]


@dataclass(frozen=True, slots=True)
class ProcessError:
    """Error from a failed shell command.

    Attributes:
        command: The command string that was executed.
        returncode: Exit code of the process, -1 if it could not be started.
        output: Captured output or the spawn error (may be empty).
    """

    command: str
    returncode: int
    output: str = ""

    def __str__(self) -> str:
        cmd_str = " ".join(self.command.split()[:3])
        if len(self.command.split()) > 3:
            cmd_str += " ..."
        return f"{cmd_str} failed (exit {self.returncode})"


def ignore(_chunk: str) -> None:
    """Sink that discards output."""


def echo(chunk: str) -> None:
    """Sink that writes output straight to the terminal."""
    sys.stdout.write(chunk)
    sys.stdout.flush()


def run_shell(
    command: str,
    sink: OutputSink = echo,
    cwd: Path | None = None,
    env: dict[str, str] | None = None,
) -> Result[None, ProcessError]:
    """Execute a shell command, forwarding its output to ``sink``.

    Blocks until the command exits; there is no timeout.

    Args:
        command: Command line, interpreted by ``/bin/sh``.
        sink: Receives each output line as it arrives.
        cwd: Working directory (current directory if None).
        env: Environment variables (inherits the current env if None).

    Returns:
        Ok(None) on exit code 0, Err(ProcessError) otherwise.
    """
    try:
        proc = subprocess.Popen(
            command,
            shell=True,
            cwd=str(cwd) if cwd else None,
            env=env,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except OSError as e:
        return Err(ProcessError(command=command, returncode=-1, output=str(e)))

    assert proc.stdout is not None
    finished = False
    try:
        with proc.stdout:
            for line in proc.stdout:
                sink(line)
        finished = True
    finally:
        if not finished:
            proc.kill()
        returncode = proc.wait()

    if returncode != 0:
        return Err(ProcessError(command=command, returncode=returncode))
    return Ok(None)


def capture_shell(
    command: str,
    cwd: Path | None = None,
    env: dict[str, str] | None = None,
) -> Result[str, ProcessError]:
    """Execute a shell command and return its stdout."""
    try:
        proc = subprocess.run(
            command,
            shell=True,
            cwd=str(cwd) if cwd else None,
            env=env,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError as e:
        return Err(ProcessError(command=command, returncode=-1, output=str(e)))

    if proc.returncode != 0:
        return Err(ProcessError(command=command, returncode=proc.returncode, output=proc.stderr))
    return Ok(proc.stdout)
