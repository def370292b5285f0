"""Release steps: build a command, run it, map the exit code.

Every step returns ``Ok(...)`` on exit code 0 and ``Err(StepError)``
otherwise. Failures are never retried; the caller decides whether to
continue.

Usage:
    match clone("https://github.com/erlware/relx.git", "relx", CommandOptions(branch="v1")):
        case Ok():
            ...
        case Err(error):
            console.error(error.message)
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from relman.core.build_env import current_env
from relman.core.config import RelmanConfig
from relman.core.result import Err, Ok, Result
from relman.platform.process import OutputSink, capture_shell, echo, ignore, run_shell
from relman.release.commands import (
    GIT_DESCRIBE,
    Verbosity,
    build_tool_command,
    chmod_command,
    clone_command,
    download_command,
    make_command,
    relx_command,
    relx_level,
    strip_version_prefix,
)
from relman.release.releases import most_recent_release

__all__ = [
    "BUILD_FAILED",
    "STEP_FAILED",
    "CommandOptions",
    "StepError",
    "build_release",
    "build_tool",
    "chmod",
    "clone",
    "download",
    "git_describe",
    "make",
]

STEP_FAILED = "Release step failed. Please fix any errors and try again."
BUILD_FAILED = "Failed to build release. Please fix any errors and try again."


@dataclass(frozen=True, slots=True)
class StepError:
    """A release step that did not succeed.

    Attributes:
        message: Human-readable message shown to the user.
        command: The command line that failed (empty if none ran).
        returncode: Process exit code, -1 when no process result applies.
    """

    message: str
    command: str = ""
    returncode: int = -1

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class CommandOptions:
    """Optional settings shared by the step functions.

    Attributes:
        verbosity: Output is echoed for NORMAL and VERBOSE, discarded otherwise.
        args: Extra arguments appended to ``make``.
        environment: Build environment; the current one when None.
        branch: Branch for ``clone``; None, "" and DEFAULT_BRANCH mean the default.
    """

    verbosity: Verbosity | str = Verbosity.QUIET
    args: str = ""
    environment: str | None = None
    branch: str | None = None

    @property
    def sink(self) -> OutputSink:
        if Verbosity.parse(self.verbosity) in (Verbosity.NORMAL, Verbosity.VERBOSE):
            return echo
        return ignore


def _run(
    command: str,
    sink: OutputSink,
    cwd: Path | None = None,
    message: str = STEP_FAILED,
) -> Result[None, StepError]:
    result = run_shell(command, sink, cwd=cwd)
    if isinstance(result, Err):
        return Err(StepError(message, command=command, returncode=result.error.returncode))
    return Ok(None)


def make(
    subcommand: str = "",
    options: CommandOptions | None = None,
    cwd: Path | None = None,
) -> Result[None, StepError]:
    """Run ``make`` in the working directory."""
    opts = options or CommandOptions()
    return _run(make_command(subcommand, opts.args), opts.sink, cwd)


def build_tool(
    subcommand: str,
    options: CommandOptions | None = None,
    config: RelmanConfig | None = None,
    cwd: Path | None = None,
) -> Result[None, StepError]:
    """Run the host build tool (``mix`` by default) in a given environment."""
    opts = options or CommandOptions()
    cfg = config or RelmanConfig()
    environment = opts.environment or current_env(cfg.env_var, cfg.default_env)
    command = build_tool_command(subcommand, environment, cfg.build_tool, cfg.env_var)
    return _run(command, opts.sink, cwd)


def download(url: str, destination: str, cwd: Path | None = None) -> Result[None, StepError]:
    return _run(download_command(url, destination), ignore, cwd)


def chmod(target: str, flags: str, cwd: Path | None = None) -> Result[None, StepError]:
    return _run(chmod_command(target, flags), ignore, cwd)


def clone(
    url: str,
    destination: str = "",
    options: CommandOptions | None = None,
    cwd: Path | None = None,
) -> Result[None, StepError]:
    """Clone a git repository to ``destination`` (or the current directory)."""
    opts = options or CommandOptions()
    return _run(clone_command(url, destination, opts.branch), ignore, cwd)


def git_describe(cwd: Path | None = None) -> Result[str, StepError]:
    """Describe the current revision, without a leading ``v``."""
    result = capture_shell(GIT_DESCRIBE, cwd=cwd)
    if isinstance(result, Err):
        return Err(StepError(STEP_FAILED, command=GIT_DESCRIBE, returncode=result.error.returncode))
    return Ok(strip_version_prefix(result.value))


def build_release(
    name: str,
    version: str = "",
    verbosity: Verbosity | str = Verbosity.NORMAL,
    upgrade: bool = False,
    dev_mode: bool = False,
    config: RelmanConfig | None = None,
    cwd: Path | None = None,
) -> Result[None, StepError]:
    """Build a release tarball with relx.

    Args:
        name: Release name (the project name).
        version: Release version; taken from ``git describe`` when empty.
        verbosity: relx output level; unknown values mean NORMAL.
        upgrade: Build a relup from the most recent prior release.
        dev_mode: Pass ``--dev-mode`` so relx symlinks instead of copying.
        config: Tool paths; defaults when None.
        cwd: Project root; the current directory when None.

    Returns:
        Ok(None) when relx succeeds, Err(StepError) with BUILD_FAILED when
        it fails, or a no-prior-release message when upgrading from nothing.
    """
    cfg = config or RelmanConfig()

    if version:
        resolved = version
    else:
        described = git_describe(cwd)
        if isinstance(described, Err):
            return Err(StepError(BUILD_FAILED, command=GIT_DESCRIBE, returncode=described.error.returncode))
        resolved = described.value

    upfrom: str | None = None
    if upgrade:
        last = most_recent_release(name, cwd, cfg)
        if isinstance(last, Err):
            return Err(StepError(f"{last.error.message} Cannot build an upgrade release."))
        upfrom = last.value

    command = relx_command(name, resolved, relx_level(verbosity), dev_mode, upfrom, cfg)
    return _run(command, echo, cwd, message=BUILD_FAILED)
