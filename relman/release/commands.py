"""Command-line builders for release steps.

Pure functions: they only format strings. Running them is the job of
``relman.release.steps``. Empty arguments are dropped so that
``make_command("release")`` is ``"make release"`` without trailing spaces.
"""

from __future__ import annotations

from enum import Enum

from relman.core.config import RelmanConfig

__all__ = [
    "DEFAULT_BRANCH",
    "GIT_DESCRIBE",
    "Verbosity",
    "build_tool_command",
    "chmod_command",
    "clone_command",
    "download_command",
    "make_command",
    "relx_command",
    "relx_level",
    "strip_version_prefix",
]

# Branch marker meaning "whatever the remote's default branch is".
DEFAULT_BRANCH = ":default"

GIT_DESCRIBE = "git describe --always --tags"


class Verbosity(Enum):
    """How much output a step (and relx) should produce."""

    SILENT = 0
    QUIET = 1
    NORMAL = 2
    VERBOSE = 3

    def __str__(self) -> str:
        return self.name.lower()

    @classmethod
    def parse(cls, value: object) -> Verbosity:
        """Map a friendly name to a member, falling back to NORMAL."""
        if isinstance(value, Verbosity):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                return cls.NORMAL
        return cls.NORMAL


def relx_level(verbosity: object) -> int:
    """Return the relx ``-V`` level (0-3) for a verbosity; 2 when unknown."""
    return Verbosity.parse(verbosity).value


def _join(*parts: str) -> str:
    return " ".join(p for p in parts if p)


def make_command(subcommand: str = "", args: str = "") -> str:
    return _join("make", subcommand, args)


def build_tool_command(
    subcommand: str,
    environment: str,
    tool: str = "mix",
    env_var: str = "MIX_ENV",
) -> str:
    """Invoke the host build tool with its environment variable set."""
    return _join(f"{env_var}={environment}", tool, subcommand)


def download_command(url: str, destination: str) -> str:
    return f"wget -O {destination} {url}"


def chmod_command(target: str, flags: str) -> str:
    return f"chmod {flags} {target}"


def clone_command(url: str, destination: str = "", branch: str | None = None) -> str:
    """Clone ``url``; ``branch`` is ignored when empty or DEFAULT_BRANCH."""
    if not branch or branch == DEFAULT_BRANCH:
        return _join("git clone", url, destination)
    return _join("git clone --branch", branch, url, destination)


def relx_command(
    name: str,
    version: str,
    level: int,
    dev_mode: bool,
    upfrom: str | None = None,
    config: RelmanConfig | None = None,
) -> str:
    """Build the relx invocation for a release, or an upgrade when ``upfrom`` is set."""
    cfg = config or RelmanConfig()
    target = "release tar" if upfrom is None else "release relup tar"
    return _join(
        cfg.relx,
        target,
        f"-V {level}",
        f"--config {cfg.relx_config}",
        f"--relname {name}",
        f"--relvsn {version}",
        f"--output-dir {cfg.release_output_dir(name)}",
        "" if upfrom is None else f'--upfrom "{upfrom}"',
        "--dev-mode" if dev_mode else "",
    )


def strip_version_prefix(described: str) -> str:
    """Turn ``git describe`` output such as ``v1.2.0\\n`` into ``1.2.0``."""
    return described.strip().removeprefix("v")
