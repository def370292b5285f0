"""Previously built releases, read from the release output directory.

Layout::

    rel/<project>/releases/
        0.0.1/
        0.0.2/
        RELEASES        # relx manifest, not a version

Versions are compared as plain strings, so ``"0.0.2"`` is considered more
recent than ``"0.0.10"``. Existing release trees rely on this ordering.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from relman.core.config import RelmanConfig
from relman.core.result import Err, Ok, Result

__all__ = [
    "MANIFEST_NAME",
    "NoPriorRelease",
    "Release",
    "list_releases",
    "most_recent_release",
    "releases_dir",
]

MANIFEST_NAME = "RELEASES"


@dataclass(frozen=True, slots=True)
class Release:
    project: str
    version: str


@dataclass(frozen=True, slots=True)
class NoPriorRelease:
    """No previous release exists to upgrade from."""

    project: str

    @property
    def message(self) -> str:
        return f"No prior release found for {self.project}."

    def __str__(self) -> str:
        return self.message


def releases_dir(project: str, root: Path | None = None, config: RelmanConfig | None = None) -> Path:
    cfg = config or RelmanConfig()
    base = root if root is not None else Path.cwd()
    return base / cfg.output_dir / project / "releases"


def list_releases(
    project: str,
    root: Path | None = None,
    config: RelmanConfig | None = None,
) -> list[Release]:
    """List the releases built so far for ``project``, in no particular order.

    Returns an empty list when the releases directory does not exist.
    """
    path = releases_dir(project, root, config)
    if not path.is_dir():
        return []
    return [
        Release(project, entry.name)
        for entry in path.iterdir()
        if entry.is_dir() and entry.name != MANIFEST_NAME
    ]


def most_recent_release(
    project: str,
    root: Path | None = None,
    config: RelmanConfig | None = None,
) -> Result[str, NoPriorRelease]:
    """Return the greatest version string among prior releases."""
    releases = sorted(list_releases(project, root, config), key=lambda r: r.version, reverse=True)
    if not releases:
        return Err(NoPriorRelease(project))
    return Ok(releases[0].version)
