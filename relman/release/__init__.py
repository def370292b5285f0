"""Release packaging: command builders, steps and prior releases."""

from .commands import DEFAULT_BRANCH, Verbosity
from .releases import NoPriorRelease, Release, list_releases, most_recent_release
from .steps import (
    BUILD_FAILED,
    STEP_FAILED,
    CommandOptions,
    StepError,
    build_release,
    build_tool,
    chmod,
    clone,
    download,
    git_describe,
    make,
)

__all__ = [
    "DEFAULT_BRANCH",
    "Verbosity",
    "NoPriorRelease",
    "Release",
    "list_releases",
    "most_recent_release",
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
