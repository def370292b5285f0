"""Platform layer: shell execution and filesystem paths."""

from .paths import (
    UnsupportedPathType,
    find_install_root,
    resolve_real_path,
)
from .process import (
    OutputSink,
    ProcessError,
    capture_shell,
    echo,
    ignore,
    run_shell,
)

__all__ = [
    # paths
    "UnsupportedPathType",
    "find_install_root",
    "resolve_real_path",
    # process
    "OutputSink",
    "ProcessError",
    "capture_shell",
    "echo",
    "ignore",
    "run_shell",
]
