"""Locate an executable's installation root through a symlink."""

from __future__ import annotations

import os
import shutil
import stat

__all__ = ["UnsupportedPathType", "find_install_root", "resolve_real_path"]

DEFAULT_SUFFIX = "/bin/elixir"


class UnsupportedPathType(ValueError):
    """Raised for entries that are neither regular files nor symlinks."""

    def __init__(self, path: str) -> None:
        super().__init__(f"not a regular file or symlink: {path}")
        self.path = path


def resolve_real_path(path: str, suffix: str = DEFAULT_SUFFIX) -> str:
    """Follow one level of symlink indirection and strip ``suffix``.

    A regular file is returned as is. A symlink with an absolute target
    yields the target; a relative target is joined to the directory
    containing the link and normalized. ``suffix`` is then removed from
    the result, which turns ``/usr/local/bin/elixir`` into ``/usr/local``.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        UnsupportedPathType: For directories, devices, sockets and the like.
    """
    mode = os.lstat(path).st_mode

    if stat.S_ISREG(mode):
        real = path
    elif stat.S_ISLNK(mode):
        target = os.readlink(path)
        if os.path.isabs(target):
            real = target
        else:
            real = os.path.abspath(os.path.join(os.path.dirname(path), target))
    else:
        raise UnsupportedPathType(path)

    return real.replace(suffix, "")


def find_install_root(executable: str = "elixir") -> str | None:
    """Return the installation root of ``executable`` found on PATH.

    None when the executable is not on PATH.
    """
    found = shutil.which(executable)
    if found is None:
        return None
    return resolve_real_path(found, suffix=f"/bin/{executable}")
