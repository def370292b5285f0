"""Scoped access to the build environment (``MIX_ENV`` by default).

Usage:
    with with_env("prod"):
        build_release("myapp", "", Verbosity.NORMAL, upgrade=False, dev_mode=False)
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import contextmanager

from .config import DEFAULT_ENV, DEFAULT_ENV_VAR

__all__ = ["current_env", "with_env"]


def current_env(env_var: str = DEFAULT_ENV_VAR, default: str = DEFAULT_ENV) -> str:
    """Return the active build environment."""
    return os.environ.get(env_var) or default


@contextmanager
def with_env(env: str, env_var: str = DEFAULT_ENV_VAR) -> Iterator[str]:
    """Run a block with the build environment set to ``env``.

    The previous value is restored on exit, including when the block
    raises. A variable that was unset before is removed again.
    """
    previous = os.environ.get(env_var)
    os.environ[env_var] = env
    try:
        yield env
    finally:
        if previous is None:
            os.environ.pop(env_var, None)
        else:
            os.environ[env_var] = previous
