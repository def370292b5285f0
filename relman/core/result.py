"""Result type for release steps.

Every process invocation in relman either succeeds or fails with a
human-readable message. Instead of raising, step functions return
``Ok(value)`` or ``Err(error)`` and the caller decides whether to abort.

Usage:
    match build_release("myapp", "", Verbosity.NORMAL, upgrade=False, dev_mode=False):
        case Ok():
            console.info("Release built")
        case Err(error):
            console.error(error.message)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A successful outcome.

    Attributes:
        value: The success value (``None`` for steps with no output).
    """

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """A failed outcome.

    Attributes:
        error: The error value.
    """

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result: TypeAlias = Ok[T] | Err[E]
