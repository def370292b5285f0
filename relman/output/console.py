"""Console reporter for release steps.

Status lines carry a ``==> `` prefix (notices do not) and a color per
severity: info green, warn and notice yellow, error red, debug plain.
Services depend on ``ConsoleProtocol`` so tests can swap in
``MockConsole``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from rich.console import Console

__all__ = [
    "PREFIX",
    "Severity",
    "ConsoleProtocol",
    "RichConsole",
    "MockConsole",
]

PREFIX = "==> "


class Severity(Enum):
    """Severity of a status line."""

    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    NOTICE = auto()
    ERROR = auto()

    def __str__(self) -> str:
        return self.name.lower()


_COLORS: dict[Severity, str] = {
    Severity.DEBUG: "",
    Severity.INFO: "green",
    Severity.WARN: "yellow",
    Severity.NOTICE: "yellow",
    Severity.ERROR: "red",
}


def _prefix(severity: Severity) -> str:
    return "" if severity is Severity.NOTICE else PREFIX


class ConsoleProtocol(Protocol):
    """Status output used by the CLI and release steps."""

    def debug(self, message: str) -> None:
        """Print an uncolored status line."""
        ...

    def info(self, message: str) -> None:
        """Print a status line in green."""
        ...

    def warn(self, message: str) -> None:
        """Print a warning in yellow."""
        ...

    def notice(self, message: str) -> None:
        """Print a notice in yellow, without the prefix."""
        ...

    def error(self, message: str) -> None:
        """Print an error in red."""
        ...


class RichConsole:
    """Console implementation using Rich.

    Colors are emitted only when Rich detects a terminal that supports them.
    """

    def __init__(self, console: Console | None = None) -> None:
        from rich.console import Console

        self._console = console or Console(highlight=False)

    def _emit(self, severity: Severity, message: str) -> None:
        from rich.markup import escape

        color = _COLORS[severity]
        body = escape(message)
        if color:
            body = f"[{color}]{body}[/{color}]"
        self._console.print(f"{_prefix(severity)}{body}", soft_wrap=True)

    def debug(self, message: str) -> None:
        self._emit(Severity.DEBUG, message)

    def info(self, message: str) -> None:
        self._emit(Severity.INFO, message)

    def warn(self, message: str) -> None:
        self._emit(Severity.WARN, message)

    def notice(self, message: str) -> None:
        self._emit(Severity.NOTICE, message)

    def error(self, message: str) -> None:
        self._emit(Severity.ERROR, message)


@dataclass
class OutputRecord:
    """A single line captured by MockConsole."""

    message: str
    severity: Severity


def _empty_outputs() -> list[OutputRecord]:
    return []


@dataclass
class MockConsole:
    """Console that records lines (with their prefix) instead of printing."""

    outputs: list[OutputRecord] = field(default_factory=_empty_outputs)

    def _record(self, severity: Severity, message: str) -> None:
        self.outputs.append(OutputRecord(f"{_prefix(severity)}{message}", severity))

    def debug(self, message: str) -> None:
        self._record(Severity.DEBUG, message)

    def info(self, message: str) -> None:
        self._record(Severity.INFO, message)

    def warn(self, message: str) -> None:
        self._record(Severity.WARN, message)

    def notice(self, message: str) -> None:
        self._record(Severity.NOTICE, message)

    def error(self, message: str) -> None:
        self._record(Severity.ERROR, message)

    # Test helpers

    @property
    def messages(self) -> list[str]:
        return [o.message for o in self.outputs]

    @property
    def text(self) -> str:
        return "\n".join(self.messages)

    def has_error(self) -> bool:
        return any(o.severity == Severity.ERROR for o in self.outputs)

    def count(self, severity: Severity) -> int:
        return sum(1 for o in self.outputs if o.severity == severity)
