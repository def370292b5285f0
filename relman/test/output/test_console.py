"""Tests for relman.output.console module."""

from __future__ import annotations

import io

from rich.console import Console

from relman.output.console import (
    ConsoleProtocol,
    MockConsole,
    RichConsole,
    Severity,
)


def _rich(color: bool) -> tuple[RichConsole, io.StringIO]:
    buffer = io.StringIO()
    console = Console(
        file=buffer,
        force_terminal=color,
        color_system="standard" if color else None,
        highlight=False,
        width=200,
    )
    return RichConsole(console), buffer


class TestSeverity:
    def test_str_conversion(self) -> None:
        assert str(Severity.DEBUG) == "debug"
        assert str(Severity.NOTICE) == "notice"

    def test_all_severities_exist(self) -> None:
        assert {s.name for s in Severity} == {"DEBUG", "INFO", "WARN", "NOTICE", "ERROR"}


class TestMockConsole:
    def test_prefixes(self) -> None:
        console = MockConsole()
        console.debug("a")
        console.info("b")
        console.warn("c")
        console.notice("d")
        console.error("e")

        assert console.messages == ["==> a", "==> b", "==> c", "d", "==> e"]

    def test_severities_recorded(self) -> None:
        console = MockConsole()
        console.warn("careful")
        console.error("broken")

        assert console.has_error()
        assert console.count(Severity.WARN) == 1
        assert console.text == "==> careful\n==> broken"

    def test_satisfies_protocol(self) -> None:
        console: ConsoleProtocol = MockConsole()
        console.info("ok")


class TestRichConsole:
    def test_plain_output(self) -> None:
        console, buffer = _rich(color=False)
        console.debug("Building release")
        console.info("Done")
        console.notice("Heads up")

        assert buffer.getvalue() == "==> Building release\n==> Done\nHeads up\n"

    def test_info_is_green(self) -> None:
        console, buffer = _rich(color=True)
        console.info("Done")

        out = buffer.getvalue()
        assert out.startswith("==> ")
        assert "\x1b[32mDone\x1b[0m" in out

    def test_warn_and_notice_are_yellow(self) -> None:
        console, buffer = _rich(color=True)
        console.warn("careful")
        console.notice("note")

        out = buffer.getvalue()
        assert "==> \x1b[33mcareful\x1b[0m" in out
        assert "\n\x1b[33mnote\x1b[0m" in out

    def test_error_is_red(self) -> None:
        console, buffer = _rich(color=True)
        console.error("Failed")
        assert "==> \x1b[31mFailed\x1b[0m" in buffer.getvalue()

    def test_debug_uncolored(self) -> None:
        console, buffer = _rich(color=True)
        console.debug("plain")
        assert buffer.getvalue() == "==> plain\n"

    def test_markup_in_message_is_literal(self) -> None:
        console, buffer = _rich(color=False)
        console.error("bad [red]tag[/red]")
        assert buffer.getvalue() == "==> bad [red]tag[/red]\n"
