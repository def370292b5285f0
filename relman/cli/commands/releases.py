"""Releases command - list versions built so far."""

from __future__ import annotations

import typer

from relman.cli.context import CLIContext, build_context
from relman.core.errors import ErrorCode
from relman.core.result import Err
from relman.release.releases import list_releases, most_recent_release, releases_dir


def _print_latest(name: str, ctx: CLIContext) -> None:
    result = most_recent_release(name, ctx.root, ctx.config)
    if isinstance(result, Err):
        ctx.console.error(result.error.message)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))
    typer.echo(result.value)


def _print_all(name: str, ctx: CLIContext) -> None:
    found = sorted(list_releases(name, ctx.root, ctx.config), key=lambda r: r.version, reverse=True)
    if not found:
        ctx.console.notice(f"No releases found for {name}")
        return
    for release in found:
        typer.echo(release.version)


def releases(
    name: str = typer.Argument(..., help="Release name"),
    latest: bool = typer.Option(False, "--latest", help="Only print the most recent version"),
) -> None:
    """List prior releases, most recent first."""
    ctx = build_context()

    try:
        if latest:
            _print_latest(name, ctx)
        else:
            _print_all(name, ctx)
    except OSError as e:
        path = releases_dir(name, ctx.root, ctx.config)
        ctx.console.error(f"Cannot read {path}: {e.strerror or e}")
        raise typer.Exit(code=int(ErrorCode.IO_ERROR))
