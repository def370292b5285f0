"""Install-root command - locate an executable's installation directory."""

from __future__ import annotations

import typer

from relman.cli.context import build_context
from relman.core.errors import ErrorCode
from relman.platform.paths import UnsupportedPathType, find_install_root


def install_root(
    executable: str | None = typer.Argument(None, help="Executable name (default from config)"),
) -> None:
    """Print the installation root of an executable found on PATH."""
    ctx = build_context()
    name = executable or ctx.config.executable

    try:
        root = find_install_root(name)
    except UnsupportedPathType as e:
        ctx.console.error(str(e))
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    if root is None:
        ctx.console.error(f"{name} not found on PATH")
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    typer.echo(root)
