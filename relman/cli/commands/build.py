"""Build command - package a release (or an upgrade) with relx."""

from __future__ import annotations

import typer

from relman.cli.context import build_context
from relman.core.build_env import current_env, with_env
from relman.core.errors import ErrorCode
from relman.core.result import Err
from relman.release.commands import Verbosity
from relman.release.steps import build_release


def build(
    name: str = typer.Argument(..., help="Release name (usually the project name)"),
    version: str = typer.Option("", "--version", help="Release version (default: git describe)"),
    verbosity: str = typer.Option(
        "normal", "--verbosity", help="silent, quiet, normal or verbose"
    ),
    upgrade: bool = typer.Option(False, "--upgrade", help="Build a relup from the last release"),
    dev: bool = typer.Option(False, "--dev", help="Symlink applications instead of copying"),
    env: str | None = typer.Option(None, "--env", help="Build environment (default: current)"),
) -> None:
    """Build a release tarball."""
    ctx = build_context()
    console = ctx.console
    environment = env or current_env(ctx.config.env_var, ctx.config.default_env)

    console.debug(f"Building release {name} ({environment})...")
    with with_env(environment, ctx.config.env_var):
        result = build_release(
            name,
            version,
            Verbosity.parse(verbosity),
            upgrade=upgrade,
            dev_mode=dev,
            config=ctx.config,
            cwd=ctx.root,
        )

    if isinstance(result, Err):
        console.error(result.error.message)
        raise typer.Exit(code=int(ErrorCode.BUILD_ERROR))

    console.info(f"Your release is ready in {ctx.config.release_output_dir(name)}")
