from __future__ import annotations

import typer

from relman import __version__
from relman.core.errors import ErrorCode
from relman.cli.commands.build import build
from relman.cli.commands.install_root import install_root
from relman.cli.commands.releases import releases


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# Commands
app.command()(build)
app.command()(releases)
app.command("install-root")(install_root)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=int(ErrorCode.OK))


def main() -> None:
    app()
