from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from relman.core.config import RelmanConfig, load_config_or_default
from relman.core.errors import ErrorCode
from relman.core.result import Err
from relman.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    root: Path
    config: RelmanConfig
    console: ConsoleProtocol


def build_context() -> CLIContext:
    root = Path.cwd()
    console = RichConsole()

    config_result = load_config_or_default(root)
    if isinstance(config_result, Err):
        console.error(config_result.error.message)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    return CLIContext(root=root, config=config_result.value, console=console)
