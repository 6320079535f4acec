from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from relval.core.config import Config, default_config_path, load_config, load_config_or_default
from relval.core.errors import ErrorCode
from relval.core.result import Err
from relval.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: Config
    console: ConsoleProtocol


def build_context(config_path: Path | None = None) -> CLIContext:
    """Load config and set up the console.

    An explicit ``config_path`` must load; the implicit default path is
    optional and falls back to built-in defaults.
    """
    console = RichConsole()

    if config_path is None:
        return CLIContext(config=load_config_or_default(default_config_path()), console=console)

    result = load_config(config_path.expanduser())
    if isinstance(result, Err):
        console.error(result.error.message)
        raise typer.Exit(code=int(ErrorCode.FAILURE))

    return CLIContext(config=result.value, console=console)
