from __future__ import annotations

import sys
from pathlib import Path

import click
import typer

from relval.cli._helpers import exit_on_error
from relval.cli.argv import normalize_argv
from relval.cli.context import build_context
from relval.core.errors import ErrorCode
from relval.core.options import resolve_options
from relval.core.result import Err
from relval.output.console import RichConsole, Style
from relval.services.validate import ReleaseValidationService
from relval.tracker.http import RealHttpClient

PROG_NAME = "release-validator"

app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    rich_markup_mode="rich",
)


@app.command(
    context_settings={
        "help_option_names": ["-h", "--help"],
        "ignore_unknown_options": True,
        "allow_extra_args": True,
    },
)
def validate(
    ctx: typer.Context,
    version: str | None = typer.Option(
        None, "--version", "-v", help="Target release version, e.g. 0.4.2 (required)"
    ),
    start: str | None = typer.Option(
        None, "--start", "-s", help="Commit or tag where the range starts (required)"
    ),
    end: str | None = typer.Option(None, "--end", "-e", help="End of the range [default: HEAD]"),
    repo: str | None = typer.Option(
        None, "--repo", "-r", help="Repository URL [default: canonical upstream]"
    ),
    branch: str | None = typer.Option(None, "--branch", "-b", help="Branch [default: master]"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Overwrite an existing workspace"),
    config_path: Path | None = typer.Option(None, "--config", "-c", help="TOML config file"),
) -> None:
    """Check that every issue referenced in START..END is Done and tagged for VERSION."""
    cli = build_context(config_path)

    for arg in ctx.args:
        if arg.startswith("-"):
            cli.console.error(f"unknown option: {arg}")
        else:
            cli.console.error(f"unexpected argument: {arg}")

    options = resolve_options(
        version=version,
        start=start,
        end=end,
        repo=repo,
        branch=branch,
        config=cli.config,
        assume_yes=yes,
    )
    if isinstance(options, Err):
        cli.console.status(ctx.get_usage(), Style.DEFAULT)
        cli.console.error(options.error.message)
        cli.console.status(f"Try '{ctx.command_path} --help' for help.")
        raise typer.Exit(code=int(ErrorCode.FAILURE))

    result = ReleaseValidationService(
        config=cli.config,
        console=cli.console,
        http=RealHttpClient(timeout=cli.config.tracker.timeout),
        confirm=lambda msg: typer.confirm(msg, default=False),
    ).run(options.value)

    exit_on_error(result, cli)


def main() -> None:
    """Console entry point; every failure exits 1, including click usage errors."""
    try:
        code = app(
            args=normalize_argv(sys.argv[1:]),
            prog_name=PROG_NAME,
            standalone_mode=False,
        )
    except click.UsageError as e:
        console = RichConsole()
        if e.ctx is not None:
            console.status(e.ctx.get_usage(), Style.DEFAULT)
        console.error(e.format_message())
        code = ErrorCode.FAILURE
    except click.Abort:
        RichConsole().error("aborted")
        code = ErrorCode.FAILURE
    sys.exit(int(code or ErrorCode.OK))
