"""Shared helpers for the CLI layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

import typer

from relval.core.errors import ErrorCode
from relval.core.result import Err, Result

if TYPE_CHECKING:
    from relval.cli.context import CLIContext


T = TypeVar("T")
E = TypeVar("E")


def exit_on_error(
    result: Result[T, E],
    ctx: CLIContext,
    error_code: ErrorCode = ErrorCode.FAILURE,
) -> None:
    """Exit with error if result is Err, otherwise return.

    Expects error objects to have 'message' and optional 'hint' attributes.
    """
    if isinstance(result, Err):
        error = result.error
        message: str = getattr(error, "message", str(error))
        hint: str | None = getattr(error, "hint", None)
        ctx.console.error(message)
        if hint:
            ctx.console.status(f"hint: {hint}")
        raise typer.Exit(code=int(error_code))
