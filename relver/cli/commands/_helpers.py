"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import typer

from relver.core.failures import extract_errors
from relver.output.console import Style

if TYPE_CHECKING:
    from relver.cli.context import CLIContext


def report_error(ctx: CLIContext, error: object) -> None:
    """Print every error held by ``error``.

    Expects error objects to have 'message' and optional 'hint' attributes.
    """
    for item in extract_errors(error):
        message: str = getattr(item, "message", str(item))
        hint: str | None = getattr(item, "hint", None)
        ctx.console.error(message)
        if hint:
            ctx.console.print(f"hint: {hint}", Style.DIM)


def exit_with_code(code: int) -> NoReturn:
    raise typer.Exit(code=code)
