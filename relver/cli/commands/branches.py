"""Branches command - show the version range each configured branch owns."""

from __future__ import annotations

from pathlib import Path

import typer

from relver.cli.commands._helpers import exit_with_code, report_error
from relver.cli.context import build_context
from relver.core.config import load_config
from relver.core.errors import ErrorCode
from relver.core.result import Err, Ok
from relver.services.branches import branches_from_config, plan_branches


def branches(
    config: Path | None = typer.Option(None, "--config", help="Path to release.toml"),
) -> None:
    """Plan the release range of every configured branch."""
    ctx = build_context(config)

    match load_config(ctx.config_path):
        case Ok(loaded):
            pass
        case Err(e):
            report_error(ctx, e)
            code = ErrorCode.IO_ERROR if e.kind == "io" else ErrorCode.CONFIG_ERROR
            exit_with_code(int(code))

    if not loaded.branches:
        ctx.console.warning(f"no branches configured in {ctx.config_path}")
        return

    result = branches_from_config(loaded).flat_map(plan_branches)
    match result:
        case Ok(plans):
            for plan in plans:
                ctx.console.header(plan.name)
                ctx.console.field("channel", plan.channel)
                ctx.console.field("range", plan.range)
                ctx.console.field("first", plan.first)
                ctx.console.field("latest", plan.latest)
        case Err(e):
            report_error(ctx, e)
            exit_with_code(int(ErrorCode.CONFIG_ERROR))
