from __future__ import annotations

import typer

from relver import __version__
from relver.cli.commands.branches import branches
from relver.cli.commands.versions import bounds, earliest, latest, tag


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


app.command()(bounds)
app.command()(latest)
app.command()(earliest)
app.command()(tag)
app.command()(branches)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit.",
        callback=_print_version,
        is_eager=True,
    ),
) -> None:
    """Resolve version ranges and release bounds across branches."""


def main() -> None:
    app()
