"""
Root Typer application for the recourse CLI.
"""

from __future__ import annotations

import typer
from pydantic import ValidationError
from rich.markup import escape
from typer import Typer

from recourse.cli.utils import err_console
from recourse.core.logging import configure_logging
from recourse.core.settings import get_settings

app = Typer(
    name="recourse",
    help="recourse — recoverable computations with Outcome and Maybe.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        from recourse import __version__

        typer.echo(f"recourse {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(  # noqa: UP007
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="Override RECOURSE_LOG_LEVEL."),
    json_logs: bool | None = typer.Option(
        None, "--json-logs/--console-logs", help="Override RECOURSE_JSON_LOGS."
    ),
) -> None:
    """recourse CLI — walk through and try out the combinators."""
    try:
        settings = get_settings()
    except ValidationError as e:
        err_console.print(f"[bold red]Error[/bold red] (configuration): {escape(str(e))}")
        raise typer.Exit(code=2) from e
    try:
        configure_logging(
            level=log_level or settings.log_level,
            json_format=settings.json_logs if json_logs is None else json_logs,
        )
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level") from e


# ── Command registration ─────────────────────────────────────────────────

from recourse.cli.commands import divide_command, walkthrough  # noqa: E402

app.command("walkthrough")(walkthrough)
app.command("divide")(divide_command)


def run() -> None:
    """Console-script entry point."""
    app()
