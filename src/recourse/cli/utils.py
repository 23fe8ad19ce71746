"""
CLI utility helpers — output formatting.
"""

from __future__ import annotations

import json
from typing import Any

import typer
from rich.console import Console

from recourse.core.errors import RecourseError
from recourse.core.outcome import Outcome, render_tagged
from recourse.walkthrough import Transcript

console = Console()
err_console = Console(stderr=True)


def output_transcript(transcript: Transcript) -> None:
    """Echo transcript lines to their streams, in order."""
    for line in transcript.lines:
        typer.echo(line.text, err=line.stream == "stderr")


def output_outcome(
    outcome: Outcome[Any, Any],
    *,
    fallback: int,
    as_json: bool = False,
) -> None:
    """Render an outcome and its ``unwrap_or(fallback)`` value."""
    if as_json:
        payload = outcome.to_dict()
        payload["value_or_fallback"] = outcome.unwrap_or(fallback)
        console.print_json(json.dumps(payload, default=str))
        return

    typer.echo(f"outcome: {render_tagged(outcome)}")
    typer.echo(f"value: {outcome.unwrap_or(fallback)}")


def fail(error: RecourseError, *, code: int = 2) -> None:
    """Report a programmer error and exit with ``code``."""
    err_console.print(f"[bold red]Error[/bold red] ({error.category.value}): {error.message}")
    raise typer.Exit(code=code)
