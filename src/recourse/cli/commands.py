"""
CLI: ``recourse walkthrough`` and ``recourse divide``.
"""

from __future__ import annotations

import typer

from recourse.cli.utils import err_console, fail, output_outcome, output_transcript
from recourse.core.errors import OperandRangeError
from recourse.core.logging import LogContext, get_logger
from recourse.core.settings import get_settings
from recourse.domain.arithmetic import divide
from recourse.walkthrough import Transcript, run_walkthrough

logger = get_logger(__name__)


def walkthrough(
    fallback: int | None = typer.Option(None, "--fallback", help="Value for the computed fallback step."),
    multiplier: int | None = typer.Option(None, "--multiplier", help="Factor for the map step."),
) -> None:
    """Print the combinator walkthrough."""
    settings = get_settings()
    transcript = Transcript()
    with LogContext(command="walkthrough"):
        try:
            outcome = run_walkthrough(
                transcript,
                fallback=settings.fallback if fallback is None else fallback,
                multiplier=settings.multiplier if multiplier is None else multiplier,
            )
        except OperandRangeError as e:
            logger.debug("operand_rejected", **e.context.to_dict())
            fail(e)
            return
        output_transcript(transcript)
        if outcome.is_err():
            logger.warning("walkthrough_stopped", error=outcome.error)
            err_console.print(f"[bold red]Error[/bold red]: {outcome.error}")
            raise typer.Exit(code=1)


def divide_command(
    numerator: int = typer.Argument(..., help="Dividend (signed 64-bit)."),
    denominator: int = typer.Argument(..., help="Divisor (signed 64-bit)."),
    fallback: int | None = typer.Option(None, "--fallback", help="Value shown when the division fails."),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Divide two integers and show the outcome."""
    settings = get_settings()
    with LogContext(command="divide"):
        try:
            outcome = divide(numerator, denominator)
        except OperandRangeError as e:
            logger.debug("operand_rejected", **e.context.to_dict())
            fail(e)
            return

        outcome.inspect_err(lambda error: logger.info("division_failed", error=str(error)))
        output_outcome(
            outcome,
            fallback=settings.fallback if fallback is None else fallback,
            as_json=json_out,
        )
