"""
Guided tour of the Outcome and Maybe combinators.

``run_walkthrough`` exercises every combinator against ``divide`` and writes
one line per step into a ``Transcript``. Lines meant for the error stream
are tagged ``stderr``; the CLI routes them accordingly.

The walkthrough itself returns an Outcome: the ``let else`` step bails out
early with a Failure if its binding does not match, and the chained
``divide_and_multiply`` step forwards its failure to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from recourse.core.logging import get_logger
from recourse.core.maybe import Present
from recourse.core.outcome import Failure, Outcome, Success, render_tagged
from recourse.domain.arithmetic import divide, divide_and_multiply

logger = get_logger(__name__)

Stream = Literal["stdout", "stderr"]


@dataclass(frozen=True, slots=True)
class TranscriptLine:
    stream: Stream
    text: str


@dataclass
class Transcript:
    """Ordered lines produced by the walkthrough."""

    lines: list[TranscriptLine] = field(default_factory=list)

    def out(self, text: str) -> None:
        self.lines.append(TranscriptLine("stdout", text))

    def err(self, text: str) -> None:
        self.lines.append(TranscriptLine("stderr", text))

    def texts(self, stream: Stream | None = None) -> list[str]:
        return [line.text for line in self.lines if stream is None or line.stream == stream]


def run_walkthrough(
    transcript: Transcript,
    *,
    fallback: int = -1,
    multiplier: int = 2,
) -> Outcome[None, str]:
    """
    Run every demonstration step, appending to ``transcript``.

    Args:
        transcript: Receives the output lines
        fallback: Value produced by the ``unwrap_or_else`` step
        multiplier: Factor for the chained and mapped steps

    Returns:
        ``Success(None)`` when every step completes, otherwise a Failure
        describing the step that bailed out
    """
    # match on both variants
    match divide(10, 2):
        case Success(value):
            transcript.out(f"Success: {value}")
        case Failure(error):
            transcript.out(f"Error: {error}")

    # if-let: handle the success, fall through otherwise
    match divide(10, 2):
        case Success(value):
            transcript.out(f"if let success: {value}")
        case _:
            logger.debug("if_let_fell_through")
            transcript.err("if let error occurred")

    # let-else: bind or leave early
    match divide(20, 4):
        case Success(bound):
            pass
        case _:
            logger.debug("let_else_bailed_out")
            return Failure("let else encountered an error")
    transcript.out(f"let else success: {bound}")

    match divide(15, 3).ok():
        case Present(value):
            transcript.out(f"Converted to Option: {value}")

    match divide(10, 0).err():
        case Present(error):
            transcript.err(f"Handling error with Option: {error}")

    if divide(10, 2).is_ok():
        transcript.out("Division was successful.")

    if divide(10, 0).is_err():
        transcript.out("Division failed.")

    match divide_and_multiply(20, 4, multiplier):
        case Success(value):
            transcript.out(f"Final Result: {value}")
        case Failure(error):
            logger.debug("chained_step_failed", error=str(error))
            return Failure(str(error))

    transcript.out(f"Unwrapped Result: {divide(10, 2).unwrap()}")
    transcript.out(f"Value with fallback: {divide(10, 2).unwrap_or(0)}")

    def _provide_default(error: object) -> int:
        logger.debug("providing_default", error=str(error), fallback=fallback)
        transcript.err(f"Error occurred: {error}. Providing default value.")
        return fallback

    transcript.out(f"Computed Fallback: {divide(10, 0).unwrap_or_else(_provide_default)}")
    transcript.out(f"Expected Value: {divide(10, 2).expect('Division should succeed')}")

    mapped = divide(10, 2).map(lambda value: value * multiplier)
    transcript.out(f"Mapped Value Result: {render_tagged(mapped)}")

    mapped_err = divide(10, 0).map_err(lambda error: f"Custom error: {error}")
    transcript.out(f"Mapped Error Result: {render_tagged(mapped_err)}")

    return Success(None)


__all__ = ["Transcript", "TranscriptLine", "run_walkthrough"]
