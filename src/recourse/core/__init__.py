"""Recourse Core -- the Outcome and Maybe containers.

Architecture::

    errors.py      Programmer-error hierarchy (RecourseError, UnwrapError)
    maybe.py       Maybe[T] (Present / Absent)
    outcome.py     Outcome[T, E] (Success / Failure) and utilities
    logging.py     structlog configuration for front ends
    settings.py    pydantic-settings configuration (RECOURSE_ prefix)
"""

from recourse.core.errors import (
    ErrorCategory,
    ErrorContext,
    OperandRangeError,
    RecourseError,
    UnwrapError,
)
from recourse.core.maybe import ABSENT, Absent, Maybe, Present, maybe_from_optional
from recourse.core.outcome import (
    Failure,
    Outcome,
    Success,
    collect_outcomes,
    outcome_from_optional,
    partition_outcomes,
    render_tagged,
    try_outcome,
)

__all__ = [
    # Errors
    "ErrorCategory",
    "ErrorContext",
    "RecourseError",
    "UnwrapError",
    "OperandRangeError",
    # Maybe
    "Maybe",
    "Present",
    "Absent",
    "ABSENT",
    "maybe_from_optional",
    # Outcome
    "Outcome",
    "Success",
    "Failure",
    "try_outcome",
    "outcome_from_optional",
    "collect_outcomes",
    "partition_outcomes",
    "render_tagged",
]
