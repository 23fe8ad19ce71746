"""Domain operations built on Outcome."""

from recourse.domain.arithmetic import (
    I64_MAX,
    ArithmeticOutcome,
    I64_MIN,
    DivisionError,
    MultiplicationError,
    divide,
    divide_and_multiply,
    multiply,
)

__all__ = [
    "I64_MIN",
    "I64_MAX",
    "DivisionError",
    "MultiplicationError",
    "ArithmeticOutcome",
    "divide",
    "multiply",
    "divide_and_multiply",
]
