"""
Guarded 64-bit integer arithmetic returning Outcome values.

Division by zero and 64-bit overflow are domain failures: they come back as
``Failure`` values and never raise. Passing a non-integer, or an integer that
does not fit in a signed 64-bit word, is a programmer error and raises
(``TypeError`` / ``OperandRangeError``).

Examples:
    >>> divide(10, 2)
    Ok(5)
    >>> divide(10, 0)
    Err(<DivisionError.DIVIDE_BY_ZERO: 'Division by zero'>)
    >>> divide(-7, 2)
    Ok(-3)
    >>> divide_and_multiply(20, 4, 2)
    Ok(10)
"""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

from recourse.core.errors import OperandRangeError
from recourse.core.outcome import Failure, Outcome, Success


I64_MIN = -(2**63)
I64_MAX = 2**63 - 1


class DivisionError(str, Enum):
    """Reasons a division can fail. ``str()`` gives the message."""

    DIVIDE_BY_ZERO = "Division by zero"
    OVERFLOW = "Integer overflow on division"

    def __str__(self) -> str:
        return self.value


class MultiplicationError(str, Enum):
    """Reasons a multiplication can fail. ``str()`` gives the message."""

    OVERFLOW = "Integer overflow on multiplication"

    def __str__(self) -> str:
        return self.value


T = TypeVar("T")

#: Outcome of any guarded arithmetic step, e.g. ``ArithmeticOutcome[int]``.
ArithmeticOutcome = Outcome[T, DivisionError | MultiplicationError]


def _check_operand(operation: str, name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{operation}() {name} must be int, not {type(value).__name__}")
    if not I64_MIN <= value <= I64_MAX:
        raise OperandRangeError(
            f"{operation}() {name} {value} does not fit in a signed 64-bit integer"
        ).with_context(operation=operation, argument=name)


def _fits_i64(value: int) -> bool:
    return I64_MIN <= value <= I64_MAX


def divide(numerator: int, denominator: int) -> Outcome[int, DivisionError]:
    """
    Divide two 64-bit integers, truncating toward zero.

    Args:
        numerator: Dividend
        denominator: Divisor; zero yields ``Failure(DIVIDE_BY_ZERO)``

    Returns:
        ``Success(quotient)``, or a Failure for a zero divisor or for the
        single overflowing case ``I64_MIN / -1``
    """
    _check_operand("divide", "numerator", numerator)
    _check_operand("divide", "denominator", denominator)

    if denominator == 0:
        return Failure(DivisionError.DIVIDE_BY_ZERO)

    # Python's // floors; the sign is applied after dividing magnitudes
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        quotient = -quotient

    if not _fits_i64(quotient):
        return Failure(DivisionError.OVERFLOW)
    return Success(quotient)


def multiply(a: int, b: int) -> Outcome[int, MultiplicationError]:
    """
    Multiply two 64-bit integers, failing on overflow.

    Examples:
        >>> multiply(6, 7)
        Ok(42)
        >>> multiply(I64_MAX, 2).is_err()
        True
    """
    _check_operand("multiply", "a", a)
    _check_operand("multiply", "b", b)

    product = a * b
    if not _fits_i64(product):
        return Failure(MultiplicationError.OVERFLOW)
    return Success(product)


def divide_and_multiply(i: int, j: int, k: int) -> ArithmeticOutcome[int]:
    """Compute ``(i / j) * k``, stopping at the first failing step."""
    return divide(i, j).and_then(lambda quotient: multiply(quotient, k))


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
