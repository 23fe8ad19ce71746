"""
Structured error types for programmer errors.

Recourse draws a hard line between two kinds of failure:

- **Domain failures** are values. An operation that can fail returns a
  ``Failure`` (or an ``Absent``) and never raises. Their payloads are plain
  values such as ``DivisionError.DIVIDE_BY_ZERO``.
- **Programmer errors** are exceptions. Calling ``unwrap()`` on a ``Failure``
  or handing an out-of-range operand to a 64-bit operation is a bug in the
  caller, so it fails fast with a ``RecourseError`` subclass.

Every RecourseError carries:
- **Category:** What kind of misuse (usage, validation, internal)
- **Context:** Structured metadata (operation, operand, custom fields)
- **Cause:** Chained underlying exception for root cause analysis

Architecture:
    ::

        ┌─────────────────────────────────────────────────────┐
        │                   RecourseError                      │
        │            (category, context, cause)                │
        ├──────────────────────────┬──────────────────────────┤
        │  UnwrapError             │  OperandRangeError        │
        │  (USAGE)                 │  (VALIDATION, ValueError) │
        └──────────────────────────┴──────────────────────────┘

Examples:
    Adding context to an error:

    >>> error = UnwrapError("called unwrap() on a Failure value")
    >>> error.with_context(operation="unwrap", payload="'boom'")
    UnwrapError('called unwrap() on a Failure value', category=USAGE)
    >>> error.context.operation
    'unwrap'

    Serializing for logging:

    >>> OperandRangeError("numerator out of range").to_dict()["category"]
    'VALIDATION'

Guardrails:
    ❌ DON'T: Raise a RecourseError to report an expected failure
    ✅ DO: Return a Failure value and let the caller decide

    ❌ DON'T: Swallow the original exception
    ✅ DO: Pass it as cause= for error chaining
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """
    Categories for programmer errors.

    Attributes:
        USAGE: API misuse, such as unwrapping the wrong variant
        VALIDATION: Arguments outside the accepted domain
        INTERNAL: Bugs, unexpected state
    """

    USAGE = "USAGE"
    VALIDATION = "VALIDATION"
    INTERNAL = "INTERNAL"


@dataclass
class ErrorContext:
    """
    Structured metadata attached to a RecourseError.

    Examples:
        >>> ctx = ErrorContext(operation="divide", argument="numerator")
        >>> ctx.to_dict()
        {'operation': 'divide', 'argument': 'numerator'}

        >>> ctx = ErrorContext()
        >>> ctx.metadata["payload"] = "'boom'"
        >>> ctx.to_dict()
        {'payload': "'boom'"}

    Attributes:
        operation: Name of the operation that detected the misuse
        argument: Name of the offending argument, if any
        metadata: Additional key-value pairs
    """

    operation: str | None = None
    argument: str | None = None

    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for key in ["operation", "argument"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class RecourseError(Exception):
    """
    Base exception for all recourse programmer errors.

    Subclasses set ``default_category`` to classify themselves. The
    ``cause`` keyword chains an underlying exception both on the
    ``cause`` attribute and on ``__cause__`` so tracebacks show it.

    Examples:
        >>> error = RecourseError("Something went wrong")
        >>> error.category
        <ErrorCategory.INTERNAL: 'INTERNAL'>

        >>> try:
        ...     raise KeyError("missing")
        ... except KeyError as e:
        ...     error = RecourseError("lookup failed", cause=e)
        >>> error.cause
        KeyError('missing')
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: BaseException | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> RecourseError:
        """
        Add context to this error (fluent API).

        Usage:
            raise UnwrapError("called unwrap() on a Failure value").with_context(
                operation="unwrap",
                payload=repr(error),
            )
        """
        for key, value in kwargs.items():
            if key != "metadata" and hasattr(self.context, key):
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


class UnwrapError(RecourseError):
    """A fail-fast accessor was called on the wrong variant."""

    default_category = ErrorCategory.USAGE


class OperandRangeError(RecourseError, ValueError):
    """An integer operand does not fit the operation's fixed width."""

    default_category = ErrorCategory.VALIDATION


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "RecourseError",
    "UnwrapError",
    "OperandRangeError",
]
