"""
Outcome[T, E] envelope for consistent success/failure handling.

An operation that may fail returns ``Success(value)`` or ``Failure(error)``
instead of raising. Failures are ordinary values: they flow through ``map``
chains untouched, can be rewrapped with ``map_err``, recovered with
``or_else`` or replaced with ``unwrap_or``. The caller, not the operation,
decides how a failure is surfaced.

Manifesto:
    - **Errors as values:** Expected failures never use raise/except
    - **Any error payload:** ``E`` may be an enum member, a string or an
      exception; nothing forces an Exception subclass
    - **Functional composition:** Chain with map/and_then without nested
      try/except blocks
    - **Fail-fast accessors for bugs:** unwrap()/expect() on the wrong
      variant raise UnwrapError, which is a programmer error

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────────┐
        │                     Outcome[T, E]                            │
        │                     (Type Alias)                             │
        ├─────────────────┬─────────────────┬─────────────────────────┤
        │   Success[T]    │   Failure[E]    │     Utilities           │
        ├─────────────────┼─────────────────┼─────────────────────────┤
        │ • value: T      │ • error: E      │ • try_outcome()         │
        │ • map()         │ • map_err()     │ • collect_outcomes()    │
        │ • and_then()    │ • or_else()     │ • partition_outcomes()  │
        │ • unwrap()      │ • unwrap_or()   │ • outcome_from_optional │
        │ • ok() → Maybe  │ • err() → Maybe │ • render_tagged()       │
        └─────────────────┴─────────────────┴─────────────────────────┘

Examples:
    >>> from recourse.core.outcome import Success, Failure, Outcome
    >>> def parse_port(raw: str) -> Outcome[int, str]:
    ...     if not raw.isdigit():
    ...         return Failure(f"not a number: {raw}")
    ...     return Success(int(raw))
    >>> match parse_port("8080"):
    ...     case Success(port):
    ...         print(f"port {port}")
    ...     case Failure(error):
    ...         print(f"error {error}")
    port 8080
    >>> parse_port("http").map(lambda p: p + 1).unwrap_or(80)
    80

Rendering:
    ``str()`` gives the bare payload, ``repr()`` gives the tagged form::

        str(Success(5))    -> "5"
        repr(Success(5))   -> "Ok(5)"
        repr(Failure("x")) -> "Err('x')"

Guardrails:
    ❌ DON'T: Call unwrap() without knowing the variant
    ✅ DO: Use unwrap_or() or pattern matching for safe extraction

    ❌ DON'T: Raise exceptions inside map() to signal failure
    ✅ DO: Return a Failure from an and_then() step
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, Iterable, TypeVar

from recourse.core.errors import UnwrapError
from recourse.core.maybe import ABSENT, Maybe, Present


T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


def _payload_to_dict(payload: Any) -> Any:
    """Render a failure payload for to_dict()."""
    if hasattr(payload, "to_dict"):
        return payload.to_dict()
    if isinstance(payload, Enum):
        return {
            "error_type": type(payload).__name__,
            "code": payload.name,
            "message": str(payload),
        }
    if isinstance(payload, BaseException):
        return {
            "error_type": type(payload).__name__,
            "message": str(payload),
        }
    return payload


def _unwrap_error(message: str, operation: str, payload: Any) -> UnwrapError:
    cause = payload if isinstance(payload, BaseException) else None
    error = UnwrapError(message, cause=cause)
    error.with_context(operation=operation, payload=repr(payload))
    return error


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """
    Successful outcome containing a value.

    Examples:
        >>> Success(10).map(lambda x: x * 2)
        Ok(20)
        >>> Success(10).map_err(lambda e: f"wrapped: {e}")
        Ok(10)
        >>> Success(10).ok()
        Present(10)
        >>> Success(10).err()
        Absent()
    """

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Get the value. Safe for Success."""
        return self.value

    def expect(self, message: str) -> T:
        """Get the value. Safe for Success."""
        return self.value

    def unwrap_err(self) -> Any:
        """Raise UnwrapError: there is no error to return."""
        raise _unwrap_error("called unwrap_err() on a Success value", "unwrap_err", self.value)

    def unwrap_or(self, default: T) -> T:
        """Get value or default (always returns value for Success)."""
        return self.value

    def unwrap_or_else(self, f: Callable[[Any], T]) -> T:
        """Get value or call f with error (always returns value for Success)."""
        return self.value

    def map(self, f: Callable[[T], U]) -> Outcome[U, Any]:
        """Transform the value."""
        return Success(f(self.value))

    def map_err(self, f: Callable[[Any], F]) -> Outcome[T, F]:
        """No-op for Success."""
        return self

    def flat_map(self, f: Callable[[T], Outcome[U, E]]) -> Outcome[U, E]:
        """Chain to another Outcome-returning function."""
        return f(self.value)

    def and_then(self, f: Callable[[T], Outcome[U, E]]) -> Outcome[U, E]:
        """Alias for flat_map."""
        return f(self.value)

    def or_else(self, f: Callable[[Any], Outcome[T, F]]) -> Outcome[T, F]:
        """Return self; f is never called."""
        return self

    def inspect(self, f: Callable[[T], None]) -> Outcome[T, Any]:
        """Call f with value for side effects, return self."""
        f(self.value)
        return self

    def inspect_err(self, f: Callable[[Any], None]) -> Outcome[T, Any]:
        """No-op for Success."""
        return self

    def to_maybe(self) -> Maybe[T]:
        """Project to Present(value)."""
        return Present(self.value)

    def ok(self) -> Maybe[T]:
        """Alias for to_maybe."""
        return Present(self.value)

    def err(self) -> Maybe[Any]:
        """Absent: a Success has no error."""
        return ABSENT

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"ok": True, "value": self.value}

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Failure(Generic[E]):
    """
    Failed outcome containing an error payload.

    ``map`` and ``and_then`` return this same Failure unchanged; ``map_err``
    and ``or_else`` are the places a failure can be rewritten or recovered.

    Examples:
        >>> Failure("boom").map(lambda x: x * 2)
        Err('boom')
        >>> Failure("boom").map_err(str.upper)
        Err('BOOM')
        >>> Failure("boom").unwrap_or(-1)
        -1
        >>> Failure("boom").ok()
        Absent()
    """

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> Any:
        """Raise UnwrapError. Use only when you're sure it's Success."""
        raise _unwrap_error("called unwrap() on a Failure value", "unwrap", self.error)

    def expect(self, message: str) -> Any:
        """Raise UnwrapError carrying message."""
        raise _unwrap_error(message, "expect", self.error)

    def unwrap_err(self) -> E:
        """Get the error. Safe for Failure."""
        return self.error

    def unwrap_or(self, default: T) -> T:
        """Get default since this is Failure."""
        return default

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """Call f with error to get value."""
        return f(self.error)

    def map(self, f: Callable[[Any], U]) -> Outcome[U, E]:
        """No-op for Failure."""
        return self

    def map_err(self, f: Callable[[E], F]) -> Outcome[Any, F]:
        """Transform the error."""
        return Failure(f(self.error))

    def flat_map(self, f: Callable[[Any], Outcome[U, E]]) -> Outcome[U, E]:
        """No-op for Failure."""
        return self

    def and_then(self, f: Callable[[Any], Outcome[U, E]]) -> Outcome[U, E]:
        """No-op for Failure."""
        return self

    def or_else(self, f: Callable[[E], Outcome[T, F]]) -> Outcome[T, F]:
        """Call f with error to try recovery."""
        return f(self.error)

    def inspect(self, f: Callable[[Any], None]) -> Outcome[Any, E]:
        """No-op for Failure."""
        return self

    def inspect_err(self, f: Callable[[E], None]) -> Outcome[Any, E]:
        """Call f with error for side effects, return self."""
        f(self.error)
        return self

    def to_maybe(self) -> Maybe[Any]:
        """Project to Absent, discarding the error."""
        return ABSENT

    def ok(self) -> Maybe[Any]:
        """Alias for to_maybe."""
        return ABSENT

    def err(self) -> Maybe[E]:
        """Present(error)."""
        return Present(self.error)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"ok": False, "error": _payload_to_dict(self.error)}

    def __str__(self) -> str:
        return str(self.error)

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Outcome = Success[T] | Failure[E]


# =============================================================================
# CONSTRUCTORS AND UTILITIES
# =============================================================================


def try_outcome(
    f: Callable[[], T],
    *exc_types: type[Exception],
) -> Outcome[T, Exception]:
    """
    Execute a function and capture raised exceptions as a Failure.

    Only the listed exception types are captured (``Exception`` when none
    are given); anything else propagates.

    Examples:
        >>> import json
        >>> try_outcome(lambda: json.loads('{"a": 1}'))
        Ok({'a': 1})
        >>> try_outcome(lambda: json.loads("nope"), ValueError).is_err()
        True

    Args:
        f: Zero-argument callable that may raise
        exc_types: Exception types to capture

    Returns:
        Success with f()'s return value, or Failure with the exception
    """
    catch = exc_types or (Exception,)
    try:
        return Success(f())
    except catch as e:
        return Failure(e)


def outcome_from_optional(value: T | None, error: E) -> Outcome[T, E]:
    """
    Convert an optional value to Outcome.

    Examples:
        >>> outcome_from_optional({"a": 1}.get("a"), "missing a")
        Ok(1)
        >>> outcome_from_optional({"a": 1}.get("b"), "missing b")
        Err('missing b')
    """
    if value is None:
        return Failure(error)
    return Success(value)


def collect_outcomes(outcomes: Iterable[Outcome[T, E]]) -> Outcome[list[T], E]:
    """
    Collect outcomes into an Outcome of list (fail-fast).

    Iteration stops at the first Failure, which is returned as-is.

    Examples:
        >>> collect_outcomes([Success(1), Success(2)])
        Ok([1, 2])
        >>> collect_outcomes([Success(1), Failure("a"), Failure("b")])
        Err('a')
    """
    values = []
    for outcome in outcomes:
        match outcome:
            case Success(value):
                values.append(value)
            case Failure():
                return outcome
    return Success(values)


def partition_outcomes(
    outcomes: Iterable[Outcome[T, E]],
) -> tuple[list[T], list[E]]:
    """
    Partition outcomes into success values and failure payloads.

    Examples:
        >>> partition_outcomes([Success(1), Failure("a"), Success(2)])
        ([1, 2], ['a'])
    """
    values = []
    errors = []
    for outcome in outcomes:
        match outcome:
            case Success(value):
                values.append(value)
            case Failure(error):
                errors.append(error)
    return values, errors


def _render_payload(payload: Any) -> str:
    if isinstance(payload, str) and not isinstance(payload, Enum):
        return json.dumps(payload, ensure_ascii=False)
    return str(payload)


def render_tagged(outcome: Outcome[Any, Any]) -> str:
    """
    Render an outcome with its tag for diagnostic output.

    String payloads are double-quoted, everything else uses ``str()``.
    Quoting goes through ``json.dumps``, so control characters use JSON
    escapes (``"\\u0001"``) and non-ASCII text is kept as is.

    Examples:
        >>> render_tagged(Success(10))
        'Ok(10)'
        >>> render_tagged(Failure("Custom error: Division by zero"))
        'Err("Custom error: Division by zero")'
    """
    match outcome:
        case Success(value):
            return f"Ok({_render_payload(value)})"
        case Failure(error):
            return f"Err({_render_payload(error)})"
    raise TypeError(f"expected Success or Failure, got {type(outcome).__name__}")


__all__ = [
    # Types
    "Outcome",
    "Success",
    "Failure",
    # Constructors
    "try_outcome",
    "outcome_from_optional",
    # Collectors
    "collect_outcomes",
    "partition_outcomes",
    # Rendering
    "render_tagged",
]
