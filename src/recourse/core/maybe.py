"""
Maybe[T] for values that may be missing.

``Maybe`` is the "present or nothing" half of recourse. It carries no reason
for absence; when a reason matters, promote it to an ``Outcome`` with
``to_outcome(err)`` and supply the missing detail yourself.

Architecture:
    ::

        ┌──────────────────────────────────────────────────────┐
        │                     Maybe[T]                          │
        │                   (Type Alias)                        │
        ├──────────────────────────┬───────────────────────────┤
        │      Present[T]          │        Absent             │
        ├──────────────────────────┼───────────────────────────┤
        │ • value: T               │ • (no payload)            │
        │ • map() / flat_map()     │ • map() → no-op           │
        │ • filter()               │ • or_else()               │
        │ • unwrap_or()            │ • unwrap_or() → default   │
        │ • to_outcome(err)        │ • to_outcome(err) → Fail  │
        └──────────────────────────┴───────────────────────────┘

Examples:
    >>> from recourse.core.maybe import Present, Absent
    >>> Present(3).map(lambda x: x + 1)
    Present(4)
    >>> Absent().unwrap_or(0)
    0
    >>> match Present("x"):
    ...     case Present(value):
    ...         print(value)
    ...     case Absent():
    ...         print("nothing")
    x

Guardrails:
    ❌ DON'T: Use ``None`` as a stand-in for Absent inside a Maybe
    ✅ DO: ``Present(None)`` is a real value; use ``Absent()`` for nothing
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from recourse.core.errors import UnwrapError

if TYPE_CHECKING:
    from recourse.core.outcome import Outcome


T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Present(Generic[T]):
    """
    A Maybe that holds a value.

    Examples:
        >>> Present(2).filter(lambda x: x > 1)
        Present(2)
        >>> Present(2).to_outcome("missing")
        Ok(2)
        >>> str(Present(2))
        '2'
    """

    value: T

    def is_present(self) -> bool:
        return True

    def is_absent(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Get the value. Safe for Present."""
        return self.value

    def expect(self, message: str) -> T:
        """Get the value. Safe for Present."""
        return self.value

    def unwrap_or(self, default: T) -> T:
        """Get value or default (always returns value for Present)."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """Get value or call f (always returns value for Present)."""
        return self.value

    def map(self, f: Callable[[T], U]) -> Maybe[U]:
        """Transform the value."""
        return Present(f(self.value))

    def flat_map(self, f: Callable[[T], Maybe[U]]) -> Maybe[U]:
        """Chain to another Maybe-returning function."""
        return f(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Maybe[T]:
        """Keep the value only if predicate holds."""
        if predicate(self.value):
            return self
        return Absent()

    def or_else(self, f: Callable[[], Maybe[T]]) -> Maybe[T]:
        """Return self; f is never called."""
        return self

    def to_outcome(self, err: E) -> Outcome[T, E]:
        """Promote to Success, ignoring err."""
        from recourse.core.outcome import Success

        return Success(self.value)

    def to_outcome_else(self, f: Callable[[], E]) -> Outcome[T, E]:
        """Promote to Success; f is never called."""
        from recourse.core.outcome import Success

        return Success(self.value)

    def to_optional(self) -> T | None:
        return self.value

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"present": True, "value": self.value}

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"Present({self.value!r})"


@dataclass(frozen=True, slots=True)
class Absent:
    """
    A Maybe with nothing in it.

    All Absent instances are equal, so ``Absent()`` can be compared and
    matched freely. ``str(Absent())`` is the empty string.

    Examples:
        >>> Absent().map(lambda x: x * 2)
        Absent()
        >>> Absent().to_outcome("missing")
        Err('missing')
    """

    def is_present(self) -> bool:
        return False

    def is_absent(self) -> bool:
        return True

    def unwrap(self) -> Any:
        """Raise UnwrapError. Use only when you're sure it's Present."""
        raise UnwrapError("called unwrap() on an Absent value").with_context(
            operation="unwrap",
        )

    def expect(self, message: str) -> Any:
        """Raise UnwrapError carrying message."""
        raise UnwrapError(message).with_context(operation="expect")

    def unwrap_or(self, default: T) -> T:
        """Get default since this is Absent."""
        return default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """Call f to get a value."""
        return f()

    def map(self, f: Callable[[Any], U]) -> Maybe[U]:
        """No-op for Absent."""
        return self

    def flat_map(self, f: Callable[[Any], Maybe[U]]) -> Maybe[U]:
        """No-op for Absent."""
        return self

    def filter(self, predicate: Callable[[Any], bool]) -> Maybe[Any]:
        """No-op for Absent."""
        return self

    def or_else(self, f: Callable[[], Maybe[T]]) -> Maybe[T]:
        """Call f to try an alternative."""
        return f()

    def to_outcome(self, err: E) -> Outcome[Any, E]:
        """Promote to Failure carrying the caller-supplied err."""
        from recourse.core.outcome import Failure

        return Failure(err)

    def to_outcome_else(self, f: Callable[[], E]) -> Outcome[Any, E]:
        """Promote to Failure, building the error lazily."""
        from recourse.core.outcome import Failure

        return Failure(f())

    def to_optional(self) -> None:
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"present": False}

    def __str__(self) -> str:
        return ""

    def __repr__(self) -> str:
        return "Absent()"


Maybe = Present[T] | Absent

ABSENT = Absent()


def maybe_from_optional(value: T | None) -> Maybe[T]:
    """
    Convert an optional value to Maybe.

    Only ``None`` becomes Absent; falsy values such as ``0`` or ``""``
    stay Present.

    Examples:
        >>> maybe_from_optional({"a": 1}.get("a"))
        Present(1)
        >>> maybe_from_optional({"a": 1}.get("b"))
        Absent()
    """
    if value is None:
        return ABSENT
    return Present(value)


__all__ = [
    "Maybe",
    "Present",
    "Absent",
    "ABSENT",
    "maybe_from_optional",
]
