"""Tests for recourse.core.errors module."""

import pytest

from recourse.core.errors import (
    ErrorCategory,
    ErrorContext,
    OperandRangeError,
    RecourseError,
    UnwrapError,
)


class TestErrorContext:
    """Test ErrorContext dataclass."""

    def test_create_empty_context(self):
        ctx = ErrorContext()
        assert ctx.operation is None
        assert ctx.argument is None
        assert ctx.metadata == {}

    def test_to_dict_includes_set_fields(self):
        ctx = ErrorContext(operation="divide", metadata={"key": "value"})
        d = ctx.to_dict()
        assert d == {"operation": "divide", "key": "value"}
        assert "argument" not in d

    def test_to_dict_empty(self):
        assert ErrorContext().to_dict() == {}


class TestRecourseError:
    """Test RecourseError base class."""

    def test_defaults(self):
        error = RecourseError("Something went wrong")
        assert error.message == "Something went wrong"
        assert str(error) == "Something went wrong"
        assert error.category == ErrorCategory.INTERNAL
        assert error.cause is None

    def test_cause_is_chained(self):
        cause = KeyError("missing")
        error = RecourseError("lookup failed", cause=cause)
        assert error.cause is cause
        assert error.__cause__ is cause

    def test_with_context_sets_known_fields(self):
        error = RecourseError("bad").with_context(operation="divide", argument="numerator")
        assert error.context.operation == "divide"
        assert error.context.argument == "numerator"

    def test_with_context_puts_unknown_keys_in_metadata(self):
        error = RecourseError("bad").with_context(payload="'x'")
        assert error.context.metadata == {"payload": "'x'"}

    def test_to_dict(self):
        error = RecourseError("bad", cause=ValueError("root")).with_context(operation="unwrap")
        d = error.to_dict()
        assert d["error_type"] == "RecourseError"
        assert d["message"] == "bad"
        assert d["category"] == "INTERNAL"
        assert d["context"] == {"operation": "unwrap"}
        assert d["cause"] == "root"

    def test_repr(self):
        assert repr(RecourseError("bad")) == "RecourseError('bad', category=INTERNAL)"


class TestSubclasses:
    def test_unwrap_error_category(self):
        assert UnwrapError("x").category == ErrorCategory.USAGE

    def test_operand_range_error_is_value_error(self):
        error = OperandRangeError("too big")
        assert error.category == ErrorCategory.VALIDATION
        assert isinstance(error, ValueError)
        assert isinstance(error, RecourseError)

    def test_explicit_category_overrides_default(self):
        assert UnwrapError("x", category=ErrorCategory.INTERNAL).category == ErrorCategory.INTERNAL

    def test_catchable_as_base(self):
        with pytest.raises(RecourseError):
            raise OperandRangeError("too big")
