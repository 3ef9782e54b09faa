"""Tests for fixedlist.errors module."""

import pytest

from fixedlist.errors import (
    CapacityExceededError,
    ConfigError,
    EmptyContainerError,
    ErrorCategory,
    ErrorContext,
    FixedListError,
    InvalidCapacityError,
    InvalidIndexError,
    ValueNotFoundError,
    categorize_error,
)


class TestErrorContext:
    """Test ErrorContext dataclass."""

    def test_create_empty_context(self):
        ctx = ErrorContext()
        assert ctx.operation is None
        assert ctx.index is None
        assert ctx.metadata == {}
        assert ctx.to_dict() == {}

    def test_to_dict_includes_set_fields(self):
        ctx = ErrorContext(operation="pop", index=0, metadata={"key": "value"})
        d = ctx.to_dict()
        assert d == {"operation": "pop", "index": 0, "key": "value"}

    def test_zero_values_are_kept(self):
        ctx = ErrorContext(length=0, capacity=0)
        assert ctx.to_dict() == {"length": 0, "capacity": 0}


class TestFixedListError:
    """Test the base error."""

    def test_defaults(self):
        error = FixedListError("boom")
        assert error.message == "boom"
        assert str(error) == "boom"
        assert error.category == ErrorCategory.INTERNAL
        assert error.cause is None

    def test_with_context_sets_known_fields(self):
        error = FixedListError("boom").with_context(operation="at", index=3)
        assert error.context.operation == "at"
        assert error.context.index == 3

    def test_with_context_puts_unknown_keys_in_metadata(self):
        error = FixedListError("boom").with_context(caller="dedupe")
        assert error.context.metadata == {"caller": "dedupe"}

    def test_cause_is_chained(self):
        cause = TypeError("not an int")
        error = FixedListError("boom", cause=cause)
        assert error.__cause__ is cause
        assert error.to_dict()["cause"] == "not an int"

    def test_to_dict(self):
        error = FixedListError("boom", category=ErrorCategory.STATE)
        assert error.to_dict() == {
            "error_type": "FixedListError",
            "message": "boom",
            "category": "STATE",
        }

    def test_repr(self):
        assert repr(FixedListError("boom")) == "FixedListError('boom', category=INTERNAL)"


class TestContainerErrors:
    """Test the per-precondition error types."""

    def test_capacity_exceeded(self):
        error = CapacityExceededError(3, operation="push_back")
        assert error.category == ErrorCategory.CAPACITY
        assert error.code == "capacity_exceeded"
        assert error.to_dict()["context"] == {
            "operation": "push_back",
            "length": 3,
            "capacity": 3,
        }

    def test_invalid_index_defaults_limit_to_length(self):
        error = InvalidIndexError(5, operation="pop", length=2, capacity=4)
        assert error.limit == 2
        assert "0 <= index < 2" in error.message
        assert error.context.index == 5

    def test_invalid_index_explicit_limit(self):
        error = InvalidIndexError(5, operation="at", length=2, capacity=4, limit=4)
        assert error.limit == 4

    def test_empty_container(self):
        error = EmptyContainerError(operation="pop_back", capacity=10)
        assert error.category == ErrorCategory.STATE
        assert error.context.length == 0
        assert "pop_back" in error.message

    def test_value_not_found(self):
        error = ValueNotFoundError("x", length=2, capacity=4)
        assert error.value == "x"
        assert error.context.operation == "remove"
        assert error.message == "Value 'x' not found"

    def test_invalid_capacity(self):
        error = InvalidCapacityError(-2)
        assert isinstance(error, ConfigError)
        assert error.category == ErrorCategory.CONFIG
        assert error.context.metadata == {"requested": "-2"}

    @pytest.mark.parametrize(
        "error, builtin",
        [
            (InvalidIndexError(1, operation="at", length=0, capacity=1), IndexError),
            (EmptyContainerError(operation="pop", capacity=1), IndexError),
            (ValueNotFoundError(1, length=1, capacity=1), ValueError),
            (InvalidCapacityError(-1), ValueError),
        ],
    )
    def test_builtin_compatibility(self, error, builtin):
        with pytest.raises(builtin):
            raise error

    def test_capacity_exceeded_is_not_index_error(self):
        assert not isinstance(CapacityExceededError(1), IndexError)


class TestCategorizeError:
    """Test categorize_error helper."""

    def test_container_error_uses_own_category(self):
        assert categorize_error(CapacityExceededError(1)) == ErrorCategory.CAPACITY

    def test_builtin_index_error(self):
        assert categorize_error(IndexError("x")) == ErrorCategory.INDEX

    def test_builtin_value_error(self):
        assert categorize_error(ValueError("x")) == ErrorCategory.LOOKUP

    def test_unknown(self):
        assert categorize_error(RuntimeError("x")) == ErrorCategory.UNKNOWN
