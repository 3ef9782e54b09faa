"""
Structured error types for the fixed-capacity list.

Every precondition the container enforces has its own error type, so callers
can catch exactly the failure they expect instead of matching on message
text. Each error carries a category and a small structured context (which
operation failed, the offending index, the container's length and capacity)
that serializes cleanly into structured log events.

Manifesto:
    - **Typed Error Hierarchy:** One class per violated precondition
    - **Pythonic Interop:** Index failures are ``IndexError``s, lookup and
      construction failures are ``ValueError``s
    - **Rich Context:** Errors carry the container state at the failing call
    - **No Recovery:** Errors are raised at the violating call, never retried

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────────────┐
        │                       FixedListError                             │
        │               (category, context, cause)                         │
        ├─────────────────────────────────────────────────────────────────┤
        │                                                                  │
        │  CapacityExceededError   InvalidIndexError   EmptyContainerError │
        │  (CAPACITY)              (INDEX, IndexError) (STATE, IndexError) │
        │                                                                  │
        │  ValueNotFoundError      ConfigError                             │
        │  (LOOKUP, ValueError)    (CONFIG)                                │
        │                              │                                   │
        │                         InvalidCapacityError (ValueError)        │
        └─────────────────────────────────────────────────────────────────┘

Examples:
    >>> error = CapacityExceededError(capacity=3)
    >>> error.category
    <ErrorCategory.CAPACITY: 'CAPACITY'>
    >>> error.to_dict()["context"]
    {'operation': 'insert', 'length': 3, 'capacity': 3}

    Catching with builtin exception types:

    >>> try:
    ...     raise InvalidIndexError(7, operation="pop", length=2, capacity=4)
    ... except IndexError as e:
    ...     e.context.index
    7

Guardrails:
    ❌ DON'T: Catch ``FixedListError`` to paper over a full container
    ✅ DO: Check ``full()`` / ``empty()`` first, or catch the specific type

Tags:
    error-handling, exception-hierarchy, error-context, fixedlist

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """
    Error categories for classification in logs.

    Attributes:
        CAPACITY: Insert attempted on a full container
        INDEX: Index outside the valid range for the operation
        STATE: Operation not valid in the current state (empty container)
        LOOKUP: Value search came up empty where a match was required
        CONFIG: Invalid construction argument or setting
        INTERNAL: Bugs, unexpected state
        UNKNOWN: Uncategorized errors
    """

    CAPACITY = "CAPACITY"
    INDEX = "INDEX"
    STATE = "STATE"
    LOOKUP = "LOOKUP"
    CONFIG = "CONFIG"
    INTERNAL = "INTERNAL"
    UNKNOWN = "UNKNOWN"


@dataclass
class ErrorContext:
    """
    Container state captured at the failing call.

    Only fields that were set appear in ``to_dict()``, so an error raised
    from ``remove`` does not report an index it never had.

    Attributes:
        operation: Name of the container operation that failed
        index: Index argument that was rejected
        length: Number of live elements at the time of the call
        capacity: Fixed capacity of the container
        metadata: Additional key-value pairs
    """

    operation: str | None = None
    index: int | None = None
    length: int | None = None
    capacity: int | None = None

    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for key in ["operation", "index", "length", "capacity"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class FixedListError(Exception):
    """
    Base exception for all container errors.

    Subclasses set ``default_category`` and ``code``; ``code`` is the
    snake_case name used for the structured log event emitted when the
    container raises the error.

    Examples:
        >>> error = FixedListError("Something went wrong")
        >>> error.category
        <ErrorCategory.INTERNAL: 'INTERNAL'>

        >>> error = FixedListError("boom").with_context(operation="pop", index=4)
        >>> error.context.index
        4
        >>> error.to_dict()["context"]
        {'operation': 'pop', 'index': 4}
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL
    code: str = "error"

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> FixedListError:
        """
        Add context to this error (fluent API).

        Usage:
            raise ValueNotFoundError(value).with_context(caller="dedupe")
        """
        for key, value in kwargs.items():
            if key != "metadata" and hasattr(self.context, key):
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging."""
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


# =============================================================================
# CONTAINER ERRORS
# =============================================================================


class CapacityExceededError(FixedListError):
    """Insert attempted on a container whose length equals its capacity."""

    default_category = ErrorCategory.CAPACITY
    code = "capacity_exceeded"

    def __init__(self, capacity: int, *, operation: str = "insert"):
        super().__init__(
            f"Container is full (capacity {capacity})",
            context=ErrorContext(operation=operation, length=capacity, capacity=capacity),
        )


class InvalidIndexError(FixedListError, IndexError):
    """
    Index argument outside the valid range for the operation.

    The valid range depends on the operation: ``[0, length]`` for insert,
    ``[0, length)`` for pop, and the container's bounds policy for checked
    access. ``limit`` is the exclusive upper bound that was enforced.
    """

    default_category = ErrorCategory.INDEX
    code = "invalid_index"

    def __init__(
        self,
        index: int,
        *,
        operation: str,
        length: int,
        capacity: int,
        limit: int | None = None,
    ):
        limit = length if limit is None else limit
        super().__init__(
            f"Index {index} out of range for {operation} (valid: 0 <= index < {limit})",
            context=ErrorContext(
                operation=operation, index=index, length=length, capacity=capacity
            ),
        )
        self.limit = limit


class EmptyContainerError(FixedListError, IndexError):
    """Pop or remove attempted on a container with no live elements."""

    default_category = ErrorCategory.STATE
    code = "empty_container"

    def __init__(self, *, operation: str, capacity: int):
        super().__init__(
            f"Cannot {operation} from an empty container",
            context=ErrorContext(operation=operation, length=0, capacity=capacity),
        )


class ValueNotFoundError(FixedListError, ValueError):
    """``remove`` was given a value with no equal element in the container."""

    default_category = ErrorCategory.LOOKUP
    code = "value_not_found"

    def __init__(self, value: Any, *, length: int, capacity: int):
        super().__init__(
            f"Value {value!r} not found",
            context=ErrorContext(operation="remove", length=length, capacity=capacity),
        )
        self.value = value


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================


class ConfigError(FixedListError):
    """Configuration or construction error."""

    default_category = ErrorCategory.CONFIG
    code = "config_error"


class InvalidCapacityError(ConfigError, ValueError):
    """Capacity given at construction is negative or not an integer."""

    code = "invalid_capacity"

    def __init__(self, capacity: Any, *, cause: Exception | None = None):
        super().__init__(
            f"Capacity must be a non-negative integer, got {capacity!r}",
            context=ErrorContext(operation="create", metadata={"requested": repr(capacity)}),
            cause=cause,
        )
        self.capacity = capacity


# =============================================================================
# HELPERS
# =============================================================================


def categorize_error(error: Exception) -> ErrorCategory:
    """
    Categorize an exception.

    Container errors report their own category; builtin index and lookup
    errors map onto the closest container category.
    """
    if isinstance(error, FixedListError):
        return error.category
    if isinstance(error, IndexError):
        return ErrorCategory.INDEX
    if isinstance(error, (KeyError, ValueError)):
        return ErrorCategory.LOOKUP
    if isinstance(error, TypeError):
        return ErrorCategory.CONFIG
    return ErrorCategory.UNKNOWN


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "FixedListError",
    "CapacityExceededError",
    "InvalidIndexError",
    "EmptyContainerError",
    "ValueNotFoundError",
    "ConfigError",
    "InvalidCapacityError",
    "categorize_error",
]
