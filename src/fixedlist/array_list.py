"""
Fixed-capacity, array-backed list.

FixedCapacityList keeps its elements contiguous at the front of a storage
block allocated once, at construction. Inserting or popping in the middle
shifts the tail of the sequence by one slot, so both are O(n); lookups by
index are O(1) and searches are linear scans. The container never grows: a
push on a full container raises instead of reallocating.

Manifesto:
    Bounded buffers should fail loudly, not grow silently.

    - **Fixed ceiling:** Capacity is set once and never changes
    - **Contiguous storage:** Live elements always occupy ``[0, length)``
    - **Explicit failures:** Every violated precondition has its own error
    - **Checked by default:** ``[]`` validates; the raw path is opt-in

Architecture:
    ::

        capacity = 6, length = 4

        ┌────┬────┬────┬────┬────┬────┐
        │ 10 │ 20 │ 30 │ 40 │ ·· │ ·· │   storage (allocated once)
        └────┴────┴────┴────┴────┴────┘
          0    1    2    3    4    5
        └──── live ─────────┘└ spare ┘

        insert(15, 1):  tail [1, 4) shifts right  →  10 15 20 30 40 ··
        pop(1):         tail [2, 5) shifts left   →  10 20 30 40 ·· ··

Features:
    - **insert / push_back / push_front:** Positional insertion with shifting
    - **insert_sorted:** Stable insertion into ascending contents
    - **pop / pop_back / pop_front / remove:** Removal with shifting
    - **find / contains:** Linear search, ``find`` returns ``size()`` on a miss
    - **at / [] / set_at:** Checked access under a bounds policy
    - **unchecked_at / unchecked_set:** Raw slot access, caller validates

Examples:
    >>> from fixedlist import FixedCapacityList
    >>> buf = FixedCapacityList(5)
    >>> for value in (5, 2, 8, 2):
    ...     buf.insert_sorted(value)
    >>> [buf[i] for i in range(len(buf))]
    [2, 2, 5, 8]
    >>> buf.pop(2)
    5
    >>> buf.find(99) == buf.size()
    True

Guardrails:
    ❌ DON'T: Hold on to values read from a slot across a mutating call
    ✅ DO: Re-read by index after insert/pop/remove/clear

    ❌ DON'T: Share one container between threads without a lock
    ✅ DO: Wrap the whole container in your own lock if you must

Tags:
    container, array-list, fixed-capacity, bounded-buffer, fixedlist

Doc-Types:
    - API Reference
"""

from __future__ import annotations

import operator
from typing import Any, Generic, TypeVar

from fixedlist.errors import (
    CapacityExceededError,
    ConfigError,
    EmptyContainerError,
    FixedListError,
    InvalidCapacityError,
    InvalidIndexError,
    ValueNotFoundError,
)
from fixedlist.logging import get_logger
from fixedlist.settings import BoundsPolicy, get_settings

T = TypeVar("T")

logger = get_logger(__name__)


class FixedCapacityList(Generic[T]):
    """
    Contiguous, index-addressable sequence with a capacity fixed at creation.

    ``capacity`` defaults to ``FixedListSettings.default_capacity`` (10).
    ``bounds`` selects what the checked accessor validates against:
    ``BoundsPolicy.LENGTH`` (default) only allows live elements, while
    ``BoundsPolicy.CAPACITY`` allows any allocated slot, including slots
    past the end that hold stale or never-written (``None``) values.

    Python's indexing, ``len``, ``in`` and truthiness map onto the checked
    accessor, ``size``, ``contains`` and ``empty``. The container is not
    iterable beyond indexed access and does not support slicing.

    Examples:
        >>> buf = FixedCapacityList(3)
        >>> buf.push_back(1); buf.push_back(2); buf.push_back(3)
        >>> buf.full()
        True
        >>> buf.push_back(4)
        Traceback (most recent call last):
        ...
        fixedlist.errors.CapacityExceededError: Container is full (capacity 3)
    """

    def __init__(
        self,
        capacity: int | None = None,
        *,
        bounds: BoundsPolicy | str | None = None,
    ):
        if capacity is None or bounds is None:
            settings = get_settings()
            if capacity is None:
                capacity = settings.default_capacity
            if bounds is None:
                bounds = settings.at_bounds

        try:
            capacity = operator.index(capacity)
        except TypeError as exc:
            raise _logged(InvalidCapacityError(capacity, cause=exc)) from exc
        if capacity < 0:
            raise _logged(InvalidCapacityError(capacity))

        try:
            bounds = BoundsPolicy(bounds)
        except ValueError as exc:
            raise _logged(
                ConfigError(f"Unknown bounds policy {bounds!r}", cause=exc)
            ) from exc

        self._capacity: int = capacity
        self._bounds: BoundsPolicy = bounds
        self._length = 0
        self._storage: list[Any] = [None] * capacity

        logger.debug("fixed_list.created", capacity=capacity, bounds=bounds.value)

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    def size(self) -> int:
        """Number of live elements."""
        return self._length

    def capacity(self) -> int:
        """Maximum number of elements, fixed at construction."""
        return self._capacity

    def max_size(self) -> int:
        """Alias for capacity()."""
        return self._capacity

    @property
    def bounds(self) -> BoundsPolicy:
        """Bounds policy enforced by ``at`` / ``set_at`` / ``[]``."""
        return self._bounds

    def full(self) -> bool:
        return self._length == self._capacity

    def empty(self) -> bool:
        return self._length == 0

    def clear(self) -> None:
        """Discard all elements. Slots are not erased, only marked unused."""
        self._length = 0

    # -------------------------------------------------------------------------
    # Insertion
    # -------------------------------------------------------------------------

    def insert(self, value: T, index: int) -> None:
        """
        Insert ``value`` at ``index``, shifting ``[index, size())`` right.

        Raises:
            CapacityExceededError: The container is full.
            InvalidIndexError: ``index`` is negative or greater than ``size()``.
        """
        self._insert(value, operator.index(index), "insert")

    def push_back(self, value: T) -> None:
        self._insert(value, self._length, "push_back")

    def push_front(self, value: T) -> None:
        self._insert(value, 0, "push_front")

    def insert_sorted(self, value: T) -> None:
        """
        Insert ``value`` into ascending contents, keeping them ascending.

        The new element goes before the first element that is not less than
        it, so it lands ahead of any elements equal to it. Existing contents
        are assumed sorted and are not re-sorted.
        """
        index = 0
        while index < self._length and value > self._storage[index]:
            index += 1
        self._insert(value, index, "insert_sorted")

    def _insert(self, value: T, index: int, operation: str) -> None:
        if self.full():
            raise _logged(CapacityExceededError(self._capacity, operation=operation))
        if index < 0 or index > self._length:
            raise _logged(
                InvalidIndexError(
                    index,
                    operation=operation,
                    length=self._length,
                    capacity=self._capacity,
                    limit=self._length + 1,
                )
            )

        storage = self._storage
        storage[index + 1 : self._length + 1] = storage[index : self._length]
        storage[index] = value
        self._length += 1

    # -------------------------------------------------------------------------
    # Removal
    # -------------------------------------------------------------------------

    def pop(self, index: int) -> T:
        """
        Remove and return the element at ``index``, shifting the tail left.

        Raises:
            EmptyContainerError: The container is empty.
            InvalidIndexError: ``index`` is negative or not less than ``size()``.
        """
        return self._pop(operator.index(index), "pop")

    def pop_back(self) -> T:
        return self._pop(self._length - 1, "pop_back")

    def pop_front(self) -> T:
        return self._pop(0, "pop_front")

    def remove(self, value: T) -> None:
        """
        Remove the first element equal to ``value``.

        Raises:
            EmptyContainerError: The container is empty.
            ValueNotFoundError: No element equals ``value``.
        """
        if self.empty():
            raise _logged(EmptyContainerError(operation="remove", capacity=self._capacity))
        index = self.find(value)
        if index == self._length:
            raise _logged(
                ValueNotFoundError(value, length=self._length, capacity=self._capacity)
            )
        self._pop(index, "remove")

    def _pop(self, index: int, operation: str) -> T:
        if self.empty():
            raise _logged(EmptyContainerError(operation=operation, capacity=self._capacity))
        if index < 0 or index >= self._length:
            raise _logged(
                InvalidIndexError(
                    index,
                    operation=operation,
                    length=self._length,
                    capacity=self._capacity,
                )
            )

        storage = self._storage
        value = storage[index]
        storage[index : self._length - 1] = storage[index + 1 : self._length]
        self._length -= 1
        return value

    # -------------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------------

    def find(self, value: T) -> int:
        """Index of the first element equal to ``value``, or ``size()`` if absent."""
        for index in range(self._length):
            if self._storage[index] == value:
                return index
        return self._length

    def contains(self, value: T) -> bool:
        return self.find(value) < self._length

    # -------------------------------------------------------------------------
    # Access
    # -------------------------------------------------------------------------

    def at(self, index: int) -> T:
        """
        Element at ``index``, validated against the bounds policy.

        Raises:
            InvalidIndexError: ``index`` is negative, or not less than
                ``size()`` (``LENGTH`` policy) / ``capacity()`` (``CAPACITY``
                policy).
        """
        return self._storage[self._checked(index, "at")]

    def set_at(self, index: int, value: T) -> None:
        """Overwrite the element at ``index``; validated like ``at``."""
        self._storage[self._checked(index, "set_at")] = value

    def unchecked_at(self, index: int) -> T:
        """Raw slot read. The caller guarantees ``0 <= index < capacity()``."""
        return self._storage[index]

    def unchecked_set(self, index: int, value: T) -> None:
        """Raw slot write. The caller guarantees ``0 <= index < capacity()``."""
        self._storage[index] = value

    def _checked(self, index: int, operation: str, *, log: bool = True) -> int:
        index = operator.index(index)
        if self._bounds is BoundsPolicy.LENGTH:
            limit = self._length
        else:
            limit = self._capacity
        if index < 0 or index >= limit:
            error = InvalidIndexError(
                index,
                operation=operation,
                length=self._length,
                capacity=self._capacity,
                limit=limit,
            )
            raise _logged(error) if log else error
        return index

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    # Subscripts raise without logging. Iteration through __getitem__ ends on
    # IndexError.

    def __getitem__(self, index: int) -> T:
        if isinstance(index, slice):
            raise TypeError(f"{type(self).__name__} does not support slicing")
        return self._storage[self._checked(index, "at", log=False)]

    def __setitem__(self, index: int, value: T) -> None:
        if isinstance(index, slice):
            raise TypeError(f"{type(self).__name__} does not support slicing")
        self._storage[self._checked(index, "set_at", log=False)] = value

    def __len__(self) -> int:
        return self._length

    def __contains__(self, value: object) -> bool:
        return self.contains(value)  # type: ignore[arg-type]

    def __bool__(self) -> bool:
        return self._length > 0

    def __repr__(self) -> str:
        live = self._storage[: self._length]
        return f"{type(self).__name__}({live!r}, capacity={self._capacity})"


def _logged(error: FixedListError) -> FixedListError:
    """Log ``error`` at DEBUG and hand it back for raising."""
    logger.debug(f"fixed_list.{error.code}", **error.to_dict())
    return error


__all__ = ["FixedCapacityList"]
