"""fixedlist -- A fixed-capacity, array-backed list container.

Manifesto:
    Some buffers must never grow: bounded work queues, fixed-size history,
    preallocated scratch space. ``FixedCapacityList`` gives them list-like
    insertion, removal and search over storage that is allocated once, and
    turns every boundary violation into a typed, logged error.

Architecture::

    array_list.py      FixedCapacityList[T] (insert/pop/find/at)
    errors.py          Error hierarchy (CapacityExceededError, InvalidIndexError, ...)
    settings.py        FixedListSettings (FIXEDLIST_* env vars)
    logging.py         structlog configuration

Quick start::

    from fixedlist import FixedCapacityList

    recent = FixedCapacityList(3)
    recent.push_back("a")
    recent.push_front("b")
    recent.pop_back()          # "a"

Tags:
    fixedlist, container, array-list, fixed-capacity

Doc-Types:
    - Package Overview
"""

from fixedlist.array_list import FixedCapacityList
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
from fixedlist.settings import (
    DEFAULT_CAPACITY,
    BoundsPolicy,
    FixedListSettings,
    get_settings,
)

__version__ = "0.1.0"

__all__ = [
    "FixedCapacityList",
    "BoundsPolicy",
    "DEFAULT_CAPACITY",
    "FixedListSettings",
    "get_settings",
    "FixedListError",
    "ErrorCategory",
    "ErrorContext",
    "CapacityExceededError",
    "InvalidIndexError",
    "EmptyContainerError",
    "ValueNotFoundError",
    "ConfigError",
    "InvalidCapacityError",
    "categorize_error",
]
