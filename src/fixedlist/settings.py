"""Settings for the fixedlist package.

The container itself takes everything it needs as constructor arguments.
Settings only supply the defaults used when those arguments are omitted:
the capacity of ``FixedCapacityList()`` and the bounds policy of its checked
accessor, plus the log level and format applied by
:func:`fixedlist.logging.configure_from_settings`.

Manifesto:
    Defaults should be explicit, validated, and environment-driven.

    - **Pydantic validation:** A negative default capacity fails at load time
    - **Environment-driven:** ``FIXEDLIST_*`` env vars and ``.env`` files
    - **Cached:** One settings object per process, reloadable for tests

Examples:
    >>> from fixedlist.settings import get_settings
    >>> get_settings().default_capacity
    10

Tags:
    settings, configuration, pydantic, environment, fixedlist

Doc-Types:
    - API Reference
    - Configuration Guide
"""

from __future__ import annotations

import logging
from enum import Enum

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CAPACITY = 10


class BoundsPolicy(str, Enum):
    """Upper bound enforced by the checked accessor."""

    LENGTH = "length"  # only live elements are addressable
    CAPACITY = "capacity"  # any allocated slot, live or not


class LogFormat(str, Enum):
    """Renderer selected by ``configure_from_settings``."""

    JSON = "json"
    CONSOLE = "console"
    AUTO = "auto"  # JSON unless stderr is a tty


class FixedListSettings(BaseSettings):
    """Package-wide defaults.

    Fields
    ──────
    default_capacity : Capacity used when ``FixedCapacityList()`` gets none
    at_bounds        : Bounds policy for ``at`` / ``[]`` when not given per container
    log_level        : Structlog log level
    log_format       : json / console / auto
    """

    model_config = SettingsConfigDict(
        env_prefix="FIXEDLIST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Container ────────────────────────────────────────────────
    default_capacity: int = Field(default=DEFAULT_CAPACITY, ge=0)
    at_bounds: BoundsPolicy = Field(default=BoundsPolicy.LENGTH)

    # ── Logging ──────────────────────────────────────────────────
    log_level: str = Field(default="INFO")
    log_format: LogFormat = Field(default=LogFormat.AUTO)

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level


_settings_cache: dict[str, FixedListSettings] = {}


def get_settings(*, _force_reload: bool = False) -> FixedListSettings:
    """Load, validate, and cache a :class:`FixedListSettings` instance."""
    if not _force_reload and "default" in _settings_cache:
        return _settings_cache["default"]

    settings = FixedListSettings()
    _settings_cache["default"] = settings
    return settings


def clear_settings_cache() -> None:
    """Clear the settings cache (primarily for testing)."""
    _settings_cache.clear()


__all__ = [
    "DEFAULT_CAPACITY",
    "BoundsPolicy",
    "LogFormat",
    "FixedListSettings",
    "get_settings",
    "clear_settings_cache",
]
