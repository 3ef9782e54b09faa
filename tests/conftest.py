"""
Shared pytest fixtures for fixedlist tests.

This module provides:
- Settings cache and FIXEDLIST_* environment isolation
- structlog reset so log capture sees a fresh configuration
- A small pre-filled container fixture
"""

import os
import sys
from pathlib import Path

import pytest
import structlog

# Ensure fixedlist package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from fixedlist import FixedCapacityList
from fixedlist.logging import clear_context
from fixedlist.settings import clear_settings_cache


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch):
    """Drop FIXEDLIST_* env vars and cached settings around every test."""
    for key in list(os.environ):
        if key.startswith("FIXEDLIST_"):
            monkeypatch.delenv(key)
    clear_settings_cache()
    structlog.reset_defaults()
    clear_context()
    yield
    clear_settings_cache()
    structlog.reset_defaults()
    clear_context()


@pytest.fixture
def filled():
    """Capacity-5 container holding 10, 20, 30."""
    container = FixedCapacityList(5)
    for value in (10, 20, 30):
        container.push_back(value)
    return container
