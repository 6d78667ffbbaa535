"""Shared fixtures for the validscope test-suite."""
from __future__ import annotations

import pytest

from validscope import ValidatorCache, default_cache
from validscope.config import get_settings

from dtos import Address, User


@pytest.fixture
def cache() -> ValidatorCache:
    """A private, unbounded cache so tests never share compiled definitions."""
    return ValidatorCache(max_entries=0)


@pytest.fixture(autouse=True)
def _reset_global_state():
    default_cache.clear()
    get_settings.cache_clear()
    yield
    default_cache.clear()
    get_settings.cache_clear()


@pytest.fixture
def user() -> User:
    return User(
        name="Alice",
        age=30,
        address=Address(street="Main St", city="Springfield"),
        tags=["admin", "staff"],
        attributes={"team": "core"},
    )
