"""Pytest configuration and fixtures for campus_backend tests."""

import pytest

from campus_backend.cache import ExpiringCache
from campus_backend.repositories import Repositories
from campus_backend.tests.doubles import CountingStore, FakeClock


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    return ExpiringCache(default_ttl=600, clock=clock)


@pytest.fixture
def store():
    return CountingStore()


@pytest.fixture
def repos(store, cache):
    return Repositories(store, cache=cache)


@pytest.fixture
def user_data():
    """Factory for minimal user documents."""
    def make(first_name: str, last_name: str = "Lovelace", **fields):
        return {"first_name": first_name, "last_name": last_name, **fields}
    return make
