from __future__ import annotations

import copy

import pytest

from culturematch.config import DEFAULT_SETTINGS


@pytest.fixture(autouse=True)
def no_sleep(monkeypatch):
    """Retries back off with time.sleep; skip the wait in tests."""
    monkeypatch.setattr("culturematch.retry.time.sleep", lambda _s: None)


@pytest.fixture
def settings():
    return copy.deepcopy(DEFAULT_SETTINGS)


@pytest.fixture
def make_env():
    """Factory for env getters backed by a dict instead of os.environ."""

    def factory(**values: str):
        def getter(key: str, default: str = "") -> str:
            return values.get(key, default)

        return getter

    return factory


@pytest.fixture
def no_keys(make_env):
    return make_env()
