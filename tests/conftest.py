"""
Pytest configuration and fixtures for idx tests.
"""

import pytest

from idx import ulid as ulid_mod
from idx import web_api
from idx.constants import ENV_VAR_KEYS


@pytest.fixture(autouse=True)
def clean_state(monkeypatch):
    """Start every test with no idx environment and a fresh default generator."""
    for key in ENV_VAR_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(ulid_mod, "_default_generator", None)
    monkeypatch.setattr(web_api, "_config", None)
    yield


@pytest.fixture
def fixed_clock():
    return lambda: 1469918176.385


@pytest.fixture
def zero_random():
    return lambda: 0.0
