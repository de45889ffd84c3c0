"""
Pytest configuration for truthy tests.
"""

import pytest

from truthy import reset_config


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch):
    """Start every test from the default configuration."""
    monkeypatch.delenv("TRUTHY_ADAPTERS", raising=False)
    monkeypatch.delenv("TRUTHY_LOG_LEVEL", raising=False)
    reset_config()
    yield
    reset_config()
