"""Shared test configuration.

Credentials used across the suite are synthetic and assembled in each test
module so that no literal token sits in the repository.
"""

import pytest


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch):
    """Keep a developer's AICODESAFE_CONFIG from leaking into tests."""
    monkeypatch.delenv("AICODESAFE_CONFIG", raising=False)
    monkeypatch.delenv("AICODESAFE_LOG_LEVEL", raising=False)
