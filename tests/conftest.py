"""
Shared pytest fixtures and configuration for recourse tests.

Every test starts from freshly loaded settings and an empty logging
context, with RECOURSE_* variables from the host environment removed.
"""

import os

import pytest
import structlog

from recourse.core.logging import clear_context
from recourse.core.settings import reset_settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Strip RECOURSE_* env vars and drop cached settings around each test."""
    for key in list(os.environ):
        if key.startswith("RECOURSE_"):
            monkeypatch.delenv(key)
    reset_settings()
    clear_context()
    yield
    reset_settings()
    clear_context()
    # configure_logging binds the current stderr; don't let it outlive the test
    structlog.reset_defaults()
