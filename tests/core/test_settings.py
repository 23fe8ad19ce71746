"""Tests for core.settings module.

Covers:
- RecourseSettings defaults
- RECOURSE_-prefixed environment overrides
- log level validation
- get_settings caching
"""

import pytest
from pydantic import ValidationError

from recourse.core.settings import RecourseSettings, get_settings, reset_settings


class TestRecourseSettingsDefaults:
    def test_default_log_level(self):
        assert RecourseSettings().log_level == "WARNING"

    def test_default_json_logs_false(self):
        assert RecourseSettings().json_logs is False

    def test_default_fallback(self):
        assert RecourseSettings().fallback == -1

    def test_default_multiplier(self):
        assert RecourseSettings().multiplier == 2


class TestRecourseSettingsEnvOverride:
    def test_fallback_from_env(self, monkeypatch):
        monkeypatch.setenv("RECOURSE_FALLBACK", "0")
        assert RecourseSettings().fallback == 0

    def test_json_logs_from_env(self, monkeypatch):
        monkeypatch.setenv("RECOURSE_JSON_LOGS", "true")
        assert RecourseSettings().json_logs is True

    def test_log_level_is_normalized(self, monkeypatch):
        monkeypatch.setenv("RECOURSE_LOG_LEVEL", "debug")
        assert RecourseSettings().log_level == "DEBUG"

    def test_unknown_log_level_rejected(self, monkeypatch):
        monkeypatch.setenv("RECOURSE_LOG_LEVEL", "chatty")
        with pytest.raises(ValidationError):
            RecourseSettings()

    def test_unprefixed_vars_ignored(self, monkeypatch):
        monkeypatch.setenv("FALLBACK", "7")
        assert RecourseSettings().fallback == -1


class TestGetSettings:
    def test_cached(self):
        assert get_settings() is get_settings()

    def test_reset_reloads(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("RECOURSE_MULTIPLIER", "3")
        reset_settings()
        second = get_settings()
        assert second is not first
        assert second.multiplier == 3
