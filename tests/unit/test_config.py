"""
TEST DOC: Configuration

WHAT: Tests for settings loading
WHY: Environment variables are the only way to turn tracing and debug on
HOW: Set variables with monkeypatch and load fresh settings

CASES:
- Defaults
- RUBY_QUEST_* and RUBY_QUEST_OTEL_* overrides
"""

import pytest

from ruby_quest.config import get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch):
    for name in (
        "RUBY_QUEST_LOG_LEVEL",
        "RUBY_QUEST_DEBUG",
        "RUBY_QUEST_SHOW_INTRO",
        "RUBY_QUEST_OTEL_ENABLED",
        "RUBY_QUEST_OTEL_ENDPOINT",
    ):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    """Tests for Settings loading."""

    def test_defaults(self):
        settings = get_settings()
        assert settings.log_level == "WARNING"
        assert not settings.debug
        assert settings.show_intro
        assert not settings.otel.enabled
        assert settings.otel.service_name == "ruby-quest"
        assert settings.otel.endpoint is None

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("RUBY_QUEST_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("RUBY_QUEST_DEBUG", "true")
        monkeypatch.setenv("RUBY_QUEST_SHOW_INTRO", "false")
        settings = get_settings()
        assert settings.log_level == "DEBUG"
        assert settings.debug
        assert not settings.show_intro

    def test_otel_env_overrides(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("RUBY_QUEST_OTEL_ENABLED", "1")
        monkeypatch.setenv("RUBY_QUEST_OTEL_ENDPOINT", "http://localhost:4317")
        settings = get_settings()
        assert settings.otel.enabled
        assert settings.otel.endpoint == "http://localhost:4317"

