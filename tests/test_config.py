"""
Tests for the ambient stack: the QSettings wrapper with its DEFAULTS fallback
and the log level override read from the environment.
"""

from __future__ import annotations

import logging

import pytest

import app_config
from app_config import DEFAULTS, LOG_LEVEL_ENV
from corticogenesis.core.config import Settings
from corticogenesis.core.logging import resolve_level


@pytest.fixture
def settings():
    s = Settings()
    yield s
    s.set("playback/interval_ms", DEFAULTS["playback"]["interval_ms"])


# ── Settings ─────────────────────────────────────────────────────────────────

class TestSettings:

    def test_defaults_primed_on_construction(self, settings):
        for group, values in DEFAULTS.items():
            for k in values:
                assert settings._qs.contains(f"{group}/{k}")

    def test_priming_keeps_stored_values(self, settings):
        settings.set("playback/interval_ms", 500)
        assert Settings().get_int("playback/interval_ms") == 500

    def test_get_int_reads_stored_value(self, settings):
        settings.set("playback/interval_ms", 750)
        assert settings.get_int("playback/interval_ms") == 750

    def test_get_int_unparseable_falls_back_to_default(self, settings, caplog):
        settings.set("playback/interval_ms", "abc")
        with caplog.at_level(logging.DEBUG, logger="corticogenesis.core.config"):
            assert settings.get_int("playback/interval_ms") == 2000
        assert any("playback/interval_ms" in r.getMessage() for r in caplog.records)

    def test_get_uses_default_for_unknown_key(self, settings):
        assert settings.get("hotkeys/play_pause") == "Space"
        assert settings.get("nowhere/nothing") is None
        assert settings.get("nowhere/nothing", 3) == 3

    def test_default_for(self):
        assert Settings.default_for("ui/fade_ms") == 800
        assert Settings.default_for("ui/missing") is None
        assert Settings.default_for("nogroup") is None


# ── Log level override ───────────────────────────────────────────────────────

class TestResolveLevel:

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "DEBUG")
        assert resolve_level() == logging.DEBUG

    def test_env_override_is_case_insensitive(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, " warning ")
        assert resolve_level() == logging.WARNING

    def test_unknown_name_falls_back(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "nonsense")
        assert resolve_level() == logging.INFO
        assert resolve_level(logging.ERROR) == logging.ERROR

    def test_unset_uses_default(self, monkeypatch):
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        assert resolve_level() == logging.INFO
        assert resolve_level(logging.WARNING) == logging.WARNING


# ── Version string ───────────────────────────────────────────────────────────

class TestVersionString:

    def test_plain_release(self, monkeypatch):
        monkeypatch.setattr(app_config, "BUILD_COMMIT", "")
        monkeypatch.setattr(app_config, "BUILD_CHANNEL", "stable")
        assert app_config.version_string() == app_config.APP_VERSION

    def test_commit_and_channel_from_environment_values(self, monkeypatch):
        monkeypatch.setattr(app_config, "BUILD_COMMIT", "abc1234")
        monkeypatch.setattr(app_config, "BUILD_CHANNEL", "dev")
        assert app_config.version_string() == f"{app_config.APP_VERSION}+abc1234 (dev)"
