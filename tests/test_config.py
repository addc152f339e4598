# ==============================================
# Tests for Configuration
# ==============================================

import logging

from bunkit.config import AppConfig, get_config, reset_config


class TestGetConfig:

    def test_defaults(self):
        config = get_config()
        assert config.storage.data_file == "data/bunkit.json"
        assert config.storage.subjects_key == "subjects"
        assert config.log_level == "WARNING"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("BUNKIT_DATA_FILE", "/tmp/elsewhere.json")
        monkeypatch.setenv("BUNKIT_SUBJECTS_KEY", "courses")
        monkeypatch.setenv("BUNKIT_LOG_LEVEL", "debug")
        config = get_config()
        assert config.storage.data_file == "/tmp/elsewhere.json"
        assert config.storage.subjects_key == "courses"
        assert config.logging_level() == logging.DEBUG

    def test_singleton(self, monkeypatch):
        first = get_config()
        monkeypatch.setenv("BUNKIT_SUBJECTS_KEY", "changed")
        assert get_config() is first
        reset_config()
        assert get_config().storage.subjects_key == "changed"


def test_unknown_log_level_falls_back():
    assert AppConfig(log_level="chatty").logging_level() == logging.WARNING
