"""Tests for configuration loading."""

import pytest

from config import AppConfig, ConfigError, ConfigManager


@pytest.fixture
def manager(tmp_path, monkeypatch):
    monkeypatch.delenv("ADCOPY_DB_PATH", raising=False)
    monkeypatch.delenv("ADCOPY_LOG_LEVEL", raising=False)
    return ConfigManager(config_dir=tmp_path)


class TestConfigManager:

    def test_defaults_without_file(self, manager):
        config = manager.load()
        assert config.log_level == "INFO"
        assert config.api.user_header == "X-User-Id"
        assert manager.is_configured() is False

    def test_save_and_load(self, manager, tmp_path):
        config = AppConfig(log_level="debug")
        config.database.path = str(tmp_path / "x.db")
        manager.save(config)

        loaded = ConfigManager(config_dir=tmp_path).load()
        assert loaded.log_level == "DEBUG"
        assert loaded.db_path == tmp_path / "x.db"
        assert manager.is_configured() is True

    def test_env_overrides(self, manager, monkeypatch, tmp_path):
        monkeypatch.setenv("ADCOPY_DB_PATH", str(tmp_path / "env.db"))
        monkeypatch.setenv("ADCOPY_LOG_LEVEL", "warning")
        config = manager.load()
        assert config.db_path == tmp_path / "env.db"
        assert config.log_level == "WARNING"

    def test_invalid_yaml(self, manager):
        manager.config_path.write_text("log_level: [unclosed")
        with pytest.raises(ConfigError):
            manager.load()

    def test_invalid_log_level(self, manager):
        manager.config_path.write_text("log_level: LOUD\n")
        with pytest.raises(ConfigError):
            manager.load()

    def test_non_mapping_file(self, manager):
        manager.config_path.write_text("- just\n- a list\n")
        with pytest.raises(ConfigError):
            manager.load()

    def test_update_and_reset(self, manager):
        updated = manager.update(log_level="ERROR", unknown="ignored")
        assert updated.log_level == "ERROR"
        assert manager.get_config().log_level == "ERROR"

        manager.reset()
        assert manager.is_configured() is False
        assert manager.get_config().log_level == "INFO"
