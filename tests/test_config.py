"""
Tests for environment configuration loading.
"""

import pytest
import os
from unittest.mock import patch

from pilot_passport.utils.config import (
    PassportConfig,
    get_config,
    load_config,
    reset_config,
)


class TestPassportConfig:
    """Configuration model validation."""

    def test_defaults(self):
        config = PassportConfig()
        assert config.database_url == "sqlite:///pilot_passport.db"
        assert config.database_echo is False
        assert config.passport_debug is False
        assert config.passport_log_level == "INFO"

    def test_log_level_normalized(self):
        assert PassportConfig(passport_log_level="debug").passport_log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(ValueError):
            PassportConfig(passport_log_level="LOUD")

    def test_empty_database_url_rejected(self):
        with pytest.raises(ValueError):
            PassportConfig(database_url="")


class TestLoadConfig:
    """Loading from the environment and .env files."""

    @patch.dict(os.environ, {
        'DATABASE_URL': 'sqlite:///:memory:',
        'DATABASE_ECHO': 'yes',
        'PASSPORT_DEBUG': 'true',
        'PASSPORT_LOG_LEVEL': 'warning',
    })
    def test_load_from_environment(self, tmp_path):
        config = load_config(env_file=str(tmp_path / "missing.env"))

        assert config.database_url == 'sqlite:///:memory:'
        assert config.database_echo is True
        assert config.passport_debug is True
        assert config.passport_log_level == 'WARNING'

    def test_load_from_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("PASSPORT_LOG_LEVEL=ERROR\n")

        with patch.dict(os.environ):
            os.environ.pop('PASSPORT_LOG_LEVEL', None)
            config = load_config(env_file=str(env_file))

        assert config.passport_log_level == 'ERROR'

    @patch.dict(os.environ, {'PASSPORT_LOG_LEVEL': 'CHATTY'})
    def test_invalid_environment_raises_value_error(self, tmp_path):
        with pytest.raises(ValueError, match="Configuration validation failed"):
            load_config(env_file=str(tmp_path / "missing.env"))

    def test_get_config_is_cached(self):
        reset_config()
        try:
            assert get_config() is get_config()
        finally:
            reset_config()
