"""Tests for environment settings and config file loading."""

import os
from unittest.mock import patch

from src.specials_api.runtime.config.config_data import ConfigData
from src.specials_api.runtime.context import load_config
from src.specials_api.runtime.settings import EnvironmentSettings


class TestEnvironmentSettings:
    """Test environment variable handling and settings."""

    def test_default_settings(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = EnvironmentSettings(_env_file=None)

        assert settings.config_file == "config.yaml"
        assert settings.environment is None
        assert settings.database_url is None
        assert settings.port is None

    def test_environment_variable_loading(self):
        env = {
            "APP_CONFIG_FILE": "/etc/specials/config.yaml",
            "APP_ENVIRONMENT": "production",
            "DATABASE_URL": "postgresql://user:pass@db/specials",
            "LOG_LEVEL": "DEBUG",
            "PORT": "8080",
        }

        with patch.dict(os.environ, env, clear=True):
            settings = EnvironmentSettings(_env_file=None)

        assert settings.config_file == "/etc/specials/config.yaml"
        assert settings.environment == "production"
        assert settings.database_url == "postgresql://user:pass@db/specials"
        assert settings.log_level == "DEBUG"
        assert settings.port == 8080

    def test_apply_overrides_only_given_values(self):
        with patch.dict(os.environ, {"PORT": "4000"}, clear=True):
            settings = EnvironmentSettings(_env_file=None)

        config = settings.apply(ConfigData())

        assert config.app.port == 4000
        assert config.app.environment == "development"
        assert config.database.url == "sqlite:///./specials.db"

    def test_apply_does_not_mutate_input(self):
        original = ConfigData()
        with patch.dict(os.environ, {"DATABASE_URL": "sqlite://"}, clear=True):
            EnvironmentSettings(_env_file=None).apply(original)

        assert original.database.url == "sqlite:///./specials.db"


class TestLoadConfig:
    def test_missing_file_uses_defaults(self, tmp_path):
        with patch.dict(
            os.environ, {"APP_CONFIG_FILE": str(tmp_path / "absent.yaml")}, clear=True
        ):
            config = load_config(EnvironmentSettings(_env_file=None))

        assert config.app.port == 3031
        assert config.database.url == "sqlite:///./specials.db"

    def test_file_then_environment(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "config:\n  app:\n    port: 5000\n  logging:\n    level: WARNING\n"
        )
        env = {"APP_CONFIG_FILE": str(config_file), "LOG_LEVEL": "DEBUG"}

        with patch.dict(os.environ, env, clear=True):
            config = load_config(EnvironmentSettings(_env_file=None))

        assert config.app.port == 5000
        # Environment wins over the file
        assert config.logging.level == "DEBUG"
