"""Unit tests for server configuration settings model.

Tests verify that the Settings model correctly binds environment variables
from the .env.example file and that the grouped configuration works as expected.
"""

from datetime import time
from pathlib import Path

import pytest

from bakery_shop.server.core.config import LogfireConfig, Settings


@pytest.fixture
def env_example_path() -> Path:
    """Get path to .env.example file."""
    return Path(__file__).resolve().parents[4] / ".env.example"


@pytest.fixture
def env_example_vars(env_example_path: Path) -> dict[str, str]:
    """Parse .env.example file and return environment variables."""
    env_vars = {}
    with open(env_example_path) as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" in line:
                key, value = line.split("=", 1)
                env_vars[key.strip()] = value.strip()
    return env_vars


class TestSettingsDefaults:
    def test_defaults(self, monkeypatch):
        for name in ("DATABASE_URL", "BAKERY_SEED_DATA", "BAKERY_PASSWORD_HASH_ITERATIONS", "ENABLE_FILE_LOGGING"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.database_url == "sqlite+aiosqlite:///./bakery.db"
        assert settings.default_due_time == time(16, 0)
        assert settings.seed_data is False
        assert settings.cors_origins == ["*"]
        assert settings.password_hash_iterations == 260000


class TestSettingsBinding:
    """Test Settings model environment variable binding."""

    def test_env_example_binds(self, env_example_vars: dict[str, str], monkeypatch):
        for key, value in env_example_vars.items():
            monkeypatch.setenv(key, value)

        settings = Settings(_env_file=None)

        assert settings.server_port == int(env_example_vars["BAKERY_SERVER_PORT"])
        assert settings.log_level == env_example_vars["BAKERY_LOG_LEVEL"]
        assert settings.seed_data is True
        assert settings.admin_email == env_example_vars["BAKERY_ADMIN_EMAIL"]

    def test_due_time_parsed(self, monkeypatch):
        monkeypatch.setenv("BAKERY_DEFAULT_DUE_TIME", "07:45")

        assert Settings(_env_file=None).default_due_time == time(7, 45)

    def test_cors_origins_from_json_list(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", '["https://shop.example.com", "https://admin.example.com"]')

        assert Settings(_env_file=None).cors_origins == ["https://shop.example.com", "https://admin.example.com"]

    def test_hash_iterations_must_be_positive(self, monkeypatch):
        monkeypatch.setenv("BAKERY_PASSWORD_HASH_ITERATIONS", "0")

        with pytest.raises(ValueError):
            Settings(_env_file=None)


class TestLogfireConfig:
    def test_grouped_config_from_environment(self, monkeypatch):
        monkeypatch.setenv("LOGFIRE_ENABLED", "true")
        monkeypatch.setenv("LOGFIRE_TOKEN", "abc")
        monkeypatch.setenv("LOGFIRE_SERVICE_NAME", "bakery-test")

        config = Settings(_env_file=None).logfire

        assert isinstance(config, LogfireConfig)
        assert config.enabled is True
        assert config.token == "abc"
        assert config.service_name == "bakery-test"
        assert config.trace_fastapi is True

    def test_disabled_by_default(self, monkeypatch):
        monkeypatch.delenv("LOGFIRE_ENABLED", raising=False)

        assert Settings(_env_file=None).logfire.enabled is False
