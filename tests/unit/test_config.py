"""Unit tests for configuration module."""

from __future__ import annotations

from pathlib import Path

import pytest

from pgshell.infrastructure.config import (
    Config,
    DatabaseConfig,
    RetryConfig,
    default_pg_home,
    get_config,
)


@pytest.mark.unit
class TestConfig:
    """Tests for Config class."""

    def test_default_config(self) -> None:
        """Test default configuration values."""
        config = Config()

        assert config.database.host == "127.0.0.1"
        assert config.database.port == 5432
        assert config.database.user == "postgres"
        assert config.database.password == "postgres"
        assert config.database.default_database == "postgres"
        assert config.database.sslmode == "disable"
        assert config.retry.max_attempts == 5
        assert config.retry.retry_delay_seconds == 2.0
        assert config.server.manage is True
        assert config.observability.metrics_port is None

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test nested environment overrides."""
        monkeypatch.setenv("PGSHELL_DATABASE__PORT", "5433")
        monkeypatch.setenv("PGSHELL_SERVER__MANAGE", "false")

        config = Config()

        assert config.database.port == 5433
        assert config.server.manage is False

    def test_pg_ctl_under_pg_home(self) -> None:
        config = Config()

        assert config.server.pg_ctl_path == default_pg_home() / "bin" / "pg_ctl"
        assert config.server.data_dir == default_pg_home() / "data"

    def test_invalid_port(self) -> None:
        """Test that invalid port raises validation error."""
        with pytest.raises(ValueError):
            DatabaseConfig(port=70000)

    def test_invalid_attempts(self) -> None:
        with pytest.raises(ValueError):
            RetryConfig(max_attempts=0)

    def test_sslmodes(self) -> None:
        for mode in ["disable", "require"]:
            database = DatabaseConfig(sslmode=mode)  # type: ignore
            assert database.sslmode == mode


@pytest.mark.unit
class TestDefaultPgHome:
    """Tests for platform install directories."""

    def test_windows(self) -> None:
        assert default_pg_home("win32") == Path("C:\\Program Files\\PostgreSQL\\17")

    def test_posix(self) -> None:
        assert default_pg_home("linux") == Path("/usr/local/pgsql")
        assert default_pg_home("darwin") == Path("/usr/local/pgsql")


@pytest.mark.unit
class TestConfigSingleton:
    """Tests for get_config singleton."""

    def test_get_config_returns_same_instance(self) -> None:
        """Test that get_config returns the same instance."""
        config1 = get_config()
        config2 = get_config()
        assert config1 is config2
