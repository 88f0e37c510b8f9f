"""Unit tests for configuration module."""

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from student_ledger.core.config import (
    AppConfig,
    AppEnvironment,
    LogLevel,
    ObservabilityConfig,
    SecurityConfig,
    ServerConfig,
    Settings,
    get_settings,
    reload_settings,
)


class TestConfig:
    """Tests for configuration classes."""

    def test_app_config_defaults(self):
        """Test AppConfig has correct defaults."""
        with patch.dict("os.environ", {}, clear=True):
            config = AppConfig()
        assert config.name == "student-ledger"
        assert config.env == AppEnvironment.LOCAL
        assert config.version == "0.1.0"
        assert config.debug is False
        assert config.log_level == LogLevel.INFO

    def test_app_config_from_env(self):
        """Test AppConfig reads APP_ prefixed variables."""
        with patch.dict("os.environ", {"APP_ENV": "PROD", "APP_LOG_LEVEL": "debug"}):
            config = AppConfig()
        assert config.env == AppEnvironment.PROD
        assert config.log_level == LogLevel.DEBUG

    def test_app_config_rejects_unknown_env(self):
        with pytest.raises(ValidationError):
            AppConfig(env="staging")

    def test_server_config_defaults(self):
        with patch.dict("os.environ", {}, clear=True):
            config = ServerConfig()
        assert config.host == "0.0.0.0"
        assert config.port == 8080

    def test_server_config_has_no_worker_count(self):
        assert set(ServerConfig.model_fields) == {"host", "port"}

    def test_server_port_from_env(self):
        with patch.dict("os.environ", {"SERVER_PORT": "9001"}):
            assert ServerConfig().port == 9001

    def test_observability_defaults(self):
        with patch.dict("os.environ", {}, clear=True):
            config = ObservabilityConfig()
        assert config.service_name == "student-ledger"
        assert config.otlp_endpoint is None
        assert config.log_record_format == "json"

    def test_cors_origins_parsed_from_comma_string(self):
        """Test comma-separated CORS origins become a list."""
        config = SecurityConfig(cors_allowed_origins=" http://a.test , http://b.test,, ")
        assert config.cors_allowed_origins == ["http://a.test", "http://b.test"]

    def test_get_settings_cached(self):
        """Test that get_settings returns cached instance."""
        settings1 = get_settings()
        settings2 = get_settings()
        assert settings1 is settings2

    def test_reload_settings_returns_fresh_instance(self):
        before = get_settings()
        after = reload_settings()
        assert after is not before
        assert get_settings() is after

    def test_settings_has_all_configs(self):
        """Test Settings has all required config objects."""
        settings = Settings()
        assert hasattr(settings, "app")
        assert hasattr(settings, "server")
        assert hasattr(settings, "observability")
        assert hasattr(settings, "security")

    def test_thresholds_are_not_configurable(self):
        """Anomaly thresholds live in the classifier, not in settings."""
        dumped = Settings().model_dump()
        flat = str(dumped).lower()
        assert "tuition" not in flat
        assert "grant" not in flat
