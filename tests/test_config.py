"""
Configuration Tests

Tests for settings parsing and validation.
"""

import pytest
from pydantic import ValidationError

from product_api.core.config import Settings
from product_api.core.database import build_engine


class TestSettings:
    """Tests for the Settings model."""

    def test_defaults(self):
        """Verify documented defaults."""
        settings = Settings(_env_file=None, JWT_KEY="k" * 32)

        assert settings.ACCESS_TOKEN_EXPIRE_MINUTES == 30
        assert settings.JWT_ALGORITHM == "HS256"
        assert settings.ADMIN_USERNAME == "Paras"
        assert settings.EXPOSE_ERROR_DETAILS is False

    def test_short_jwt_key_is_rejected(self):
        """Verify HS256 keys below 256 bits fail validation."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, JWT_KEY="too-short")

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("JWT_ISSUER", "EnvIssuer")
        monkeypatch.setenv("ACCESS_TOKEN_EXPIRE_MINUTES", "5")

        settings = Settings(_env_file=None, JWT_KEY="k" * 32)

        assert settings.JWT_ISSUER == "EnvIssuer"
        assert settings.ACCESS_TOKEN_EXPIRE_MINUTES == 5

    def test_cors_origins_list(self):
        settings = Settings(
            _env_file=None,
            JWT_KEY="k" * 32,
            CORS_ORIGINS="http://a.test, http://b.test,",
        )

        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]

    @pytest.mark.parametrize(
        "environment, expected",
        [("production", True), ("development", False), ("staging", False)],
    )
    def test_is_production(self, environment, expected):
        settings = Settings(_env_file=None, JWT_KEY="k" * 32, ENVIRONMENT=environment)

        assert settings.is_production is expected


class TestBuildEngine:
    """Tests for engine construction."""

    def test_sqlite_url(self, test_settings):
        engine = build_engine(test_settings)

        assert engine.url.drivername == "sqlite+aiosqlite"
        engine.sync_engine.dispose()
