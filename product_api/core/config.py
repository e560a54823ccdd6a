"""
Application Configuration

Uses Pydantic Settings for environment variable management with validation.
"""

from functools import lru_cache
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./products.db"
    DATABASE_SSL: bool = False
    DATABASE_ECHO: bool = False
    CREATE_TABLES_ON_STARTUP: bool = True

    # JWT
    JWT_KEY: str
    JWT_ISSUER: str = "ProductService"
    JWT_AUDIENCE: str = "ProductServiceClients"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30

    # Login credential
    ADMIN_USERNAME: str = "Paras"
    ADMIN_PASSWORD: str = "123"

    # Environment
    ENVIRONMENT: str = "development"
    EXPOSE_ERROR_DETAILS: bool = False
    FORCE_HTTPS: bool = False
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: str = "*"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("JWT_KEY")
    @classmethod
    def check_key_length(cls, value: str) -> str:
        """HS256 keys shorter than 256 bits are rejected."""
        if len(value.encode("utf-8")) < 32:
            raise ValueError("JWT_KEY must be at least 32 bytes long")
        return value

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Using lru_cache ensures settings are only loaded once. Route
    dependencies take settings through ``Depends(get_settings)`` so they
    can be overridden in tests.
    """
    return Settings()
