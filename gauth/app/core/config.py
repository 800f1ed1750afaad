# gauth/app/core/config.py
"""
Service configuration using pydantic-settings.

Security considerations:
- TOTP parameters are validated at load time, never clamped silently
- CORS_ORIGINS parsed from comma-separated env var, never defaults to "*"
- Secrets are never part of the configuration (callers own storage)
"""
import logging
from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Strictly typed application settings.

    Priority for loading:
    1. Environment variables (highest priority)
    2. .env file (via pydantic-settings)
    3. Default values (lowest priority)
    """

    # ─────────────────────────────────────────────────────────────
    # Application metadata
    # ─────────────────────────────────────────────────────────────
    PROJECT_NAME: str = "gauth"
    PROJECT_VERSION: str = "1.0.0"
    API_V1_STR: str = "/api/v1"

    # ─────────────────────────────────────────────────────────────
    # Environment mode and logging
    # ─────────────────────────────────────────────────────────────
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """
        Accept any casing ("debug", "Info") and store the logging name.

        Unknown names are rejected here rather than at logging setup.
        """
        if v is None:
            return "INFO"
        level = str(v).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v!r}")
        return level

    # ─────────────────────────────────────────────────────────────
    # TOTP parameters
    # Time step (30s) and algorithm (SHA1) are fixed, only the
    # code length and the drift window are tunable.
    # ─────────────────────────────────────────────────────────────
    TOTP_CODE_LENGTH: int = Field(default=6, ge=1, le=10)
    TOTP_DISCREPANCY: int = Field(default=1, ge=0, le=10)
    TOTP_SECRET_LENGTH: int = Field(default=16, ge=16, le=128)

    # ─────────────────────────────────────────────────────────────
    # QR code service (URL building only, nothing is fetched)
    # ─────────────────────────────────────────────────────────────
    QR_BASE_URL: str = "https://api.qrserver.com/v1/create-qr-code/"
    QR_DEFAULT_SIZE: int = Field(default=200, ge=1)

    # ─────────────────────────────────────────────────────────────
    # CORS Configuration
    # Empty string → empty list (NOT "*" for security)
    # ─────────────────────────────────────────────────────────────
    CORS_ORIGINS: str = "http://localhost:5500,http://127.0.0.1:5500,http://localhost:8000,http://127.0.0.1:8000"

    @property
    def BACKEND_CORS_ORIGINS(self) -> List[str]:
        """
        Parse CORS_ORIGINS string into a list of allowed origins.

        Returns:
            List of allowed origin URLs, whitespace trimmed, empties dropped
        """
        if not self.CORS_ORIGINS or not self.CORS_ORIGINS.strip():
            return []

        return [
            origin.strip()
            for origin in self.CORS_ORIGINS.split(",")
            if origin.strip()
        ]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        # Extra fields in .env are ignored (prevents config injection)
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.ENVIRONMENT.lower() == "production"


@lru_cache()
def get_settings() -> Settings:
    """
    Cached settings instance.

    Settings are loaded once per process; tests call
    ``get_settings.cache_clear()`` after changing the environment.
    """
    return Settings()


settings = get_settings()
