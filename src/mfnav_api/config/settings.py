# src/mfnav_api/config/settings.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Service Configuration (Pydantic Settings, v2)

Summary:
    Typed, validated configuration for the NAV proxy. Environment parsing and
    validation live here; request handlers receive the resolved `Settings`
    through ``app.state`` rather than reading the environment themselves.

Design:
    - Pydantic v2 BaseSettings with `extra='forbid'` to catch unknown keys.
    - Explicit field declarations with `validation_alias` env names.
    - Secrets held as `SecretStr` and never logged.
    - Singleton accessor `get_settings()` with LRU cache.
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import lru_cache

from pydantic import Field, SecretStr, ValidationError, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_MFAPI_BASE_URL = "https://api.mfapi.in/mf"


class Environment(str, Enum):
    """Logical deployment environment."""

    DEVELOPMENT = "development"
    TEST = "test"
    CI = "ci"
    STAGING = "staging"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """Typed application configuration."""

    # ---------------------------
    # Core environment
    # ---------------------------
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Logical deployment environment.",
        validation_alias="ENVIRONMENT",
    )
    service_name: str = Field(
        default="mfnav-api",
        description="Logical service name for logging.",
        validation_alias="SERVICE_NAME",
    )
    service_version: str | None = Field(
        default=None,
        description="Service version reported in OpenAPI and startup logs.",
        validation_alias="SERVICE_VERSION",
    )
    log_level: str | None = Field(
        default=None,
        description="Override log level (e.g., 'DEBUG', 'INFO'). Defaults to INFO.",
        validation_alias="LOG_LEVEL",
    )

    # ---------------------------
    # CORS
    # ---------------------------
    # Raw env for CORS; the parsed list is computed in a model validator.
    cors_allow_origins_raw: str | None = Field(
        default=None,
        description="Raw env for allowed CORS origins (comma-separated).",
        validation_alias="ALLOWED_ORIGINS",
    )
    cors_allow_origins: list[str] = Field(
        default_factory=list,
        description=(
            "Allowed CORS origins. Derived from ALLOWED_ORIGINS. "
            "'*' is accepted in development/test only."
        ),
    )

    # ---------------------------
    # Scheduled endpoint
    # ---------------------------
    cron_secret: SecretStr | None = Field(
        default=None,
        description=(
            "Shared secret expected as 'Authorization: Bearer <secret>' on the cron "
            "endpoint. When unset, every cron call is rejected."
        ),
        validation_alias="CRON_SECRET",
    )

    # ---------------------------
    # Upstream NAV provider
    # ---------------------------
    mfapi_base_url: str = Field(
        default=DEFAULT_MFAPI_BASE_URL,
        description="Base URL of the NAV provider; the scheme code is appended as a path segment.",
        validation_alias="MFAPI_BASE_URL",
    )
    mfapi_timeout_s: float | None = Field(
        default=None,
        gt=0.0,
        le=120.0,
        description="Per-request timeout in seconds. Unset keeps the HTTP client's default.",
        validation_alias="MFAPI_TIMEOUT_S",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="forbid",
        case_sensitive=False,
        populate_by_name=True,
    )

    @model_validator(mode="after")
    def _compute_cors(self) -> Settings:
        """Parse the raw CORS list and reject wildcards in production-like envs.

        Returns:
            Settings: The validated instance.

        Raises:
            ValueError: If '*' is configured outside development/test.
        """
        raw = (self.cors_allow_origins_raw or "").strip()
        entries = [e.strip() for e in raw.split(",") if e.strip()]
        if "*" in entries and self.environment not in (
            Environment.DEVELOPMENT,
            Environment.TEST,
        ):
            raise ValueError("'*' CORS origin is only allowed in development/test environments.")
        self.cors_allow_origins = entries
        return self

    def cron_secret_value(self) -> str | None:
        """Return the cron secret as plain text, or ``None`` when unset/blank."""
        if self.cron_secret is None:
            return None
        value = self.cron_secret.get_secret_value()
        return value or None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached singleton `Settings` instance.

    Returns:
        Settings: Validated application settings.

    Raises:
        RuntimeError: If configuration is invalid.
    """
    try:
        settings = Settings()
    except ValidationError as exc:
        logger.error("Settings validation failed", extra={"extra": {"errors": exc.errors()}})
        raise RuntimeError("Invalid configuration") from exc

    logger.info(
        "Settings initialized",
        extra={
            "extra": {
                "environment": settings.environment.value,
                "mfapi_base_url": settings.mfapi_base_url,
                "cron_secret_set": settings.cron_secret_value() is not None,
                "cors_count": len(settings.cors_allow_origins),
            }
        },
    )
    return settings
