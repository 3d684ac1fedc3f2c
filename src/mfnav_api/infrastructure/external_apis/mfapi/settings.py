# Copyright (c)
# SPDX-License-Identifier: MIT
"""Pydantic settings for the NAV provider (mfapi.in) transport client."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from mfnav_api.config.settings import DEFAULT_MFAPI_BASE_URL, Settings


class MfapiSettings(BaseSettings):
    """Configuration for the mfapi.in client.

    Environment variables (with ``model_config.env_prefix``):

    * ``MFAPI_BASE_URL``
    * ``MFAPI_TIMEOUT_S``
    """

    base_url: str = Field(
        DEFAULT_MFAPI_BASE_URL,
        description="Base URL; the scheme code is appended as the last path segment.",
    )
    timeout_s: float | None = Field(
        None,
        gt=0.0,
        description="Per-request timeout in seconds; ``None`` keeps the httpx default.",
    )

    model_config = SettingsConfigDict(
        env_prefix="MFAPI_",
        extra="ignore",
    )

    @classmethod
    def from_app_settings(cls, settings: Settings) -> MfapiSettings:
        """Build client settings from the application-wide `Settings`."""
        return cls(base_url=settings.mfapi_base_url, timeout_s=settings.mfapi_timeout_s)
