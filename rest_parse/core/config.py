"""
rest_parse.core.config
───────────────────────
Typed client configuration with env layering. Reads from .env → environment
variables. All fields are typed via Pydantic; keys are SecretStr so they
never show up in a repr or a log line.

Env vars: PARSE_APP_ID, PARSE_REST_API_KEY, PARSE_MASTER_KEY,
          PARSE_SESSION_TOKEN, PARSE_BASE_URL, PARSE_TIMEOUT,
          PARSE_LOG_LEVEL, PARSE_LOG_FORMAT=json|console
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.parse.com/1"


class ParseSettings(BaseSettings):
    """Connection settings for one Parse application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # ── Application ───────────────────────────────────────────────────────────
    app_id: str | None = Field(default=None, alias="PARSE_APP_ID")
    base_url: str = Field(default=DEFAULT_BASE_URL, alias="PARSE_BASE_URL")

    # ── Credentials ───────────────────────────────────────────────────────────
    rest_api_key: SecretStr | None = Field(default=None, alias="PARSE_REST_API_KEY")
    master_key: SecretStr | None = Field(default=None, alias="PARSE_MASTER_KEY")
    session_token: SecretStr | None = Field(default=None, alias="PARSE_SESSION_TOKEN")

    # ── Transport ─────────────────────────────────────────────────────────────
    timeout: float = Field(default=30.0, alias="PARSE_TIMEOUT")

    # ── Logging ───────────────────────────────────────────────────────────────
    log_level: str = Field(default="INFO", alias="PARSE_LOG_LEVEL")
    log_format: str = Field(default="json", alias="PARSE_LOG_FORMAT")

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        allowed = {"json", "console"}
        if v.lower() not in allowed:
            raise ValueError(f"log_format must be one of {allowed}, got {v!r}")
        return v.lower()


@lru_cache(maxsize=1)
def get_settings() -> ParseSettings:
    """
    Return the singleton settings. Cached after first call.
    Call _reset_settings() in tests to pick up new env vars.
    """
    return ParseSettings()


def _reset_settings() -> None:
    """For tests — clear the settings cache."""
    get_settings.cache_clear()
