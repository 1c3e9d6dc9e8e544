"""
Admin client configuration loaded from environment or defaults.
"""

import os
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

PayloadCasing = Literal["camel", "snake"]


def get_api_base_url() -> str:
    """Get API base URL from env or default."""
    return os.getenv("API_BASE_URL", "http://localhost:8080").rstrip("/")


def get_payload_casing() -> str:
    """Get request body key casing ('camel' or 'snake')."""
    return os.getenv("PAYLOAD_CASING", "camel").strip().lower()


def get_api_timeout() -> float:
    """Get per-request timeout in seconds."""
    return float(os.getenv("API_TIMEOUT", "10"))


def get_bulk_delete_max_workers() -> int | None:
    """Get the bulk delete worker cap; None means one worker per record."""
    raw = os.getenv("BULK_DELETE_MAX_WORKERS", "").strip()
    return int(raw) if raw else None


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_file() -> str | None:
    """Get log file name from env; None logs to console only."""
    return os.getenv("LOG_FILE") or None


class ClientConfig(BaseModel):
    """Settings handed to the REST clients at construction time."""

    model_config = ConfigDict(frozen=True)

    base_url: str = "http://localhost:8080"
    payload_casing: PayloadCasing = "camel"
    timeout: float = Field(10.0, gt=0)
    bulk_delete_max_workers: int | None = Field(None, ge=1)

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


def load_config() -> ClientConfig:
    """Build a ClientConfig from the environment."""
    return ClientConfig(
        base_url=get_api_base_url(),
        payload_casing=get_payload_casing(),
        timeout=get_api_timeout(),
        bulk_delete_max_workers=get_bulk_delete_max_workers(),
    )
