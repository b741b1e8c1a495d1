from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Env vars:
    - TODO_BASE_URL: prefix used to build each todo's url. Default 'http://localhost:5000'
    - CORS_ALLOW_ORIGINS: comma-separated list of allowed origins; '*' by default
    - HOST: interface the CLI binds to. Default '127.0.0.1'
    - PORT: port the CLI binds to. Default 5000
    - LOG_LEVEL: root log level for the CLI. Default 'INFO'; unknown levels fall back to it
    """

    base_url: str
    cors_allow_origins: List[str]
    host: str
    port: int
    log_level: str


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name, default)
    if value is None or value == "":
        return default
    return value


def _parse_int(value: str, default: int) -> int:
    try:
        return int(value.strip())
    except ValueError:
        return default


def _parse_log_level(value: str, default: str = "INFO") -> str:
    level = value.strip().upper()
    return level if level in _LOG_LEVELS else default


def _parse_origins(origins_value: str) -> List[str]:
    """
    Parse CORS origins from env. Supports:
    - '*' to allow all origins
    - Comma-separated list of origins
    """
    value = origins_value.strip()
    if value == "*":
        return ["*"]
    return [o.strip() for o in value.split(",") if o.strip()]


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    base_url = _get_env("TODO_BASE_URL", "http://localhost:5000").strip().rstrip("/")
    origins = _parse_origins(_get_env("CORS_ALLOW_ORIGINS", "*"))
    host = _get_env("HOST", "127.0.0.1").strip()
    port = _parse_int(_get_env("PORT", "5000"), 5000)
    log_level = _parse_log_level(_get_env("LOG_LEVEL", "INFO"))

    return Settings(
        base_url=base_url,
        cors_allow_origins=origins,
        host=host,
        port=port,
        log_level=log_level,
    )
