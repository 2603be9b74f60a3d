from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List

_DEFAULT_PORT = 8000


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Env vars:
    - CORS_ALLOW_ORIGINS: comma-separated list of allowed origins; '*' by default
    - LOG_LEVEL: logging level name (DEBUG, INFO, WARNING, ...); 'INFO' by default
    - HOST: interface the server binds to; '0.0.0.0' by default
    - PORT: port the server listens on; 8000 by default
    """

    cors_allow_origins: List[str]
    log_level: str
    host: str
    port: int


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name, default)
    if value is None or value == "":
        return default
    return value


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


_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _parse_log_level(value: str) -> str:
    level = value.strip().upper()
    return level if level in _LOG_LEVELS else "INFO"


def _parse_port(value: str) -> int:
    try:
        port = int(value.strip())
    except ValueError:
        return _DEFAULT_PORT
    if not (0 < port < 65536):
        return _DEFAULT_PORT
    return port


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    return Settings(
        cors_allow_origins=_parse_origins(_get_env("CORS_ALLOW_ORIGINS", "*")),
        log_level=_parse_log_level(_get_env("LOG_LEVEL", "INFO")),
        host=_get_env("HOST", "0.0.0.0").strip(),
        port=_parse_port(_get_env("PORT", str(_DEFAULT_PORT))),
    )
