from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List


DEFAULT_PORT = 3000
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Env vars:
    - PORT: listening port (default 3000)
    - HOST: bind address (default '0.0.0.0')
    - CORS_ALLOW_ORIGINS: comma-separated list of allowed origins; '*' by default
    - LOG_LEVEL: root log level name (default 'INFO')
    - SEED_SAMPLE_TODOS: 'true' (default) to start new stores with two sample todos
    """

    port: int = DEFAULT_PORT
    host: str = "0.0.0.0"
    cors_allow_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"
    seed_sample_todos: bool = True


def _get_env(name: str, default: str) -> str:
    """Read an env var; unset and empty both mean the default."""
    return os.getenv(name) or default


_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})
_FALSE_WORDS = frozenset({"0", "false", "no", "off"})


def _parse_bool(value: str, default: bool) -> bool:
    """Unrecognised words keep the default."""
    word = value.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    return default


def _parse_port(value: str) -> int:
    try:
        port = int(value.strip())
    except ValueError:
        return DEFAULT_PORT
    if not (0 < port < 65536):
        return DEFAULT_PORT
    return port


def _parse_origins(raw: str) -> List[str]:
    # "*" stays a single wildcard entry; blanks between commas are dropped
    if raw.strip() == "*":
        return ["*"]
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def _parse_log_level(value: str) -> str:
    level = value.strip().upper()
    if level not in LOG_LEVELS:
        return "INFO"
    return level


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    return Settings(
        port=_parse_port(_get_env("PORT", str(DEFAULT_PORT))),
        host=_get_env("HOST", "0.0.0.0").strip(),
        cors_allow_origins=_parse_origins(_get_env("CORS_ALLOW_ORIGINS", "*")),
        log_level=_parse_log_level(_get_env("LOG_LEVEL", "INFO")),
        seed_sample_todos=_parse_bool(_get_env("SEED_SAMPLE_TODOS", "true"), True),
    )
