from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_list(name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(name, None)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


@dataclass(frozen=True)
class Settings:
    log_level: str
    sentry_dsn: str | None
    database_path: str
    cors_allowed_origins: tuple[str, ...]
    cors_allowed_headers: tuple[str, ...]


settings = Settings(
    log_level=_get_env("LOG_LEVEL", "INFO") or "INFO",
    sentry_dsn=_get_env("SENTRY_DSN"),
    database_path=_get_env("DATABASE_PATH", "data/jobgpt.db") or "data/jobgpt.db",
    cors_allowed_origins=_get_env_list("CORS_ALLOWED_ORIGINS", ["*"]),
    cors_allowed_headers=(
        "authorization",
        "x-client-info",
        "apikey",
        "content-type",
        "x-user-id",
    ),
)
