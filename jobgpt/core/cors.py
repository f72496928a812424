from __future__ import annotations

from jobgpt.core.config import settings


def cors_allowed_origins() -> list[str]:
    return list(settings.cors_allowed_origins)


def cors_allowed_headers() -> list[str]:
    return list(settings.cors_allowed_headers)
