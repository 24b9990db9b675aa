from __future__ import annotations

from resume_ats.core.config import settings


def cors_allowed_origins() -> list[str]:
    origins: list[str] = []
    for origin in settings.cors_allowed_origins:
        cleaned = origin.strip().rstrip("/")
        if cleaned and cleaned not in origins:
            origins.append(cleaned)
    return origins


def cors_allow_origin_regex() -> str | None:
    regex = (settings.cors_allow_origin_regex or "").strip()
    return regex or None
