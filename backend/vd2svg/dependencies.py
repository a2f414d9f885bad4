"""FastAPI dependency injection."""

from __future__ import annotations

from vd2svg.config import Settings, settings


def get_settings() -> Settings:
    return settings
