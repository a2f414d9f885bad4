"""API response models."""

from __future__ import annotations

from pydantic import BaseModel


class ConvertResponse(BaseModel):
    svg: str
    clip_paths: int = 0
    elements: int = 0
    processing_time_ms: float = 0.0


class HealthResponse(BaseModel):
    status: str
    version: str
