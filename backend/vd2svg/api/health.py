"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from vd2svg import __version__
from vd2svg.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)
