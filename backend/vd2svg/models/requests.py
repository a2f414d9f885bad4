"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ConvertRequest(BaseModel):
    xml: str = Field(..., description="Raw VectorDrawable XML")
    pretty: bool | None = Field(
        default=None,
        description="Indent the SVG output (defaults to the server setting)",
    )
    strict: bool | None = Field(
        default=None,
        description="Reject unmapped group attributes instead of skipping them",
    )
