"""POST /api/convert — VectorDrawable XML to SVG."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException

from vd2svg.config import Settings
from vd2svg.dependencies import get_settings
from vd2svg.errors import ConversionError
from vd2svg.models.requests import ConvertRequest
from vd2svg.models.responses import ConvertResponse
from vd2svg.svg.document import ConversionOptions, build_svg
from vd2svg.svg.serializer import serialize_svg

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/convert", response_model=ConvertResponse)
async def convert(
    req: ConvertRequest,
    settings: Settings = Depends(get_settings),
) -> ConvertResponse:
    start = time.perf_counter()

    options = ConversionOptions(
        pretty=settings.pretty_default if req.pretty is None else req.pretty,
        strict_group_attributes=(
            settings.strict_group_attributes if req.strict is None else req.strict
        ),
    )

    try:
        svg = build_svg(req.xml, options)
    except ConversionError as e:
        logger.warning("Conversion failed: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e

    defs = svg.find("defs")
    elements = [child for child in svg if child.tag != "defs"]
    text = serialize_svg(svg, pretty=options.pretty)

    elapsed = (time.perf_counter() - start) * 1000
    return ConvertResponse(
        svg=text,
        clip_paths=len(defs) if defs is not None else 0,
        elements=len(elements),
        processing_time_ms=round(elapsed, 1),
    )
