"""vd2svg — Android VectorDrawable to SVG converter."""

from __future__ import annotations

from vd2svg.errors import ConversionError, UnmappedAttributeError, VectorDrawableError
from vd2svg.svg.document import ConversionOptions, transform

__version__ = "0.1.0"

__all__ = [
    "ConversionError",
    "ConversionOptions",
    "UnmappedAttributeError",
    "VectorDrawableError",
    "transform",
]
