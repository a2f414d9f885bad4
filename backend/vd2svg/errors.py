"""Conversion errors."""

from __future__ import annotations


class ConversionError(Exception):
    """Base class for fatal conversion failures."""


class VectorDrawableError(ConversionError, ValueError):
    """The input is not a single, well-formed VectorDrawable document."""


class UnmappedAttributeError(ConversionError, KeyError):
    """A group attribute has no SVG counterpart."""

    def __init__(self, attribute: str) -> None:
        super().__init__(attribute)
        self.attribute = attribute

    def __str__(self) -> str:
        return f"No SVG mapping for group attribute {self.attribute!r}"
