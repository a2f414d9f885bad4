"""Document assembly — VectorDrawable text → SVG text.

Parses the drawable, builds the ``<svg>`` root from the viewport, walks the
top-level children and gives every top-level element an id.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections import Counter
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from vd2svg.errors import VectorDrawableError
from vd2svg.models.viewport import ViewportSpec
from vd2svg.svg.attributes import ANDROID_NS
from vd2svg.svg.dimensions import remove_dimen_suffix
from vd2svg.svg.serializer import serialize_svg
from vd2svg.svg.walker import transform_children

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"
ROOT_ID = "vector"


@dataclass
class ConversionOptions:
    """Per-call conversion switches."""

    pretty: bool = False
    # False: unmapped group attributes are logged and skipped instead of raising
    strict_group_attributes: bool = True

    @classmethod
    def coerce(cls, options: ConversionOptions | Mapping[str, Any] | None) -> ConversionOptions:
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        return cls(
            pretty=bool(options.get("pretty", False)),
            strict_group_attributes=bool(options.get("strict_group_attributes", True)),
        )


def _android(name: str) -> str:
    return f"{{{ANDROID_NS}}}{name}"


def parse_drawable(xml_text: str | bytes) -> ET.Element:
    try:
        return ET.fromstring(xml_text)
    except ET.ParseError as e:
        raise VectorDrawableError(f"VectorDrawable is invalid: {e}") from e


def find_vector(root: ET.Element) -> ET.Element:
    """The single ``<vector>`` element of the document, root included."""
    vectors = list(root.iter("vector"))
    if len(vectors) != 1:
        raise VectorDrawableError(
            f"VectorDrawable is invalid: expected one <vector> element, found {len(vectors)}"
        )
    return vectors[0]


def read_viewport(vector: ET.Element) -> ViewportSpec:
    return ViewportSpec(
        viewport_width=vector.get(_android("viewportWidth"), ""),
        viewport_height=vector.get(_android("viewportHeight"), ""),
        output_width=remove_dimen_suffix(vector.get(_android("width"), "")),
        output_height=remove_dimen_suffix(vector.get(_android("height"), "")),
    )


def _assign_ids(nodes: list[ET.Element]) -> None:
    """Keep existing ids, otherwise ``<tag>_<n>`` counted per tag over all top-level nodes."""
    ordinals: Counter[str] = Counter()
    for node in nodes:
        ordinal = ordinals[node.tag]
        ordinals[node.tag] += 1
        if not node.get("id"):
            node.set("id", f"{node.tag}_{ordinal}")
            logger.debug("Assigned id %s", node.get("id"))


def build_svg(
    xml_text: str | bytes,
    options: ConversionOptions | Mapping[str, Any] | None = None,
) -> ET.Element:
    """Convert drawable text into an SVG element tree."""
    opts = ConversionOptions.coerce(options)
    vector = find_vector(parse_drawable(xml_text))
    viewport = read_viewport(vector)

    svg = ET.Element("svg")
    svg.set("id", ROOT_ID)
    svg.set("xmlns", SVG_NS)
    svg.set("width", viewport.width)
    svg.set("height", viewport.height)
    svg.set("viewBox", viewport.view_box)

    defs = ET.Element("defs")
    nodes = transform_children(vector, defs, opts.strict_group_attributes)

    if len(defs):
        svg.append(defs)

    _assign_ids(nodes)
    svg.extend(nodes)

    logger.info(
        "Converted drawable: %d top-level elements, %d clip paths, viewBox %s",
        len(nodes),
        len(defs),
        viewport.view_box,
    )
    return svg


def transform(
    xml_text: str | bytes,
    options: ConversionOptions | Mapping[str, Any] | None = None,
) -> str:
    """Convert VectorDrawable XML into SVG text.

    Raises ``VectorDrawableError`` unless the document holds exactly one
    ``<vector>``, and ``UnmappedAttributeError`` for unknown group attributes in
    strict mode.
    """
    opts = ConversionOptions.coerce(options)
    return serialize_svg(build_svg(xml_text, opts), pretty=opts.pretty)
