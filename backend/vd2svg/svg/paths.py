"""VectorDrawable ``<path>`` → SVG ``<path>``."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from vd2svg.svg.attributes import map_path_attribute, transform_path_value


def convert_path(node: ET.Element) -> ET.Element:
    """Build an SVG path from a drawable path.

    ``fill`` starts as ``none`` so a drawable without ``android:fillColor``
    stays unfilled; unknown attributes are dropped.
    """
    svg_path = ET.Element("path")
    svg_path.set("fill", "none")

    for name, value in node.attrib.items():
        svg_name = map_path_attribute(name)
        if svg_name:
            svg_path.set(svg_name, transform_path_value(name, value))

    return svg_path
