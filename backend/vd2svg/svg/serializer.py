"""Write SVG text from a converted element tree."""

from __future__ import annotations

import xml.etree.ElementTree as ET


def serialize_svg(svg: ET.Element, pretty: bool = False, indent: str = "    ") -> str:
    """Serialize *svg* without an XML declaration.

    With ``pretty`` the tree is indented in place before serialization.
    """
    if pretty:
        ET.indent(svg, space=indent)
    return ET.tostring(svg, encoding="unicode")
