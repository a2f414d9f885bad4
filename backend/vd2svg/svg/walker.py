"""Recursive drawable → SVG tree walk.

Every node is dispatched on its ``NodeKind``:

- ``path``      → SVG ``<path>``
- ``group``     → SVG ``<g>`` with a composite ``transform`` and converted children
- ``clip-path`` → detached ``ClipPathFragment``; the caller registers it in the
  shared ``<defs>`` and references it from the next rendering sibling
- anything else → ``None`` (skipped by the caller)
"""

from __future__ import annotations

import enum
import logging
import xml.etree.ElementTree as ET
from collections.abc import Iterable

from vd2svg.errors import UnmappedAttributeError
from vd2svg.svg.attributes import GROUP_ATTRIBUTES, TransformSlot, qualified_name
from vd2svg.svg.clip_paths import ClipPathFragment, convert_clip_path, register_clip_path
from vd2svg.svg.paths import convert_path
from vd2svg.svg.transforms import TransformDescriptor, compose_transform

logger = logging.getLogger(__name__)

NodeResult = ET.Element | ClipPathFragment | None


class NodeKind(enum.Enum):
    PATH = "path"
    GROUP = "group"
    CLIP_PATH = "clip-path"
    UNKNOWN = ""

    @classmethod
    def of(cls, node: ET.Element) -> NodeKind:
        try:
            return cls(node.tag)
        except ValueError:
            return cls.UNKNOWN


def transform_node(node: ET.Element, defs: ET.Element, strict: bool = True) -> NodeResult:
    kind = NodeKind.of(node)

    if kind is NodeKind.PATH:
        return convert_path(node)
    if kind is NodeKind.GROUP:
        return _convert_group(node, defs, strict)
    if kind is NodeKind.CLIP_PATH:
        return convert_clip_path(node)

    logger.debug("Skipping unsupported element <%s>", node.tag)
    return None


def transform_children(
    nodes: Iterable[ET.Element],
    defs: ET.Element,
    strict: bool = True,
) -> list[ET.Element]:
    """Convert sibling nodes in order, wiring each clip-path to the next real sibling.

    A clip-path with no following rendering sibling stays in ``defs``
    unreferenced.
    """
    converted: list[ET.Element] = []
    pending_clip_id: str | None = None

    for node in nodes:
        result = transform_node(node, defs, strict)
        if result is None:
            continue

        if isinstance(result, ClipPathFragment):
            pending_clip_id = register_clip_path(defs, result)
            continue

        if pending_clip_id:
            result.set("clip-path", f"url(#{pending_clip_id})")
            pending_clip_id = None

        converted.append(result)

    return converted


def _convert_group(node: ET.Element, defs: ET.Element, strict: bool) -> ET.Element:
    group = ET.Element("g")
    direct: dict[str, str] = {}
    descriptor = TransformDescriptor()

    for name, value in node.attrib.items():
        source_name = qualified_name(name)
        svg_attr = GROUP_ATTRIBUTES.get(source_name)
        if svg_attr is None:
            if strict:
                raise UnmappedAttributeError(source_name)
            logger.warning("Dropping unmapped group attribute %s", source_name)
            continue

        if isinstance(svg_attr, TransformSlot):
            descriptor.set(svg_attr, value)
        else:
            direct[svg_attr] = value

    transform = compose_transform(descriptor)
    if transform:
        group.set("transform", transform)
    for key, value in direct.items():
        group.set(key, value)

    group.extend(transform_children(node, defs, strict))
    return group
