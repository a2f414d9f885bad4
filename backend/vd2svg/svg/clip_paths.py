"""Clip-path indirection: drawable ``<clip-path>`` → ``<defs><clipPath>``."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass

from vd2svg.svg.attributes import ANDROID_NS

logger = logging.getLogger(__name__)

_PATH_DATA = f"{{{ANDROID_NS}}}pathData"


@dataclass
class ClipPathFragment:
    """A ``clipPath`` element not yet attached to any ``defs``."""

    node: ET.Element


def convert_clip_path(node: ET.Element) -> ClipPathFragment:
    path_data = node.get(_PATH_DATA, "")

    clip_path = ET.Element("clipPath")
    ET.SubElement(clip_path, "path", {"d": path_data})
    return ClipPathFragment(node=clip_path)


def register_clip_path(defs: ET.Element, fragment: ClipPathFragment) -> str:
    """Attach *fragment* to *defs* and return its generated id.

    Ids derive from the number of definitions already present, so entries must
    never be reordered or removed once appended.
    """
    clip_id = f"clip_path_{len(defs)}"
    fragment.node.set("id", clip_id)
    defs.append(fragment.node)
    logger.debug("Registered clip path %s", clip_id)
    return clip_id
