"""VectorDrawable → SVG attribute tables.

Path attributes map one-to-one onto SVG presentation attributes. Group
attributes either map directly (``android:name`` → ``id``) or feed a slot of
the group's transform descriptor.
"""

from __future__ import annotations

from typing import Callable

ANDROID_NS = "http://schemas.android.com/apk/res/android"

# Prefixes for namespaces ElementTree reports in Clark notation
_NS_PREFIXES = {
    ANDROID_NS: "android",
    "http://schemas.android.com/aapt": "aapt",
    "http://schemas.android.com/apk/res-auto": "app",
    "http://schemas.android.com/tools": "tools",
}

PATH_ATTRIBUTES: dict[str, str] = {
    "android:pathData": "d",
    "android:fillColor": "fill",
    "android:strokeLineJoin": "stroke-linejoin",
    "android:strokeLineCap": "stroke-linecap",
    "android:strokeMiterLimit": "stroke-miterlimit",
    "android:strokeWidth": "stroke-width",
    "android:strokeColor": "stroke",
    "android:fillType": "fill-rule",
    "android:fillAlpha": "fill-opacity",
}

_VALUE_TRANSFORMS: dict[str, Callable[[str], str]] = {
    "android:fillType": lambda value: value.lower(),
}


class TransformSlot(str):
    """Marks a group attribute that is folded into the composite transform."""


GROUP_ATTRIBUTES: dict[str, str] = {
    "android:name": "id",
    "android:pivotX": TransformSlot("pivotX"),
    "android:pivotY": TransformSlot("pivotY"),
    "android:rotation": TransformSlot("rotation"),
    "android:scaleX": TransformSlot("scaleX"),
    "android:scaleY": TransformSlot("scaleY"),
    "android:translateX": TransformSlot("translateX"),
    "android:translateY": TransformSlot("translateY"),
}


def qualified_name(name: str) -> str:
    """Turn ``{ns}local`` into ``prefix:local`` for known namespaces."""
    if not name.startswith("{"):
        return name
    uri, _, local = name[1:].partition("}")
    prefix = _NS_PREFIXES.get(uri)
    return f"{prefix}:{local}" if prefix else name


def map_path_attribute(name: str) -> str | None:
    """Target SVG attribute for a path attribute, or None when unrecognized."""
    return PATH_ATTRIBUTES.get(qualified_name(name))


def transform_path_value(name: str, value: str) -> str:
    transformer = _VALUE_TRANSFORMS.get(qualified_name(name))
    return transformer(value) if transformer and value else value
