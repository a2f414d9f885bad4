"""Tests for path and clip-path conversion."""

import xml.etree.ElementTree as ET

from vd2svg.svg.clip_paths import ClipPathFragment, convert_clip_path, register_clip_path
from vd2svg.svg.paths import convert_path

_NS = 'xmlns:android="http://schemas.android.com/apk/res/android"'


def _node(markup: str) -> ET.Element:
    return ET.fromstring(markup.replace("<path ", f"<path {_NS} ").replace("<clip-path ", f"<clip-path {_NS} "))


def test_path_defaults_to_no_fill():
    svg_path = convert_path(_node('<path android:pathData="M0,0L1,1"/>'))
    assert svg_path.tag == "path"
    assert svg_path.attrib == {"fill": "none", "d": "M0,0L1,1"}


def test_path_fill_overrides_none():
    svg_path = convert_path(_node(
        '<path android:fillColor="#FF00FF00" android:fillType="evenOdd" android:pathData="M0,0z"/>'
    ))
    assert svg_path.get("fill") == "#FF00FF00"
    assert svg_path.get("fill-rule") == "evenodd"
    assert svg_path.get("d") == "M0,0z"
    assert "none" not in svg_path.attrib.values()


def test_path_stroke_attributes():
    svg_path = convert_path(_node(
        '<path android:strokeColor="#000" android:strokeWidth="2" '
        'android:strokeLineCap="round" android:strokeLineJoin="bevel" '
        'android:strokeMiterLimit="4" android:fillAlpha="0.5" android:pathData="M0,0"/>'
    ))
    assert svg_path.get("stroke") == "#000"
    assert svg_path.get("stroke-width") == "2"
    assert svg_path.get("stroke-linecap") == "round"
    assert svg_path.get("stroke-linejoin") == "bevel"
    assert svg_path.get("stroke-miterlimit") == "4"
    assert svg_path.get("fill-opacity") == "0.5"


def test_path_drops_unknown_attributes():
    svg_path = convert_path(_node(
        '<path android:name="x" android:trimPathEnd="0.5" android:pathData="M0,0"/>'
    ))
    assert set(svg_path.attrib) == {"fill", "d"}


def test_path_keeps_source_order():
    svg_path = convert_path(_node(
        '<path android:strokeColor="#111" android:pathData="M0,0" android:strokeWidth="1"/>'
    ))
    assert list(svg_path.attrib) == ["fill", "stroke", "d", "stroke-width"]


def test_clip_path_fragment_is_detached():
    fragment = convert_clip_path(_node('<clip-path android:pathData="M0,0h4v4z"/>'))
    assert isinstance(fragment, ClipPathFragment)
    assert fragment.node.tag == "clipPath"
    assert fragment.node.get("id") is None
    (inner,) = list(fragment.node)
    assert inner.tag == "path"
    assert inner.get("d") == "M0,0h4v4z"


def test_register_ids_follow_defs_size():
    defs = ET.Element("defs")
    first = register_clip_path(defs, convert_clip_path(_node('<clip-path android:pathData="M0"/>')))
    second = register_clip_path(defs, convert_clip_path(_node('<clip-path android:pathData="M1"/>')))
    assert (first, second) == ("clip_path_0", "clip_path_1")
    assert [c.get("id") for c in defs] == ["clip_path_0", "clip_path_1"]
