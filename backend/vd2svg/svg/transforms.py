"""Composite ``transform`` attribute for ``<g>`` elements.

Components are emitted in a fixed order (scale, rotation, translation) and only
when non-zero. An explicit ``0`` is indistinguishable from an unset attribute.

Known gaps, kept as-is:
- the rotation value is read from the pivot-Y slot, not ``android:rotation``;
- pivot values only decide ``has_pivot``; no token is produced for them.
"""

from __future__ import annotations

from dataclasses import dataclass


def _is_zero(value: str) -> bool:
    if not value:
        return True
    try:
        return float(value) == 0
    except ValueError:
        return False


def _or_zero(value: str) -> str:
    return value or "0"


@dataclass
class TransformDescriptor:
    """Raw transform slot values collected from a drawable group."""

    pivotX: str = ""
    pivotY: str = ""
    rotation: str = ""
    scaleX: str = ""
    scaleY: str = ""
    translateX: str = ""
    translateY: str = ""

    def set(self, slot: str, value: str) -> None:
        if slot not in self.__dataclass_fields__:
            raise KeyError(slot)
        setattr(self, slot, value)

    @property
    def has_scale(self) -> bool:
        return not (_is_zero(self.scaleX) and _is_zero(self.scaleY))

    @property
    def has_pivot(self) -> bool:
        return not (_is_zero(self.pivotX) and _is_zero(self.pivotY))

    @property
    def has_translation(self) -> bool:
        return not (_is_zero(self.translateX) and _is_zero(self.translateY))

    @property
    def rotation_value(self) -> str:
        return self.pivotY

    @property
    def has_rotation(self) -> bool:
        return not _is_zero(self.rotation_value)


def compose_transform(descriptor: TransformDescriptor) -> str | None:
    """Space-joined transform tokens, or None when every component is zero."""
    tokens: list[str] = []

    if descriptor.has_scale:
        tokens.append(f"scale({_or_zero(descriptor.scaleX)}, {_or_zero(descriptor.scaleY)})")

    if descriptor.has_rotation:
        tokens.append(f"rotation({descriptor.rotation_value})")

    if descriptor.has_translation:
        tokens.append(
            f"translation({_or_zero(descriptor.translateX)}, {_or_zero(descriptor.translateY)})"
        )

    # TODO: emit a pivot-aware rotate(r, px, py) once the rotation slot is read from android:rotation
    return " ".join(tokens) if tokens else None
