"""Viewport model read from the drawable root."""

from __future__ import annotations

from pydantic import BaseModel


class ViewportSpec(BaseModel):
    """Viewport and output size of a drawable, as raw strings.

    Output size falls back to the viewport when the drawable has no
    ``android:width`` / ``android:height``.
    """

    viewport_width: str = ""
    viewport_height: str = ""
    output_width: str = ""
    output_height: str = ""

    @property
    def width(self) -> str:
        return self.output_width or self.viewport_width

    @property
    def height(self) -> str:
        return self.output_height or self.viewport_height

    @property
    def view_box(self) -> str:
        return f"0 0 {self.viewport_width} {self.viewport_height}"
