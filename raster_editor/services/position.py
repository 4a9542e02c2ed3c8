from __future__ import annotations

from enum import Enum
from typing import NamedTuple

from raster_editor.core.errors import InvalidAnchorError


class Anchor(str, Enum):
    TOP_LEFT = "top-left"
    TOP_CENTER = "top-center"
    TOP_RIGHT = "top-right"
    CENTER_LEFT = "center-left"
    CENTER = "center"
    CENTER_RIGHT = "center-right"
    BOTTOM_LEFT = "bottom-left"
    BOTTOM_CENTER = "bottom-center"
    BOTTOM_RIGHT = "bottom-right"

    @classmethod
    def parse(cls, name: "Anchor | str") -> "Anchor":
        if isinstance(name, Anchor):
            return name
        key = (name or "").strip().lower()
        try:
            return cls(key)
        except ValueError:
            raise InvalidAnchorError(name) from None

    @property
    def horizontal(self) -> str:
        # "center" alone is center on both axes
        return self.value.split("-")[-1]

    @property
    def vertical(self) -> str:
        return self.value.split("-")[0]


class Placement(NamedTuple):
    x: int
    y: int


def _half(n: int) -> int:
    """Integer halving that truncates toward zero (not floor)."""
    return n // 2 if n >= 0 else -((-n) // 2)


def _base(align: str, outer: int, inner: int) -> int:
    if align in ("left", "top"):
        return 0
    if align in ("right", "bottom"):
        return outer - inner
    return _half(outer - inner)


def resolve_position(
    anchor: Anchor | str,
    offset_x: int,
    offset_y: int,
    canvas_width: int,
    canvas_height: int,
    overlay_width: int,
    overlay_height: int,
) -> Placement:
    """Top-left corner of the overlay on the canvas for a named anchor.

    Offsets are added after anchoring. Nothing is clamped: the result may be
    negative or past the canvas edge.
    """
    a = Anchor.parse(anchor)
    x = _base(a.horizontal, canvas_width, overlay_width) + offset_x
    y = _base(a.vertical, canvas_height, overlay_height) + offset_y
    return Placement(x, y)
