from __future__ import annotations

from typing import NamedTuple

from raster_editor.core.errors import OutsideCanvasError


class ClipRegion(NamedTuple):
    """Visible part of the overlay, in overlay-local coordinates (end-exclusive)."""

    loop_start_x: int
    loop_end_x: int
    loop_start_y: int
    loop_end_y: int

    @property
    def width(self) -> int:
        return self.loop_end_x - self.loop_start_x

    @property
    def height(self) -> int:
        return self.loop_end_y - self.loop_start_y


def overlaps(canvas_width: int, canvas_height: int, overlay_width: int, overlay_height: int, x: int, y: int) -> bool:
    return x < canvas_width and x + overlay_width > 0 and y < canvas_height and y + overlay_height > 0


def clip_region(
    canvas_width: int,
    canvas_height: int,
    overlay_width: int,
    overlay_height: int,
    x: int,
    y: int,
) -> ClipRegion:
    """Loop bounds of the overlay pixels that land on the canvas.

    For every i in [loop_start_x, loop_end_x) and j in [loop_start_y, loop_end_y),
    canvas pixel (x + i, y + j) is in range.

    Raises:
        OutsideCanvasError: the overlay and the canvas do not intersect.
    """
    if not overlaps(canvas_width, canvas_height, overlay_width, overlay_height, x, y):
        raise OutsideCanvasError(
            f"overlay {overlay_width}x{overlay_height} at ({x}, {y}) "
            f"falls outside canvas {canvas_width}x{canvas_height}"
        )

    loop_start_x = max(0, -x)
    loop_end_x = overlay_width - max(0, (x + overlay_width) - canvas_width)
    loop_start_y = max(0, -y)
    loop_end_y = overlay_height - max(0, (y + overlay_height) - canvas_height)
    return ClipRegion(loop_start_x, loop_end_x, loop_start_y, loop_end_y)
