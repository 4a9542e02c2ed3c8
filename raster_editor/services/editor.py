"""Compositing and geometric edits over `Image` buffers.

Geometry (anchor resolution and clipping) lives here; pixel math is delegated
to `blend` and resampling to `transform`.
"""
from __future__ import annotations

from enum import Enum
from typing import Callable, Dict

from raster_editor.core.errors import (
    InvalidBlendModeError,
    InvalidResizeModeError,
    OutsideCanvasError,
    PixelError,
)
from raster_editor.core.logger import get_logger
from raster_editor.domain.color import Color
from raster_editor.domain.image import Image
from raster_editor.services import blend as blend_ops
from raster_editor.services import transform
from raster_editor.services.clipping import clip_region
from raster_editor.services.position import Anchor, resolve_position

logger = get_logger("editor")


class BlendMode(str, Enum):
    NORMAL = "normal"
    DIFFERENCE = "difference"
    MULTIPLY = "multiply"
    OVERLAY = "overlay"
    SCREEN = "screen"

    @classmethod
    def parse(cls, name: "BlendMode | str") -> "BlendMode":
        if isinstance(name, BlendMode):
            return name
        try:
            return cls((name or "").lower())
        except ValueError:
            raise InvalidBlendModeError(name) from None


class ResizeMode(str, Enum):
    EXACT = "exact"
    EXACT_WIDTH = "exact_width"
    EXACT_HEIGHT = "exact_height"
    FIT = "fit"
    FILL = "fill"

    @classmethod
    def parse(cls, name: "ResizeMode | str") -> "ResizeMode":
        if isinstance(name, ResizeMode):
            return name
        try:
            return cls(name)
        except ValueError:
            raise InvalidResizeModeError(name) from None


BLEND_OPERATIONS: Dict[BlendMode, Callable[..., Image]] = {
    BlendMode.NORMAL: blend_ops.normal,
    BlendMode.DIFFERENCE: blend_ops.difference,
    BlendMode.MULTIPLY: blend_ops.multiply,
    BlendMode.OVERLAY: blend_ops.overlay,
    BlendMode.SCREEN: blend_ops.screen,
}

RESIZE_OPERATIONS: Dict[ResizeMode, Callable[[Image, int, int], None]] = {
    ResizeMode.EXACT: lambda img, w, h: transform.resize_exact(img, w, h),
    ResizeMode.EXACT_WIDTH: lambda img, w, h: transform.resize_exact_width(img, w),
    ResizeMode.EXACT_HEIGHT: lambda img, w, h: transform.resize_exact_height(img, h),
    ResizeMode.FIT: lambda img, w, h: transform.resize_fit(img, w, h),
    ResizeMode.FILL: lambda img, w, h: transform.resize_fill(img, w, h),
}


def clamp_opacity(opacity: float) -> float:
    return min(1.0, max(0.0, float(opacity)))


def composite(
    canvas: Image,
    overlay: Image,
    mode: BlendMode | str = BlendMode.NORMAL,
    opacity: float = 1.0,
    anchor: Anchor | str = Anchor.CENTER,
    offset_x: int = 0,
    offset_y: int = 0,
) -> Image:
    """Blend `overlay` on top of `canvas` and return a new image.

    Neither input is modified. Opacity is saturated to [0, 1].

    Raises:
        InvalidBlendModeError: unknown mode name.
        InvalidAnchorError: unknown anchor name.
        OutsideCanvasError: the placed overlay does not touch the canvas.
    """
    blend_mode = BlendMode.parse(mode)
    opacity = clamp_opacity(opacity)

    x, y = resolve_position(
        anchor, offset_x, offset_y, canvas.width, canvas.height, overlay.width, overlay.height
    )
    region = clip_region(canvas.width, canvas.height, overlay.width, overlay.height, x, y)
    logger.debug(
        "composite",
        extra={"props": {"mode": blend_mode.value, "opacity": opacity, "x": x, "y": y, "clip": list(region)}},
    )

    op = BLEND_OPERATIONS[blend_mode]
    return op(
        canvas,
        overlay,
        region.loop_start_y,
        region.loop_end_y,
        region.loop_start_x,
        region.loop_end_x,
        x,
        y,
        opacity,
    )


blend = composite


def _empty_crop(image: Image, crop_width: int, crop_height: int, x: int, y: int) -> None:
    """Leave a 0-width and/or 0-height image when the crop rectangle holds no pixels."""
    logger.debug("crop is empty", extra={"props": {"x": x, "y": y, "size": [crop_width, crop_height]}})
    image.swap(max(0, min(crop_width, image.width - x)), max(0, min(crop_height, image.height - y)), b"")


def crop(
    image: Image,
    crop_width: int,
    crop_height: int,
    anchor: Anchor | str = Anchor.TOP_LEFT,
    offset_x: int = 0,
    offset_y: int = 0,
) -> None:
    """Crop `image` in place to the anchored rectangle.

    A start before the origin is pulled back to 0 and a rectangle running past
    the image is truncated, so crop never fails on geometry. A rectangle that
    starts at or beyond the far edge, or a width or height <= 0, leaves an
    empty image.
    """
    x, y = resolve_position(anchor, offset_x, offset_y, image.width, image.height, crop_width, crop_height)
    x = max(0, x)
    y = max(0, y)

    if crop_width <= 0 or crop_height <= 0:
        _empty_crop(image, crop_width, crop_height, x, y)
        return
    try:
        region = clip_region(image.width, image.height, crop_width, crop_height, x, y)
    except OutsideCanvasError:
        _empty_crop(image, crop_width, crop_height, x, y)
        return

    # x, y >= 0 so the region starts at the crop origin
    out_w, out_h = region.width, region.height
    src = image.as_array()
    window = src[y:y + out_h, x:x + out_w]
    if window.shape[:2] != (out_h, out_w):
        raise PixelError(x + out_w - 1, y + out_h - 1, image.width, image.height)

    logger.debug("crop", extra={"props": {"x": x, "y": y, "width": out_w, "height": out_h}})
    image.swap(out_w, out_h, window.tobytes())


def fill(image: Image, color: Color | str) -> None:
    """Overwrite every pixel of `image` with `color` (a Color or "#RRGGBB[AA]")."""
    if not isinstance(color, Color):
        color = Color.hex(color)
    image.as_array()[...] = color.as_tuple()


def resize(image: Image, width: int, height: int, mode: ResizeMode | str = ResizeMode.FIT) -> None:
    """Resize `image` in place with the named mode.

    Raises:
        InvalidResizeModeError: unknown mode name.
    """
    resize_mode = ResizeMode.parse(mode)
    logger.debug("resize", extra={"props": {"mode": resize_mode.value, "width": width, "height": height}})
    RESIZE_OPERATIONS[resize_mode](image, width, height)
