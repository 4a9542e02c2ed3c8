from __future__ import annotations

from typing import Optional

from PIL import Image as PILImage

from raster_editor.core.config import get_settings
from raster_editor.domain.image import Image


def _resample(resample: Optional[PILImage.Resampling]) -> PILImage.Resampling:
    return resample if resample is not None else get_settings().resample_filter


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


def _require_pixels(image: Image) -> None:
    if image.width <= 0 or image.height <= 0:
        raise ValueError(f"cannot resize an empty {image.width}x{image.height} image")


def _require_target(**dims: int) -> None:
    for name, value in dims.items():
        if value <= 0:
            raise ValueError(f"target {name} must be > 0, got {value}")


def resize_exact(image: Image, width: int, height: int, *, resample=None) -> None:
    """Scale both axes to exactly width x height, ignoring aspect ratio.

    Raises:
        ValueError: the image is empty or a target dimension is <= 0.
    """
    _require_pixels(image)
    _require_target(width=width, height=height)
    w, h = int(width), int(height)
    if (w, h) == image.size:
        return
    resized = image.to_pil().resize((w, h), _resample(resample))
    image.swap(w, h, resized.tobytes())


def resize_exact_width(image: Image, width: int, *, resample=None) -> None:
    """Scale to the given width; height follows the aspect ratio."""
    _require_pixels(image)
    _require_target(width=width)
    height = _ceil_div(image.height * width, image.width)
    resize_exact(image, width, height, resample=resample)


def resize_exact_height(image: Image, height: int, *, resample=None) -> None:
    """Scale to the given height; width follows the aspect ratio."""
    _require_pixels(image)
    _require_target(height=height)
    width = _ceil_div(image.width * height, image.height)
    resize_exact(image, width, height, resample=resample)


def _fit_size(src_w: int, src_h: int, width: int, height: int, *, cover: bool) -> tuple[int, int]:
    # Try matching the width first; switch to the height when the other axis
    # overflows (fit) or falls short (cover).
    optimum_width = width
    optimum_height = _ceil_div(width * src_h, src_w)
    if (optimum_height < height) if cover else (optimum_height > height):
        optimum_width = _ceil_div(height * src_w, src_h)
        optimum_height = height
    return optimum_width, optimum_height


def resize_fit(image: Image, width: int, height: int, *, resample=None) -> None:
    """Scale uniformly so the whole image fits inside width x height."""
    _require_pixels(image)
    _require_target(width=width, height=height)
    w, h = _fit_size(image.width, image.height, width, height, cover=False)
    resize_exact(image, w, h, resample=resample)


def resize_fill(image: Image, width: int, height: int, *, resample=None) -> None:
    """Scale uniformly to cover width x height, then crop the excess around the center."""
    from raster_editor.services.editor import crop

    _require_pixels(image)
    _require_target(width=width, height=height)
    w, h = _fit_size(image.width, image.height, width, height, cover=True)
    resize_exact(image, w, h, resample=resample)
    crop(image, int(width), int(height), "center", 0, 0)
