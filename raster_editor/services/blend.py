from __future__ import annotations

from typing import Callable

import numpy as np

from raster_editor.domain.image import Image

# Per-channel blend functions on normalised [0, 1] color; c1 = canvas, c2 = overlay.
BlendFn = Callable[[np.ndarray, np.ndarray], np.ndarray]


def _normal(c1: np.ndarray, c2: np.ndarray) -> np.ndarray:
    return c2


def _difference(c1: np.ndarray, c2: np.ndarray) -> np.ndarray:
    return np.abs(c1 - c2)


def _multiply(c1: np.ndarray, c2: np.ndarray) -> np.ndarray:
    return c1 * c2


def _screen(c1: np.ndarray, c2: np.ndarray) -> np.ndarray:
    return 1.0 - (1.0 - c1) * (1.0 - c2)


def _overlay(c1: np.ndarray, c2: np.ndarray) -> np.ndarray:
    return np.where(c1 < 0.5, 2.0 * c1 * c2, 1.0 - 2.0 * (1.0 - c1) * (1.0 - c2))


def _blend(
    fn: BlendFn,
    canvas: Image,
    overlay: Image,
    loop_start_y: int,
    loop_end_y: int,
    loop_start_x: int,
    loop_end_x: int,
    x: int,
    y: int,
    opacity: float,
) -> Image:
    """Blend the clipped overlay region onto a copy of the canvas.

    Pixels outside the region are copied from the canvas unchanged.
    """
    out = canvas.copy()
    if loop_end_x <= loop_start_x or loop_end_y <= loop_start_y:
        return out

    dst = out.as_array()
    src = overlay.as_array()

    cy0, cy1 = y + loop_start_y, y + loop_end_y
    cx0, cx1 = x + loop_start_x, x + loop_end_x

    base = dst[cy0:cy1, cx0:cx1].astype(np.float32) / 255.0
    top = src[loop_start_y:loop_end_y, loop_start_x:loop_end_x].astype(np.float32) / 255.0

    a1 = base[..., 3:4]
    a2 = top[..., 3:4] * float(opacity)
    c1 = base[..., :3]
    c2 = top[..., :3]

    rgb = a2 * fn(c1, c2) + (1.0 - a2) * c1
    alpha = a2 + a1 * (1.0 - a2)

    merged = np.concatenate([rgb, alpha], axis=-1) * 255.0
    dst[cy0:cy1, cx0:cx1] = np.clip(np.rint(merged), 0, 255).astype(np.uint8)
    return out


def normal(canvas, overlay, loop_start_y, loop_end_y, loop_start_x, loop_end_x, x, y, opacity) -> Image:
    return _blend(_normal, canvas, overlay, loop_start_y, loop_end_y, loop_start_x, loop_end_x, x, y, opacity)


def difference(canvas, overlay, loop_start_y, loop_end_y, loop_start_x, loop_end_x, x, y, opacity) -> Image:
    return _blend(_difference, canvas, overlay, loop_start_y, loop_end_y, loop_start_x, loop_end_x, x, y, opacity)


def multiply(canvas, overlay, loop_start_y, loop_end_y, loop_start_x, loop_end_x, x, y, opacity) -> Image:
    return _blend(_multiply, canvas, overlay, loop_start_y, loop_end_y, loop_start_x, loop_end_x, x, y, opacity)


def overlay(canvas, overlay, loop_start_y, loop_end_y, loop_start_x, loop_end_x, x, y, opacity) -> Image:
    return _blend(_overlay, canvas, overlay, loop_start_y, loop_end_y, loop_start_x, loop_end_x, x, y, opacity)


def screen(canvas, overlay, loop_start_y, loop_end_y, loop_start_x, loop_end_x, x, y, opacity) -> Image:
    return _blend(_screen, canvas, overlay, loop_start_y, loop_end_y, loop_start_x, loop_end_x, x, y, opacity)
