from __future__ import annotations

from typing import NamedTuple

import numpy as np
from PIL import Image as PILImage

from raster_editor.core.errors import PixelError
from raster_editor.domain.color import Color

CHANNELS = 4


class _Raster(NamedTuple):
    width: int
    height: int
    data: bytearray


def _check_dims(width: int, height: int) -> None:
    if width < 0 or height < 0:
        raise ValueError(f"image dimensions must be >= 0, got {width}x{height}")


class Image:
    """In-memory RGBA raster: row-major, 4 bytes per pixel.

    Width, height and the byte buffer live in one record that is replaced as a
    whole by `swap`, so `len(bytes) == width * height * 4` holds at every point
    a caller can observe.
    """

    def __init__(self, width: int, height: int, data: bytes | bytearray | None = None):
        _check_dims(width, height)
        if data is None:
            data = bytearray(width * height * CHANNELS)
        self._raster = self._make_raster(width, height, data)

    @staticmethod
    def _make_raster(width: int, height: int, data) -> _Raster:
        buf = bytearray(data)
        expected = width * height * CHANNELS
        if len(buf) != expected:
            raise ValueError(f"buffer length {len(buf)} does not match {width}x{height}x{CHANNELS}={expected}")
        return _Raster(width, height, buf)

    @classmethod
    def blank(cls, width: int, height: int) -> "Image":
        return cls(width, height)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> "Image":
        if arr.ndim != 3 or arr.shape[2] != CHANNELS:
            raise ValueError(f"expected an HxWx4 array, got shape {arr.shape}")
        h, w = arr.shape[:2]
        return cls(w, h, np.ascontiguousarray(arr, dtype=np.uint8).tobytes())

    @classmethod
    def from_pil(cls, pil_image: PILImage.Image) -> "Image":
        rgba = pil_image.convert("RGBA")
        w, h = rgba.size
        return cls(w, h, rgba.tobytes())

    @property
    def width(self) -> int:
        return self._raster.width

    @property
    def height(self) -> int:
        return self._raster.height

    @property
    def size(self) -> tuple[int, int]:
        return (self._raster.width, self._raster.height)

    @property
    def bytes(self) -> bytearray:
        return self._raster.data

    def swap(self, width: int, height: int, data: bytes | bytearray) -> None:
        """Replace dimensions and buffer together; validates before touching state."""
        _check_dims(width, height)
        self._raster = self._make_raster(width, height, data)

    def swap_from(self, other: "Image") -> None:
        self._raster = other._raster

    def copy(self) -> "Image":
        return Image(self.width, self.height, bytes(self.bytes))

    def as_array(self) -> np.ndarray:
        """Writable (height, width, 4) uint8 view over the buffer."""
        r = self._raster
        return np.frombuffer(r.data, dtype=np.uint8).reshape(r.height, r.width, CHANNELS)

    def to_pil(self) -> PILImage.Image:
        if self.width == 0 or self.height == 0:
            return PILImage.new("RGBA", self.size)
        return PILImage.frombytes("RGBA", self.size, bytes(self.bytes))

    def _index(self, x: int, y: int) -> int:
        r = self._raster
        if not (0 <= x < r.width and 0 <= y < r.height):
            raise PixelError(x, y, r.width, r.height)
        return (y * r.width + x) * CHANNELS

    def get_pixel(self, x: int, y: int) -> Color:
        i = self._index(x, y)
        d = self._raster.data
        return Color(d[i], d[i + 1], d[i + 2], d[i + 3])

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        i = self._index(x, y)
        self._raster.data[i:i + CHANNELS] = bytes(color.as_tuple())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return self.size == other.size and self.bytes == other.bytes

    __hash__ = None

    def __repr__(self) -> str:
        return f"Image(width={self.width}, height={self.height})"
