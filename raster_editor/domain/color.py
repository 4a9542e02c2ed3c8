from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from raster_editor.core.errors import InvalidHexError


@dataclass(frozen=True)
class Color:
    """RGBA color, one byte per channel."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self):
        for name in ("r", "g", "b", "a"):
            v = getattr(self, name)
            if not isinstance(v, int) or not 0 <= v <= 255:
                raise ValueError(f"channel {name} must be an int in 0..255, got {v!r}")

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> "Color":
        return cls(r, g, b, 255)

    @classmethod
    def rgba(cls, r: int, g: int, b: int, a: int) -> "Color":
        return cls(r, g, b, a)

    @classmethod
    def hex(cls, value: str) -> "Color":
        """Parse "#RRGGBB" or "#RRGGBBAA" (the leading "#" is required)."""
        s = (value or "").strip()
        if not s.startswith("#") or len(s) not in (7, 9):
            raise InvalidHexError(value)
        try:
            channels = [int(s[i:i + 2], 16) for i in range(1, len(s), 2)]
        except ValueError as exc:
            raise InvalidHexError(value) from exc
        if len(channels) == 3:
            channels.append(255)
        return cls(*channels)

    @classmethod
    def black(cls) -> "Color":
        return cls(0, 0, 0)

    @classmethod
    def white(cls) -> "Color":
        return cls(255, 255, 255)

    @classmethod
    def red(cls) -> "Color":
        return cls(255, 0, 0)

    @classmethod
    def green(cls) -> "Color":
        return cls(0, 255, 0)

    @classmethod
    def blue(cls) -> "Color":
        return cls(0, 0, 255)

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)

    def to_hex(self) -> str:
        return "#{:02X}{:02X}{:02X}{:02X}".format(*self.as_tuple())
