from __future__ import annotations


class RasterError(Exception):
    """Base class for every error raised by raster_editor."""


class OutsideCanvasError(RasterError):
    def __init__(self, message: str = "overlay falls outside the canvas"):
        super().__init__(message)


class InvalidBlendModeError(RasterError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"invalid blend mode: {name!r}")


class InvalidResizeModeError(RasterError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"invalid resize mode: {name!r}")


class InvalidAnchorError(RasterError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"invalid anchor: {name!r}")


class InvalidHexError(RasterError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"invalid hex color: {value!r}")


class PixelError(RasterError, IndexError):
    """A pixel read or write fell outside the image bounds."""

    def __init__(self, x: int, y: int, width: int, height: int):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(f"pixel ({x}, {y}) out of range for {width}x{height} image")
