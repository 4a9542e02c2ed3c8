from __future__ import annotations

import io
from pathlib import Path

from PIL import Image as PILImage

from raster_editor.domain.image import Image


def decode_image(data: bytes) -> Image:
    """Decode any Pillow-readable bytes into an RGBA Image."""
    with PILImage.open(io.BytesIO(data)) as pil_image:
        return Image.from_pil(pil_image)


def encode_image(image: Image, format: str = "PNG") -> bytes:
    pil_image = image.to_pil()
    fmt = (format or "PNG").upper()
    if fmt in {"JPEG", "JPG"}:
        # JPEG has no alpha channel
        pil_image = pil_image.convert("RGB")
        fmt = "JPEG"
    buf = io.BytesIO()
    pil_image.save(buf, format=fmt)
    return buf.getvalue()


def open_image(path: str | Path) -> Image:
    path = Path(path)
    if not path.exists() or not path.is_file():
        raise FileNotFoundError(f"image not found: {path}")
    with PILImage.open(path) as pil_image:
        return Image.from_pil(pil_image)


def save_image(image: Image, path: str | Path) -> Path:
    """Save using the format implied by the file extension."""
    path = Path(path)
    pil_image = image.to_pil()
    if path.suffix.lower() in {".jpg", ".jpeg"}:
        pil_image = pil_image.convert("RGB")
    pil_image.save(path)
    return path
