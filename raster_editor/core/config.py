from __future__ import annotations

import os
from dataclasses import dataclass

from PIL import Image

_RESAMPLE_FILTERS = {
    "nearest": Image.Resampling.NEAREST,
    "bilinear": Image.Resampling.BILINEAR,
    "bicubic": Image.Resampling.BICUBIC,
    "lanczos": Image.Resampling.LANCZOS,
}


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    resample: str = "lanczos"
    max_upload_pixels: int = 40_000_000
    output_format: str = "PNG"

    @property
    def resample_filter(self) -> Image.Resampling:
        return _RESAMPLE_FILTERS.get(self.resample, Image.Resampling.LANCZOS)


def _int_env(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def get_settings() -> Settings:
    """Read settings from the environment.

    Values are re-read on every call so a `.env` loaded by `main` (or a test
    patching `os.environ`) is always honoured.
    """
    resample = (os.getenv("RASTER_RESAMPLE") or "lanczos").strip().lower()
    if resample not in _RESAMPLE_FILTERS:
        resample = "lanczos"
    return Settings(
        log_level=(os.getenv("LOG_LEVEL") or "INFO").strip().upper(),
        resample=resample,
        max_upload_pixels=_int_env("RASTER_MAX_UPLOAD_PIXELS", 40_000_000),
        output_format=(os.getenv("RASTER_OUTPUT_FORMAT") or "PNG").strip().upper(),
    )
