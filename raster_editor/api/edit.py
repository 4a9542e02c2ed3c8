from __future__ import annotations

import base64
from typing import Optional

from fastapi import APIRouter, File, Form, HTTPException, UploadFile

from raster_editor.core.config import get_settings
from raster_editor.core.errors import OutsideCanvasError, PixelError, RasterError
from raster_editor.core.logger import TaskLogger
from raster_editor.domain.image import Image
from raster_editor.services import editor
from raster_editor.services.codec import decode_image, encode_image

router = APIRouter(tags=["edit"])


def _image_response(img: Image) -> dict:
    fmt = get_settings().output_format
    # Encoders reject 0 px images; an empty crop comes back without a payload.
    payload = b"" if img.width == 0 or img.height == 0 else encode_image(img, format=fmt)
    return {
        "width": img.width,
        "height": img.height,
        "format": fmt,
        "image_b64": base64.b64encode(payload).decode("utf-8"),
    }


async def _read_image(upload: UploadFile, field: str) -> Image:
    data = await upload.read()
    try:
        img = decode_image(data)
    except Exception as exc:
        raise HTTPException(status_code=400, detail=f"Invalid {field}: {exc}") from exc
    limit = get_settings().max_upload_pixels
    if img.width * img.height > limit:
        raise HTTPException(status_code=413, detail=f"{field} exceeds {limit} pixels")
    return img


def _raise_http(exc: RasterError, logger: TaskLogger, op: str) -> None:
    logger.error(f"{op} failed", error=str(exc), error_type=type(exc).__name__)
    if isinstance(exc, OutsideCanvasError):
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    if isinstance(exc, PixelError):
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    raise HTTPException(status_code=400, detail=str(exc)) from exc


@router.post("/composite")
async def composite_images(
    canvas: UploadFile = File(...),
    overlay: UploadFile = File(...),
    mode: str = Form("normal"),
    opacity: float = Form(1.0),
    anchor: str = Form("center"),
    offset_x: int = Form(0),
    offset_y: int = Form(0),
):
    logger = TaskLogger()
    base = await _read_image(canvas, "canvas")
    top = await _read_image(overlay, "overlay")
    logger.info("composite", mode=mode, opacity=opacity, anchor=anchor, offset=[offset_x, offset_y])
    try:
        out = editor.composite(base, top, mode, opacity, anchor, offset_x, offset_y)
    except RasterError as exc:
        _raise_http(exc, logger, "composite")
    return _image_response(out)


@router.post("/crop")
async def crop_image(
    image: UploadFile = File(...),
    width: int = Form(...),
    height: int = Form(...),
    anchor: str = Form("top-left"),
    offset_x: int = Form(0),
    offset_y: int = Form(0),
):
    logger = TaskLogger()
    img = await _read_image(image, "image")
    logger.info("crop", size=[width, height], anchor=anchor, offset=[offset_x, offset_y])
    try:
        editor.crop(img, width, height, anchor, offset_x, offset_y)
    except RasterError as exc:
        _raise_http(exc, logger, "crop")
    return _image_response(img)


@router.post("/fill")
async def fill_image(
    color: str = Form(...),
    image: Optional[UploadFile] = File(None),
    width: int = Form(100),
    height: int = Form(100),
):
    """Fill an uploaded image, or a blank width x height canvas when none is sent."""
    logger = TaskLogger()
    if image is not None:
        img = await _read_image(image, "image")
    else:
        if width < 0 or height < 0 or width * height > get_settings().max_upload_pixels:
            raise HTTPException(status_code=400, detail=f"invalid canvas size {width}x{height}")
        img = Image.blank(width, height)
    logger.info("fill", color=color, size=[img.width, img.height])
    try:
        editor.fill(img, color)
    except RasterError as exc:
        _raise_http(exc, logger, "fill")
    return _image_response(img)


@router.post("/resize")
async def resize_image(
    image: UploadFile = File(...),
    width: int = Form(...),
    height: int = Form(...),
    mode: str = Form("fit"),
):
    logger = TaskLogger()
    img = await _read_image(image, "image")
    if width <= 0 or height <= 0:
        raise HTTPException(status_code=400, detail=f"invalid target size {width}x{height}")
    logger.info("resize", mode=mode, size=[width, height])
    try:
        editor.resize(img, width, height, mode)
    except RasterError as exc:
        _raise_http(exc, logger, "resize")
    return _image_response(img)
