from raster_editor.core.errors import (
    InvalidAnchorError,
    InvalidBlendModeError,
    InvalidHexError,
    InvalidResizeModeError,
    OutsideCanvasError,
    PixelError,
    RasterError,
)
from raster_editor.domain.color import Color
from raster_editor.domain.image import Image
from raster_editor.services.clipping import ClipRegion, clip_region
from raster_editor.services.codec import decode_image, encode_image, open_image, save_image
from raster_editor.services.editor import (
    BlendMode,
    ResizeMode,
    blend,
    composite,
    crop,
    fill,
    resize,
)
from raster_editor.services.position import Anchor, Placement, resolve_position

__version__ = "0.1.0"
