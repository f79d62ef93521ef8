"""
Image input/output for PyFastResize.

Pillow-backed decoding of image files into ``RasterImage`` and encoding back
to PNG or JPEG, with the output format derived from the file extension.
"""

from .codecs import (
    raster_from_pil,
    raster_to_pil,
    decode_image,
    load_image,
    detect_encode_format,
    encode_image,
    save_image,
)

__all__ = [
    "raster_from_pil",
    "raster_to_pil",
    "decode_image",
    "load_image",
    "detect_encode_format",
    "encode_image",
    "save_image",
]
