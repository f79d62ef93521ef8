"""
Image codecs for PyFastResize.

Bridges encoded image files and ``RasterImage`` using Pillow. Decoding accepts
anything Pillow can read (PNG, JPEG, GIF, ...) and always yields RGBA8;
encoding supports PNG (lossless) and JPEG (lossy, alpha dropped), chosen from
the output file extension.

Pillow failures are re-raised as ``DecodeError`` / ``EncodeError`` with the
original exception chained.
"""

import io
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from .. import constants as cte
from ..errors import DecodeError, EncodeError, UnsupportedFormat
from ..rastermanip.raster import RasterImage


def raster_from_pil(pil_image):
    """Convert a Pillow image to an RGBA RasterImage."""
    if pil_image.mode != "RGBA":
        pil_image = pil_image.convert("RGBA")
    return RasterImage(np.asarray(pil_image, dtype=np.uint8))


def raster_to_pil(image):
    """Convert a RasterImage to a Pillow RGBA image."""
    return Image.fromarray(image.to_array())


def decode_image(data, name="<bytes>"):
    """
    Decode encoded image bytes into a RasterImage.

    Only the first frame of animated formats is used.

    Args:
        data: Encoded image bytes
        name: Label used in error messages

    Raises:
        DecodeError: If Pillow cannot identify or read the data
    """
    try:
        with Image.open(io.BytesIO(data)) as img:
            img.load()
            return raster_from_pil(img)
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        ValueError,
    ) as e:
        raise DecodeError(f"couldn't decode input image '{name}': {e}") from e


def load_image(path):
    """
    Read and decode an image file.

    Raises:
        FileNotFoundError: If the file does not exist
        DecodeError: If the file is not a readable image
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"couldn't open input file: {path}")
    return decode_image(path.read_bytes(), name=str(path))


def detect_encode_format(filename):
    """
    Map an output file name to a Pillow format name.

    Returns:
        str: 'PNG' or 'JPEG'

    Raises:
        UnsupportedFormat: If the name has no extension or an unknown one
    """
    ext = Path(str(filename)).suffix
    if not ext:
        raise UnsupportedFormat("no filename extension")
    fmt = cte.EXTENSION_FORMATS.get(ext.lower())
    if fmt is None:
        raise UnsupportedFormat(f"unknown or unsupported image extension '{ext}'")
    return fmt


def encode_image(image, fmt, quality: int = cte.DEFAULT_JPEG_QUALITY):
    """
    Encode a RasterImage.

    Args:
        image: RasterImage to encode
        fmt: 'PNG' or 'JPEG'
        quality: JPEG quality in [1, 100], ignored for PNG (default: 80)

    Returns:
        bytes: Encoded image

    Raises:
        UnsupportedFormat: If fmt is not PNG or JPEG
        ValueError: If the JPEG quality is out of range
        EncodeError: If Pillow fails to write the image
    """
    fmt = str(fmt).upper()
    if fmt not in set(cte.EXTENSION_FORMATS.values()):
        raise UnsupportedFormat(f"unsupported output format '{fmt}'")

    pil_image = raster_to_pil(image)
    options = {}
    if fmt == "JPEG":
        if not cte.MIN_JPEG_QUALITY <= quality <= cte.MAX_JPEG_QUALITY:
            raise ValueError(
                f"JPEG quality must be in [{cte.MIN_JPEG_QUALITY}, "
                f"{cte.MAX_JPEG_QUALITY}], got {quality}"
            )
        # JPEG has no alpha channel
        pil_image = pil_image.convert("RGB")
        options["quality"] = int(quality)

    buffer = io.BytesIO()
    try:
        pil_image.save(buffer, format=fmt, **options)
    except (OSError, ValueError, SystemError) as e:
        raise EncodeError(f"couldn't encode output image as {fmt}: {e}") from e
    return buffer.getvalue()


def save_image(image, path, quality: int = cte.DEFAULT_JPEG_QUALITY):
    """
    Encode a RasterImage in the format given by the extension of ``path`` and
    write it. Nothing is written if encoding fails.
    """
    fmt = detect_encode_format(path)
    data = encode_image(image, fmt, quality=quality)
    Path(path).write_bytes(data)
    return Path(path)


__all__ = [
    "raster_from_pil",
    "raster_to_pil",
    "decode_image",
    "load_image",
    "detect_encode_format",
    "encode_image",
    "save_image",
]
