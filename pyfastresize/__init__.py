"""
PyFastResize: separable raster resampling for RGBA images.

Subpackages:
- rastermanip: scaling policies, output dimension resolution, resampling kernels
  and the two-pass resize engine (NumPy, optional Taichi backend)
- io: Pillow-backed image decoding/encoding
- misc: file-to-file workflow helpers
- cli: command line entry points

Example:
    import pyfastresize as pr

    image = pr.io.load_image("photo.png")
    size = pr.rastermanip.resolve_dimensions(
        image.width, image.height, pr.rastermanip.MaxSide(256)
    )
    thumb = pr.rastermanip.resize(image, *size, kernel="lanczos")
    pr.io.save_image(thumb, "thumb.jpg", quality=90)
"""

__version__ = "0.1.0"

from . import constants
from . import errors
from . import rastermanip
from . import io
from . import misc
from .config import ResizeConfig

__all__ = [
    "constants",
    "errors",
    "rastermanip",
    "io",
    "misc",
    "cli",
    "ResizeConfig",
]
