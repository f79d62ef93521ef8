"""
Miscellaneous Utilities for PyFastResize

Workflow helpers that chain decoding, dimension resolution, resampling and
encoding into single calls.

Available Functions:
- resize_image_file: Resize an image file into a PNG or JPEG file
"""

from .resize_utils import ResizeResult, resize_image_file

# Export public API
__all__ = [
    "ResizeResult",
    "resize_image_file",
]
