"""
Raster container for PyFastResize.

A ``RasterImage`` is a row-major grid of interleaved RGBA pixels with 8 bits
per channel, backed by a ``(height, width, 4)`` uint8 NumPy array. Instances
are immutable: the backing array is a private copy flagged read-only, and
every operation of the engine allocates a fresh output raster.
"""

import numpy as np

from .. import constants as cte


class RasterImage:
    """Immutable RGBA8 raster.

    Args:
        pixels: Array-like of shape (height, width, 4) holding values in
            [0, 255]. The data is copied, so later changes to the argument
            never reach the raster.

    Raises:
        ValueError: If the array does not have the RGBA8 layout.
    """

    __slots__ = ("_pixels",)

    def __init__(self, pixels):
        arr = np.asarray(pixels)
        if arr.ndim != 3 or arr.shape[2] != cte.CHANNELS:
            raise ValueError(
                f"Raster pixels must have shape (height, width, {cte.CHANNELS}), "
                f"got {arr.shape}"
            )
        if arr.dtype != np.uint8:
            if arr.size and (arr.min() < 0 or arr.max() > cte.PIXEL_MAX):
                raise ValueError("Raster values must lie in [0, 255]")
            arr = arr.astype(np.uint8)
        data = np.array(arr, dtype=np.uint8, order="C", copy=True)
        data.flags.writeable = False
        self._pixels = data

    @classmethod
    def filled(cls, width: int, height: int, color=(0, 0, 0, 0)):
        """Create a raster where every pixel has the same RGBA color."""
        if width < 0 or height < 0:
            raise ValueError("Raster dimensions must be >= 0")
        data = np.empty((height, width, cte.CHANNELS), dtype=np.uint8)
        data[...] = np.asarray(color, dtype=np.uint8)
        return cls(data)

    @property
    def width(self) -> int:
        return self._pixels.shape[1]

    @property
    def height(self) -> int:
        return self._pixels.shape[0]

    @property
    def size(self):
        """(width, height) tuple, in the same order as Pillow."""
        return self.width, self.height

    @property
    def pixels(self):
        """Read-only view of the backing (height, width, 4) uint8 array."""
        return self._pixels

    def to_array(self):
        """Return a writable copy of the pixel data."""
        return self._pixels.copy()

    def pixel(self, x: int, y: int):
        """Return the (r, g, b, a) tuple at column x, row y."""
        return tuple(int(v) for v in self._pixels[y, x])

    def __eq__(self, other):
        if not isinstance(other, RasterImage):
            return NotImplemented
        return np.array_equal(self._pixels, other._pixels)

    __hash__ = None

    def __repr__(self):
        return f"RasterImage(width={self.width}, height={self.height})"


__all__ = ["RasterImage"]
