"""General raster resizing for PyFastResize.

Separable two-pass resampling of RGBA8 rasters: a horizontal pass produces an
intermediate (out_w x in_h) buffer, a vertical pass turns it into the final
(out_w x out_h) raster. Both passes share the same per-axis weight tables.

Source coordinates are center aligned::

    src = (dst + 0.5) * in_size / out_size - 0.5

so a unity scale maps every output sample exactly onto its source sample.
On downscale the kernel is stretched by the scale ratio, which turns every
filter into an anti-aliasing filter (and the box filter into an area
average). Taps that fall outside the raster are dropped and the remaining
weights renormalised to sum to one, which clamps the image to its edges and
keeps uniform images uniform.

The passes can be fanned out over a thread pool: rows for the horizontal
pass, columns for the vertical pass. Every worker writes a disjoint slice of
a preallocated buffer and taps are accumulated in a fixed order, so the
result does not depend on the number of workers.
"""

import logging
import os
import time
from concurrent.futures import ThreadPoolExecutor

import numpy as np

from .. import constants as cte
from .kernels import KERNEL_TABLE, ResamplingKernel, get_kernel
from .raster import RasterImage

logger = logging.getLogger(__name__)


def compute_axis_weights(in_size: int, out_size: int, kernel):
    """
    Build the tap table for resampling one axis.

    Args:
        in_size: Number of source samples along the axis (> 0)
        out_size: Number of output samples along the axis (> 0)
        kernel: ResamplingKernel or kernel name

    Returns:
        tuple: (indices, weights), both of shape (out_size, taps).
               ``indices`` are always valid source positions; taps outside the
               source carry a zero weight. Each row of ``weights`` sums to 1.
    """
    if in_size < 1 or out_size < 1:
        raise ValueError(
            f"Axis sizes must be > 0, got in_size={in_size}, out_size={out_size}"
        )
    kernel = get_kernel(kernel)
    ratio = in_size / out_size
    dst = np.arange(out_size, dtype=np.float64)

    if kernel is ResamplingKernel.NEAREST:
        indices = np.floor((dst + 0.5) * ratio).astype(np.int64)
        indices = np.clip(indices, 0, in_size - 1)
        return indices[:, None], np.ones((out_size, 1), dtype=np.float64)

    spec = KERNEL_TABLE[kernel]
    scale = max(ratio, 1.0)
    radius = spec.support * scale

    centers = (dst + 0.5) * ratio - 0.5
    starts = np.ceil(centers - radius).astype(np.int64)
    stops = np.floor(centers + radius).astype(np.int64)
    taps = int((stops - starts).max()) + 1

    positions = starts[:, None] + np.arange(taps, dtype=np.int64)[None, :]
    valid = (positions >= 0) & (positions < in_size) & (positions <= stops[:, None])

    weights = spec.weight((positions - centers[:, None]) / scale)
    weights = np.where(valid, weights, 0.0)
    weights /= weights.sum(axis=1, keepdims=True)

    indices = np.clip(positions, 0, in_size - 1)
    return indices, weights


def _split_ranges(n, workers):
    chunk = (n + workers - 1) // workers
    return [(lo, min(lo + chunk, n)) for lo in range(0, n, chunk)]


def _horizontal_rows(src, dst, indices, weights, lo, hi):
    """Resample rows [lo, hi) of ``src`` along x into ``dst``."""
    block = src[lo:hi]
    acc = np.zeros((hi - lo,) + dst.shape[1:], dtype=np.float64)
    for k in range(indices.shape[1]):
        acc += weights[None, :, k, None] * block[:, indices[:, k], :]
    dst[lo:hi] = acc


def _vertical_columns(src, dst, indices, weights, lo, hi):
    """Resample columns [lo, hi) of ``src`` along y into ``dst``."""
    block = src[:, lo:hi]
    acc = np.zeros((dst.shape[0], hi - lo, dst.shape[2]), dtype=np.float64)
    for k in range(indices.shape[1]):
        acc += weights[:, k, None, None] * block[indices[:, k]]
    dst[:, lo:hi] = acc


def _run_pass(worker, n, workers, *args):
    """Run ``worker`` over [0, n) split into disjoint ranges; returns at the barrier."""
    if workers <= 1 or n <= 1:
        worker(*args, 0, n)
        return
    ranges = _split_ranges(n, min(workers, n))
    with ThreadPoolExecutor(max_workers=len(ranges)) as pool:
        futures = [pool.submit(worker, *args, lo, hi) for lo, hi in ranges]
        for f in futures:
            f.result()


def horizontal_pass(pixels, out_w: int, kernel, workers: int = 1):
    """
    Resample a (height, width, channels) array along x.

    Returns:
        numpy.ndarray: float64 array of shape (height, out_w, channels)
    """
    in_h, in_w, channels = pixels.shape
    indices, weights = compute_axis_weights(in_w, out_w, kernel)
    out = np.empty((in_h, out_w, channels), dtype=np.float64)
    _run_pass(_horizontal_rows, in_h, workers, pixels, out, indices, weights)
    return out


def vertical_pass(pixels, out_h: int, kernel, workers: int = 1):
    """
    Resample a (height, width, channels) array along y.

    Returns:
        numpy.ndarray: float64 array of shape (out_h, width, channels)
    """
    in_h, in_w, channels = pixels.shape
    indices, weights = compute_axis_weights(in_h, out_h, kernel)
    out = np.empty((out_h, in_w, channels), dtype=np.float64)
    _run_pass(_vertical_columns, in_w, workers, pixels, out, indices, weights)
    return out


def to_uint8(values):
    """Round half up and clamp float samples to the 8-bit range."""
    return np.clip(np.floor(values + 0.5), 0, cte.PIXEL_MAX).astype(np.uint8)


def _check_request(image, out_w, out_h):
    if not isinstance(image, RasterImage):
        raise TypeError("image must be a RasterImage")
    if image.width < 1 or image.height < 1:
        raise ValueError(f"Cannot resample an empty raster ({image.width}x{image.height})")
    if int(out_w) != out_w or int(out_h) != out_h or out_w < 1 or out_h < 1:
        raise ValueError(f"Output size must be positive integers, got {out_w}x{out_h}")


def resize(
    image,
    out_w: int,
    out_h: int,
    kernel=cte.DEFAULT_KERNEL,
    workers: int | None = 1,
):
    """
    Resize a raster with a separable resampling filter.

    Args:
        image: Input RasterImage (left untouched)
        out_w: Output width in pixels (> 0)
        out_h: Output height in pixels (> 0)
        kernel: ResamplingKernel or name ('nearest', 'linear', 'cubic', 'box',
                'lanczos') (default: 'lanczos')
        workers: Number of threads used by each pass. None uses os.cpu_count().
                 The output is byte-identical for any value.

    Returns:
        RasterImage: Newly allocated raster of size (out_w, out_h)

    Raises:
        UnknownKernel: If the kernel name is not supported
        ValueError: If the output size is not positive or the input is empty

    Example:
        small = resize(image, image.width // 2, image.height // 2, kernel="box")

        # Same result, computed on 8 threads
        small = resize(image, image.width // 2, image.height // 2, kernel="box", workers=8)
    """
    kernel = get_kernel(kernel)
    _check_request(image, out_w, out_h)
    if workers is None:
        workers = os.cpu_count() or 1
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")

    start = time.perf_counter()
    intermediate = horizontal_pass(image.pixels, int(out_w), kernel, workers)
    result = vertical_pass(intermediate, int(out_h), kernel, workers)
    logger.debug(
        "resized %dx%d -> %dx%d with %s on %d worker(s) in %.3fs",
        image.width,
        image.height,
        out_w,
        out_h,
        kernel.value,
        workers,
        time.perf_counter() - start,
    )
    return RasterImage(to_uint8(result))


__all__ = [
    "compute_axis_weights",
    "horizontal_pass",
    "vertical_pass",
    "to_uint8",
    "resize",
]
