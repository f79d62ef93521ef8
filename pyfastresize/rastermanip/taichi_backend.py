"""Taichi implementation of the two resampling passes.

Runs the horizontal and vertical passes as Taichi kernels on the CPU backend,
one parallel thread per output sample. The tap tables come from
``compute_axis_weights`` so both backends share coordinate mapping, kernel
support and edge renormalisation; the final rounding is done in NumPy.

Requires the optional ``taichi`` dependency (``pip install pyfastresize[taichi]``).
Because LLVM may fuse multiply-adds, results can differ from the NumPy backend
by at most one level per channel.
"""

import numpy as np
import taichi as ti

from .. import constants as cte
from .kernels import get_kernel
from .raster import RasterImage
from .resizing import _check_request, compute_axis_weights, to_uint8

_TI_READY = False


def init_taichi():
    """Initialise Taichi on the CPU backend once per process."""
    global _TI_READY
    if not _TI_READY:
        ti.init(arch=ti.cpu, default_fp=ti.f64, offline_cache=False)
        _TI_READY = True


@ti.kernel
def horizontal_pass_kernel(
    src: ti.types.ndarray(dtype=ti.f64, ndim=3),
    dst: ti.types.ndarray(dtype=ti.f64, ndim=3),
    indices: ti.types.ndarray(dtype=ti.i32, ndim=2),
    weights: ti.types.ndarray(dtype=ti.f64, ndim=2),
):
    """
    Resample along x: dst[j, i, c] = sum_k weights[i, k] * src[j, indices[i, k], c]

    Args:
        src: Source samples (ny, nx_src, channels)
        dst: Output samples (ny, nx_dst, channels)
        indices: Tap positions (nx_dst, taps)
        weights: Tap weights (nx_dst, taps)
    """
    for j, i, c in ti.ndrange(dst.shape[0], dst.shape[1], dst.shape[2]):
        acc = 0.0
        for k in range(indices.shape[1]):
            acc += weights[i, k] * src[j, indices[i, k], c]
        dst[j, i, c] = acc


@ti.kernel
def vertical_pass_kernel(
    src: ti.types.ndarray(dtype=ti.f64, ndim=3),
    dst: ti.types.ndarray(dtype=ti.f64, ndim=3),
    indices: ti.types.ndarray(dtype=ti.i32, ndim=2),
    weights: ti.types.ndarray(dtype=ti.f64, ndim=2),
):
    """Resample along y: dst[j, i, c] = sum_k weights[j, k] * src[indices[j, k], i, c]"""
    for j, i, c in ti.ndrange(dst.shape[0], dst.shape[1], dst.shape[2]):
        acc = 0.0
        for k in range(indices.shape[1]):
            acc += weights[j, k] * src[indices[j, k], i, c]
        dst[j, i, c] = acc


def _tables(in_size, out_size, kernel):
    indices, weights = compute_axis_weights(in_size, out_size, kernel)
    return (
        np.ascontiguousarray(indices, dtype=np.int32),
        np.ascontiguousarray(weights, dtype=np.float64),
    )


def resize_taichi(image, out_w: int, out_h: int, kernel=cte.DEFAULT_KERNEL):
    """
    Resize a raster using the Taichi kernels.

    Same contract as ``pyfastresize.rastermanip.resize``; the passes are
    parallelised by Taichi instead of a thread pool.

    Args:
        image: Input RasterImage
        out_w: Output width (> 0)
        out_h: Output height (> 0)
        kernel: ResamplingKernel or kernel name (default: 'lanczos')

    Returns:
        RasterImage: Newly allocated resized raster
    """
    kernel = get_kernel(kernel)
    _check_request(image, out_w, out_h)
    out_w, out_h = int(out_w), int(out_h)
    init_taichi()

    in_h, in_w, channels = image.pixels.shape
    src = np.ascontiguousarray(image.pixels, dtype=np.float64)

    # Allocate both buffers before launching either pass
    intermediate = np.zeros((in_h, out_w, channels), dtype=np.float64)
    result = np.zeros((out_h, out_w, channels), dtype=np.float64)

    x_indices, x_weights = _tables(in_w, out_w, kernel)
    horizontal_pass_kernel(src, intermediate, x_indices, x_weights)

    y_indices, y_weights = _tables(in_h, out_h, kernel)
    vertical_pass_kernel(intermediate, result, y_indices, y_weights)

    return RasterImage(to_uint8(result))


__all__ = [
    "init_taichi",
    "horizontal_pass_kernel",
    "vertical_pass_kernel",
    "resize_taichi",
]
