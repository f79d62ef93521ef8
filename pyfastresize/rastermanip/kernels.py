"""
Resampling kernels for PyFastResize.

Each kernel is a 1-D weighting function with a support radius, applied
identically along both axes of the separable resize. The set is closed and
looked up through a small table rather than dispatched dynamically:

- nearest: picks the single closest source sample (support 0)
- linear: triangle filter (support 1)
- cubic: Catmull-Rom cubic convolution (support 2)
- box: area average (support 0.5, widened with the scale ratio on downscale)
- lanczos: 3-lobe windowed sinc (support 3)

All weight functions take and return NumPy arrays of distances measured in
source pixels.
"""

from collections import namedtuple
from enum import Enum

import numpy as np

from .. import constants as cte
from ..errors import UnknownKernel


class ResamplingKernel(Enum):
    NEAREST = "nearest"
    LINEAR = "linear"
    CUBIC = "cubic"
    BOX = "box"
    LANCZOS = "lanczos"


KernelSpec = namedtuple("KernelSpec", ["support", "weight"])


def _linear_weight(x):
    return np.maximum(0.0, 1.0 - np.abs(x))


def _box_weight(x):
    return (np.abs(x) <= 0.5).astype(np.float64)


def _cubic_weight(x):
    # Catmull-Rom: Keys cubic convolution with a = -0.5
    ax = np.abs(x)
    ax2 = ax * ax
    ax3 = ax2 * ax
    near = 1.5 * ax3 - 2.5 * ax2 + 1.0
    far = -0.5 * ax3 + 2.5 * ax2 - 4.0 * ax + 2.0
    return np.where(ax < 1.0, near, np.where(ax < 2.0, far, 0.0))


def _lanczos_weight(x, lobes=cte.LANCZOS_LOBES):
    x = np.asarray(x, dtype=np.float64)
    w = np.sinc(x) * np.sinc(x / lobes)
    # np.sinc leaves ~1e-17 residue at non-zero integers
    w = np.where((x != 0) & (x == np.rint(x)), 0.0, w)
    return np.where(np.abs(x) < lobes, w, 0.0)


KERNEL_TABLE = {
    ResamplingKernel.NEAREST: KernelSpec(0.0, None),
    ResamplingKernel.LINEAR: KernelSpec(1.0, _linear_weight),
    ResamplingKernel.CUBIC: KernelSpec(2.0, _cubic_weight),
    ResamplingKernel.BOX: KernelSpec(0.5, _box_weight),
    ResamplingKernel.LANCZOS: KernelSpec(float(cte.LANCZOS_LOBES), _lanczos_weight),
}


def kernel_names():
    """Sorted list of the supported kernel names."""
    return sorted(k.value for k in ResamplingKernel)


def get_kernel(kernel):
    """
    Resolve a kernel selector.

    Args:
        kernel: ResamplingKernel member or its (case-insensitive) name

    Returns:
        ResamplingKernel

    Raises:
        UnknownKernel: If the name is not one of ``kernel_names()``
    """
    if isinstance(kernel, ResamplingKernel):
        return kernel
    by_name = {k.value: k for k in ResamplingKernel}
    key = kernel.strip().lower() if isinstance(kernel, str) else kernel
    if key not in by_name:
        raise UnknownKernel(kernel, kernel_names())
    return by_name[key]


__all__ = [
    "ResamplingKernel",
    "KernelSpec",
    "KERNEL_TABLE",
    "kernel_names",
    "get_kernel",
]
