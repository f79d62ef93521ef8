"""Raster manipulation module for PyFastResize.

Provides the dimension resolver (scaling policies -> output size) and the
separable resampling engine for RGBA8 rasters. The engine runs on NumPy with
an optional thread fan-out; ``resize_taichi`` offers the same passes as Taichi
kernels and is only imported when accessed, since Taichi is an optional
dependency.
"""

from .raster import RasterImage
from .dimensions import (
    Uniform,
    NonUniform,
    MaxSide,
    ExplicitDims,
    ScalingPolicy,
    ScaleSettings,
    check_conflicts,
    resolve_dimensions,
)
from .kernels import ResamplingKernel, KERNEL_TABLE, get_kernel, kernel_names
from .resizing import compute_axis_weights, horizontal_pass, vertical_pass, resize

_LAZY_ATTRS = {
    "resize_taichi": (".taichi_backend", "resize_taichi"),
}

__all__ = [
    "RasterImage",
    "Uniform",
    "NonUniform",
    "MaxSide",
    "ExplicitDims",
    "ScalingPolicy",
    "ScaleSettings",
    "check_conflicts",
    "resolve_dimensions",
    "ResamplingKernel",
    "KERNEL_TABLE",
    "get_kernel",
    "kernel_names",
    "compute_axis_weights",
    "horizontal_pass",
    "vertical_pass",
    "resize",
]


def __getattr__(name):
    info = _LAZY_ATTRS.get(name)
    if info is None:
        raise AttributeError(name)
    pkg, attr = info
    import importlib
    mod = importlib.import_module(pkg, __package__)
    obj = getattr(mod, attr)
    globals()[name] = obj
    return obj
