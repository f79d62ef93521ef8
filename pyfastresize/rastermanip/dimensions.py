"""
Output dimension resolution for PyFastResize.

Turns an input raster size and a set of scaling policies into integer output
dimensions. The policies form a closed set of variants:

- ``Uniform(factor)``: both axes scaled by the same factor (default 1.0)
- ``NonUniform(fx, fy)``: per-axis factors, 0 leaves an axis on the uniform factor
- ``MaxSide(target)``: the larger input side is scaled to ``target``
- ``ExplicitDims(width, height)``: explicit pixel counts, 0 leaves an axis on
  the uniform factor

``NonUniform``, ``MaxSide`` and ``ExplicitDims`` are mutually exclusive. The
conflict is reported as ``ConflictingScaleModes`` before any arithmetic takes
place rather than being resolved by precedence.

Output sizes are truncated toward zero (``int(in_size * factor)``), so a 0.5
scale on an odd dimension drops the trailing row or column.
"""

import logging
import math
import numbers
from dataclasses import dataclass

from .. import constants as cte
from ..errors import ConflictingScaleModes, DegenerateOutputSize, OversizedOutput

logger = logging.getLogger(__name__)


def _check_factor(name, value, allow_zero):
    if not isinstance(value, numbers.Real) or isinstance(value, bool):
        raise ValueError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value}")
    if value < 0 or (value == 0 and not allow_zero):
        bound = ">= 0" if allow_zero else "> 0"
        raise ValueError(f"{name} must be {bound}, got {value}")


def _check_pixels(name, value, allow_zero):
    if not isinstance(value, numbers.Integral) or isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < 0 or (value == 0 and not allow_zero):
        bound = ">= 0" if allow_zero else "> 0"
        raise ValueError(f"{name} must be {bound}, got {value}")


def _scaled(axis, in_size, factor):
    scaled = in_size * factor
    if not math.isfinite(scaled):
        raise OversizedOutput(axis, in_size, factor)
    return int(scaled)


@dataclass(frozen=True)
class Uniform:
    """Scale both axes by the same positive factor."""

    factor: float = cte.DEFAULT_UNIFORM_SCALE

    def __post_init__(self):
        _check_factor("factor", self.factor, allow_zero=False)


@dataclass(frozen=True)
class NonUniform:
    """Independent per-axis factors; 0 means unset for that axis."""

    fx: float = cte.DEFAULT_SCALE_X
    fy: float = cte.DEFAULT_SCALE_Y

    def __post_init__(self):
        _check_factor("fx", self.fx, allow_zero=True)
        _check_factor("fy", self.fy, allow_zero=True)
        if self.fx == 0 and self.fy == 0:
            raise ValueError("NonUniform needs at least one of fx, fy set")


@dataclass(frozen=True)
class MaxSide:
    """Scale uniformly so that max(width, height) becomes ``target``."""

    target: int

    def __post_init__(self):
        _check_pixels("target", self.target, allow_zero=False)


@dataclass(frozen=True)
class ExplicitDims:
    """Explicit output width and/or height in pixels; 0 means unset."""

    width: int = cte.DEFAULT_OUTPUT_WIDTH
    height: int = cte.DEFAULT_OUTPUT_HEIGHT

    def __post_init__(self):
        _check_pixels("width", self.width, allow_zero=True)
        _check_pixels("height", self.height, allow_zero=True)
        if self.width == 0 and self.height == 0:
            raise ValueError("ExplicitDims needs at least one of width, height set")


ScalingPolicy = (Uniform, NonUniform, MaxSide, ExplicitDims)

# Mutually exclusive groups, in reporting order
_EXCLUSIVE_MODES = {
    NonUniform: "per-axis scale",
    MaxSide: "max-side",
    ExplicitDims: "explicit dimensions",
}

_MODE_NAMES = {Uniform: "uniform scale", **_EXCLUSIVE_MODES}


def _index_policies(policies):
    """Map policy type -> policy, rejecting duplicates and exclusive conflicts."""
    by_type = {}
    for policy in policies:
        kind = type(policy)
        if kind not in _MODE_NAMES:
            raise TypeError(f"Unsupported scaling policy: {policy!r}")
        if kind in by_type:
            name = _MODE_NAMES[kind]
            raise ConflictingScaleModes((name, name))
        by_type[kind] = policy

    active = [name for kind, name in _EXCLUSIVE_MODES.items() if kind in by_type]
    if len(active) > 1:
        raise ConflictingScaleModes(active)
    return by_type


def check_conflicts(*policies):
    """Raise ``ConflictingScaleModes`` if the policies cannot be combined."""
    _index_policies(policies)


def resolve_dimensions(in_w: int, in_h: int, *policies):
    """
    Compute the output size of a resize.

    Args:
        in_w: Input width in pixels (> 0)
        in_h: Input height in pixels (> 0)
        *policies: Zero or more of Uniform, NonUniform, MaxSide, ExplicitDims.
                   No policy at all behaves like Uniform(1.0).

    Returns:
        tuple: (out_w, out_h)

    Raises:
        ConflictingScaleModes: If more than one of NonUniform, MaxSide and
            ExplicitDims is given, or a policy type is repeated.
        DegenerateOutputSize: If either resolved size is below one pixel.
        OversizedOutput: If a factor overflows an axis to infinity.
        ValueError: If the input size is not a pair of positive integers.

    Example:
        resolve_dimensions(200, 50, ExplicitDims(width=100))            # (100, 50)
        resolve_dimensions(200, 50, Uniform(0.5), ExplicitDims(width=100))  # (100, 25)
    """
    _check_pixels("in_w", in_w, allow_zero=False)
    _check_pixels("in_h", in_h, allow_zero=False)

    by_type = _index_policies(policies)

    sx = sy = cte.DEFAULT_UNIFORM_SCALE
    uniform = by_type.get(Uniform)
    if uniform is not None:
        sx = sy = uniform.factor

    non_uniform = by_type.get(NonUniform)
    if non_uniform is not None:
        if non_uniform.fx:
            sx = non_uniform.fx
        if non_uniform.fy:
            sy = non_uniform.fy

    # Explicit sizes are taken as given rather than recomputed as
    # int(in * (size / in)), which can come out one pixel short
    explicit = by_type.get(ExplicitDims)
    explicit_w = explicit.width if explicit else 0
    explicit_h = explicit.height if explicit else 0

    max_side = by_type.get(MaxSide)
    if max_side is not None:
        sx = sy = max_side.target / max(in_w, in_h)
        # The larger side lands on the target exactly
        out_w = max_side.target if in_w >= in_h else int(in_w * sx)
        out_h = max_side.target if in_h >= in_w else int(in_h * sy)
    else:
        out_w = explicit_w or _scaled("width", in_w, sx)
        out_h = explicit_h or _scaled("height", in_h, sy)

    if out_w < 1 or out_h < 1:
        raise DegenerateOutputSize(out_w, out_h, in_w, in_h)

    logger.debug("resolved %dx%d -> %dx%d", in_w, in_h, out_w, out_h)
    return out_w, out_h


@dataclass(frozen=True)
class ScaleSettings:
    """
    Flat scaling options as exposed on the command line.

    Zero leaves an option unset, except ``uniform_scale`` which is always
    active and defaults to 1.0.
    """

    uniform_scale: float = cte.DEFAULT_UNIFORM_SCALE
    scale_x: float = cte.DEFAULT_SCALE_X
    scale_y: float = cte.DEFAULT_SCALE_Y
    output_width: int = cte.DEFAULT_OUTPUT_WIDTH
    output_height: int = cte.DEFAULT_OUTPUT_HEIGHT
    max_side: int = cte.DEFAULT_MAX_SIDE

    def __post_init__(self):
        _check_factor("uniform_scale", self.uniform_scale, allow_zero=False)
        _check_factor("scale_x", self.scale_x, allow_zero=True)
        _check_factor("scale_y", self.scale_y, allow_zero=True)
        _check_pixels("output_width", self.output_width, allow_zero=True)
        _check_pixels("output_height", self.output_height, allow_zero=True)
        _check_pixels("max_side", self.max_side, allow_zero=True)

    def policies(self):
        """Return the active scaling policies."""
        active = [Uniform(self.uniform_scale)]
        if self.scale_x or self.scale_y:
            active.append(NonUniform(self.scale_x, self.scale_y))
        if self.max_side:
            active.append(MaxSide(self.max_side))
        if self.output_width or self.output_height:
            active.append(ExplicitDims(self.output_width, self.output_height))
        return active

    def active_modes(self):
        """Names of the exclusive scaling modes switched on by these settings."""
        return [
            _EXCLUSIVE_MODES[type(policy)]
            for policy in self.policies()
            if type(policy) in _EXCLUSIVE_MODES
        ]

    def check_conflicts(self):
        check_conflicts(*self.policies())

    def resolve(self, in_w: int, in_h: int):
        return resolve_dimensions(in_w, in_h, *self.policies())


__all__ = [
    "Uniform",
    "NonUniform",
    "MaxSide",
    "ExplicitDims",
    "ScalingPolicy",
    "ScaleSettings",
    "check_conflicts",
    "resolve_dimensions",
]
