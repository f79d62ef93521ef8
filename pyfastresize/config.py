"""
Resize configuration for PyFastResize.

``ResizeConfig`` gathers every option of a file-to-file resize: the scaling
options, the resampling kernel, the overwrite guard, the JPEG quality and the
number of worker threads. Values are validated on construction; the kernel
name is resolved lazily so an unknown name surfaces as ``UnknownKernel`` at
the start of the workflow.
"""

from dataclasses import dataclass, field

from . import constants as cte
from .rastermanip.dimensions import ScaleSettings


@dataclass(frozen=True)
class ResizeConfig:
    scale: ScaleSettings = field(default_factory=ScaleSettings)
    kernel: str = cte.DEFAULT_KERNEL
    overwrite_existing: bool = False
    jpeg_quality: int = cte.DEFAULT_JPEG_QUALITY
    workers: int = 1

    def __post_init__(self):
        if not cte.MIN_JPEG_QUALITY <= self.jpeg_quality <= cte.MAX_JPEG_QUALITY:
            raise ValueError(
                f"jpeg_quality must be in [{cte.MIN_JPEG_QUALITY}, "
                f"{cte.MAX_JPEG_QUALITY}], got {self.jpeg_quality}"
            )
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")

    @classmethod
    def from_options(
        cls,
        uniform_scale=cte.DEFAULT_UNIFORM_SCALE,
        scale_x=cte.DEFAULT_SCALE_X,
        scale_y=cte.DEFAULT_SCALE_Y,
        output_width=cte.DEFAULT_OUTPUT_WIDTH,
        output_height=cte.DEFAULT_OUTPUT_HEIGHT,
        max_side=cte.DEFAULT_MAX_SIDE,
        **kwargs,
    ):
        """Build a config from the flat option names used on the command line."""
        scale = ScaleSettings(
            uniform_scale=uniform_scale,
            scale_x=scale_x,
            scale_y=scale_y,
            output_width=output_width,
            output_height=output_height,
            max_side=max_side,
        )
        return cls(scale=scale, **kwargs)


__all__ = ["ResizeConfig"]
