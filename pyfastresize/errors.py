"""
Exceptions raised by PyFastResize.

Every failure is fail-fast: the library raises, and only the command line
layer turns an exception into a message and an exit status. Configuration
errors also derive from ``ValueError`` and the overwrite guard from
``FileExistsError`` so callers can catch them with the builtin types.
"""


class ResizeError(Exception):
    """Base class for all PyFastResize errors"""


class ConfigError(ResizeError, ValueError):
    """Invalid or inconsistent resize configuration"""


class ConflictingScaleModes(ConfigError):
    """More than one exclusive scaling mode was requested."""

    def __init__(self, modes):
        self.modes = tuple(modes)
        super().__init__(
            "conflicting rescale options: " + ", ".join(self.modes)
        )


class DegenerateOutputSize(ConfigError):
    """The resolved output width or height is smaller than one pixel."""

    def __init__(self, width, height, in_width, in_height):
        self.width = width
        self.height = height
        self.in_width = in_width
        self.in_height = in_height
        axes = []
        if width < 1:
            axes.append("width")
        if height < 1:
            axes.append("height")
        super().__init__(
            f"degenerate output {' and '.join(axes)}: {in_width}x{in_height} "
            f"resolves to {width}x{height}"
        )


class OversizedOutput(ConfigError):
    """A scale factor pushes an output axis past any representable size."""

    def __init__(self, axis, in_size, factor):
        self.axis = axis
        self.in_size = in_size
        self.factor = factor
        super().__init__(
            f"output {axis} too large: {in_size} scaled by {factor} is not finite"
        )


class UnknownKernel(ConfigError):
    """The requested resampling function is not supported."""

    def __init__(self, name, available):
        self.name = name
        self.available = tuple(available)
        super().__init__(
            f"unknown resampling function '{name}', "
            f"expected one of [{', '.join(self.available)}]"
        )


class OutputAlreadyExists(ResizeError, FileExistsError):
    """Destination exists and overwriting was not requested."""

    def __init__(self, path):
        self.path = str(path)
        super().__init__(f"output file already exists: {self.path}")


class CodecError(ResizeError):
    """Base class for image decode/encode failures"""


class DecodeError(CodecError):
    """Input bytes could not be decoded into a raster"""


class EncodeError(CodecError):
    """Raster could not be encoded to the output format"""


class UnsupportedFormat(CodecError):
    """Output format could not be derived from the file name"""


__all__ = [
    "ResizeError",
    "ConfigError",
    "ConflictingScaleModes",
    "DegenerateOutputSize",
    "OversizedOutput",
    "UnknownKernel",
    "OutputAlreadyExists",
    "CodecError",
    "DecodeError",
    "EncodeError",
    "UnsupportedFormat",
]
