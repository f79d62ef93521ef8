"""
Global constants for PyFastResize.

Default values of the resize configuration surface and the fixed parameters
of the resampling kernels. Everything that the CLI, the workflow helpers and
the resampling engine need to agree on lives here.
"""

# Scaling defaults (0 means "unset" for the per-axis and explicit options)
DEFAULT_UNIFORM_SCALE = 1.0
DEFAULT_SCALE_X = 0.0
DEFAULT_SCALE_Y = 0.0
DEFAULT_OUTPUT_WIDTH = 0
DEFAULT_OUTPUT_HEIGHT = 0
DEFAULT_MAX_SIDE = 0

# Resampling
DEFAULT_KERNEL = "lanczos"
LANCZOS_LOBES = 3

# Encoding
DEFAULT_JPEG_QUALITY = 80
MIN_JPEG_QUALITY = 1
MAX_JPEG_QUALITY = 100

# Pixel layout: interleaved RGBA, 8 bits per channel
CHANNELS = 4
PIXEL_MAX = 255

# Output extensions (lower case) -> Pillow format name
EXTENSION_FORMATS = {
    ".png": "PNG",
    ".jpg": "JPEG",
    ".jpeg": "JPEG",
}
