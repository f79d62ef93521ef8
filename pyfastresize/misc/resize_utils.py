"""
File-to-file resize workflow for PyFastResize.

Chains the pieces of the package the way the command line tool does:
validate the configuration, guard the destination, decode, resolve the
output size, resample and encode. All checks that do not need the image run
before the input file is read, and the output file is only written once the
encoded bytes are complete.
"""

import logging
from collections import namedtuple
from pathlib import Path

from ..config import ResizeConfig
from ..errors import OutputAlreadyExists
from ..io.codecs import detect_encode_format, encode_image, load_image
from ..rastermanip.kernels import get_kernel
from ..rastermanip.resizing import resize

logger = logging.getLogger(__name__)

ResizeResult = namedtuple(
    "ResizeResult", ["input_size", "output_size", "kernel", "output_path"]
)


def resize_image_file(input_path, output_path, config=None):
    """
    Resize an image file and write the result.

    Args:
        input_path (str | Path): Image to read (any format Pillow decodes)
        output_path (str | Path): Destination, .png, .jpg or .jpeg
        config (ResizeConfig): Resize options (default: ResizeConfig())

    Returns:
        ResizeResult: input and output (width, height), kernel name and the
        written path

    Raises:
        UnknownKernel: Unsupported resampling function
        UnsupportedFormat: Output extension missing or not supported
        ConflictingScaleModes: More than one exclusive scaling mode requested
        FileNotFoundError: Input file does not exist
        OutputAlreadyExists: Output exists and overwrite_existing is False
        DecodeError: Input is not a readable image
        DegenerateOutputSize: Resolved size below one pixel
        EncodeError: Output could not be encoded

    Example:
        from pyfastresize.config import ResizeConfig

        config = ResizeConfig.from_options(max_side=512, kernel="cubic")
        result = resize_image_file("photo.jpg", "thumb.png", config)
        print(result.output_size)
    """
    if config is None:
        config = ResizeConfig()
    input_path = Path(input_path)
    output_path = Path(output_path)

    kernel = get_kernel(config.kernel)
    fmt = detect_encode_format(output_path)
    config.scale.check_conflicts()

    if not input_path.is_file():
        raise FileNotFoundError(f"couldn't open input file: {input_path}")
    if output_path.exists() and not config.overwrite_existing:
        raise OutputAlreadyExists(output_path)

    image = load_image(input_path)
    out_w, out_h = config.scale.resolve(image.width, image.height)
    logger.debug("output image dimensions: %dx%d", out_w, out_h)

    resized = resize(image, out_w, out_h, kernel=kernel, workers=config.workers)
    data = encode_image(resized, fmt, quality=config.jpeg_quality)
    output_path.write_bytes(data)

    return ResizeResult(image.size, resized.size, kernel.value, output_path)


__all__ = ["ResizeResult", "resize_image_file"]
