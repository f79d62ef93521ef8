"""
Image Resize CLI Commands for PyFastResize

Command line interface for resizing PNG/JPEG/GIF images into PNG or JPEG
files with one of the supported scaling modes and resampling functions.
"""

import logging
import sys

import click

from .. import constants as cte
from ..config import ResizeConfig
from ..errors import ResizeError
from ..misc.resize_utils import resize_image_file
from ..rastermanip.kernels import kernel_names


@click.command()
@click.option("-i", "--input", "input_path", type=click.Path(dir_okay=False), help="Input file")
@click.option("-o", "--output", "output_path", type=click.Path(dir_okay=False), help="Output file")
@click.option(
    "-s",
    "--scale",
    default=cte.DEFAULT_UNIFORM_SCALE,
    show_default=True,
    type=click.FloatRange(min=0, min_open=True),
    help="Uniform scale",
)
@click.option(
    "--sx",
    "scale_x",
    default=cte.DEFAULT_SCALE_X,
    type=click.FloatRange(min=0),
    help="Horizontal scale, overrides -s",
)
@click.option(
    "--sy",
    "scale_y",
    default=cte.DEFAULT_SCALE_Y,
    type=click.FloatRange(min=0),
    help="Vertical scale, overrides -s",
)
@click.option(
    "--ow",
    "output_width",
    default=cte.DEFAULT_OUTPUT_WIDTH,
    type=click.IntRange(min=0),
    help="Override output width, overrides -s",
)
@click.option(
    "--oh",
    "output_height",
    default=cte.DEFAULT_OUTPUT_HEIGHT,
    type=click.IntRange(min=0),
    help="Override output height, overrides -s",
)
@click.option(
    "--maxside",
    "max_side",
    default=cte.DEFAULT_MAX_SIDE,
    type=click.IntRange(min=0),
    help="Autocalculate uniform scale factor so that the largest dimension "
    "matches this value, 0 to disable, overrides -s",
)
@click.option("-f", "--force", is_flag=True, help="Overwrite if output file exists")
@click.option(
    "-q",
    "--quality",
    default=cte.DEFAULT_JPEG_QUALITY,
    show_default=True,
    type=click.IntRange(cte.MIN_JPEG_QUALITY, cte.MAX_JPEG_QUALITY),
    help="Output JPEG quality",
)
@click.option(
    "-r",
    "--resampling",
    default=cte.DEFAULT_KERNEL,
    show_default=True,
    help=f"Resampling function, one of [{', '.join(kernel_names())}]",
)
@click.option(
    "-w",
    "--workers",
    default=1,
    show_default=True,
    type=click.IntRange(min=1),
    help="Worker threads per resampling pass",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def image_resize(
    input_path,
    output_path,
    scale,
    scale_x,
    scale_y,
    output_width,
    output_height,
    max_side,
    force,
    quality,
    resampling,
    workers,
    verbose,
):
    """
    Resize an image file.

    Reads any image Pillow can decode and writes a PNG or JPEG file, chosen
    from the output extension. At most one of --sx/--sy, --maxside and
    --ow/--oh may be given.

    Examples:

        # Halve an image with the default Lanczos filter
        pfr-resize -i photo.jpg -o half.png -s 0.5

        # Fit the longest side into 512 pixels using 4 threads
        pfr-resize -i photo.jpg -o thumb.jpg --maxside 512 -q 90 -w 4

        # Fixed width, nearest neighbour, overwrite existing output
        pfr-resize -i sprite.png -o big.png --ow 256 -r nearest -f
    """
    if not input_path:
        click.echo("Error: missing input filename", err=True)
        sys.exit(1)

    if not output_path:
        click.echo("Error: missing output filename", err=True)
        sys.exit(1)

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        config = ResizeConfig.from_options(
            uniform_scale=scale,
            scale_x=scale_x,
            scale_y=scale_y,
            output_width=output_width,
            output_height=output_height,
            max_side=max_side,
            kernel=resampling,
            overwrite_existing=force,
            jpeg_quality=quality,
            workers=workers,
        )

        if verbose:
            click.echo(
                f"Resizing '{input_path}' -> '{output_path}' using '{resampling}'..."
            )

        result = resize_image_file(input_path, output_path, config)

        out_w, out_h = result.output_size
        click.echo(f"output image dimensions: {out_w}x{out_h}")

        if verbose:
            in_w, in_h = result.input_size
            click.echo(f"Resize completed! {in_w}x{in_h} -> {out_w}x{out_h}")

    except (ResizeError, OSError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    image_resize()
