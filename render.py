import os
import sys
from argparse import ArgumentParser, ArgumentTypeError
from dataclasses import dataclass
from pathlib import Path

_VERBOSE_FLAGS = {"--verbose", "-v"}
_cli_verbose = any(arg in _VERBOSE_FLAGS for arg in sys.argv[1:])

if not _cli_verbose and os.environ.get("TF_CPP_MIN_LOG_LEVEL") is None:
    os.environ["TF_CPP_MIN_LOG_LEVEL"] = "3"

VERBOSE = _cli_verbose


def log(message, *args, **kwargs):
    if VERBOSE:
        print(message, *args, **kwargs)


from mandelbrot_raster import (
    RenderParameters,
    parse_bounds,
    parse_complex,
    render_parameters,
    write_image,
)
from mandelbrot_raster.output import image_format_for


@dataclass(frozen=True)
class OutputConfig:
    path: Path
    image_format: str


def _bounds_argument(value):
    bounds = parse_bounds(value)
    if bounds is None:
        raise ArgumentTypeError(f"'{value}' is not of the form WIDTHxHEIGHT (e.g. 1000x750).")
    return bounds


def _point_argument(value):
    point = parse_complex(value)
    if point is None:
        raise ArgumentTypeError(f"'{value}' is not of the form RE,IM (e.g. -1.20,0.35).")
    return point


def build_parser():
    parser = ArgumentParser(
        description='Render a grayscale image of the Mandelbrot set.',
        epilog='Corners starting with a minus sign must be attached with "=", '
               'e.g. --upper-left=-1.20,0.35.',
    )

    parser.add_argument('output', type=str, metavar='OUTPUT',
                        help='file to write; the format follows the extension unless --format is given')

    parser.add_argument('--size', type=_bounds_argument,
                        dest='size', help='image size in pixels',
                        metavar='WIDTHxHEIGHT', default=(1000, 750))

    parser.add_argument('--upper-left', type=_point_argument,
                        dest='upper_left', help='complex point depicted by the upper-left corner',
                        metavar='RE,IM', default=complex(-1.20, 0.35))

    parser.add_argument('--lower-right', type=_point_argument,
                        dest='lower_right', help='complex point depicted by the lower-right corner',
                        metavar='RE,IM', default=complex(-1.0, 0.20))

    parser.add_argument('--format', type=str,
                        dest='format', help='image file format. Can be any extension supported by Pillow. Default: from OUTPUT, else "png".',
                        metavar='FORMAT', default=None)

    parser.add_argument('--backend', choices=['scalar', 'tensor'], default='scalar',
                        help='"scalar" iterates pixel by pixel; "tensor" uses TensorFlow (requires the tensor extra).')

    parser.add_argument('--band-rows', type=int,
                        dest='band_rows', help='rows rendered per band by the scalar backend; progress is reported per band',
                        metavar='ROWS', default=16)

    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable verbose logging, including TensorFlow and hardware diagnostics.')

    return parser


def resolve_output_config(opt, parser: ArgumentParser) -> OutputConfig:
    output_path = Path(opt.output).expanduser()
    if str(opt.output).endswith(tuple(filter(None, {os.sep, os.altsep}))):
        parser.error("OUTPUT must be a file path, not a directory.")
    if output_path.exists() and output_path.is_dir():
        parser.error("OUTPUT must point to a file, not a directory.")

    explicit_format = (getattr(opt, "format", None) or "").lower().lstrip(".")
    suffix = output_path.suffix.lower().lstrip(".")
    if explicit_format and suffix and suffix != explicit_format:
        parser.error(f"OUTPUT extension .{suffix} does not match --format {explicit_format}.")

    image_format = image_format_for(output_path, explicit_format or None)
    if not output_path.suffix:
        output_path = output_path.with_suffix(f".{image_format}")

    return OutputConfig(path=output_path.resolve(), image_format=image_format)


def resolve_parameters(opt, parser: ArgumentParser) -> RenderParameters:
    width, height = opt.size
    params = RenderParameters(
        width=width,
        height=height,
        upper_left=opt.upper_left,
        lower_right=opt.lower_right,
    )
    try:
        params.validate()
    except ValueError as exc:
        parser.error(str(exc))
    if opt.band_rows < 1:
        parser.error("--band-rows must be at least 1.")
    return params


def main(argv=None):
    parser = build_parser()
    opt = parser.parse_args(argv)

    global VERBOSE
    VERBOSE = bool(opt.verbose)

    output_config = resolve_output_config(opt, parser)
    params = resolve_parameters(opt, parser)

    log("rendering %dx%d from %s to %s" % (params.width, params.height, params.upper_left, params.lower_right))

    if opt.backend == 'tensor':
        from mandelbrot_raster.tensor import render_tensor, select_device

        pixels = render_tensor(params, device=select_device(VERBOSE))
    else:
        def report(index, total):
            log("band {0} out of {1}".format(index + 1, total), end='\r')

        pixels = render_parameters(params, rows_per_band=opt.band_rows, on_band=report)
        log("")

    path = write_image(pixels, params.bounds, output_config.path, output_config.image_format)
    log("wrote %s" % path)
    return path


if __name__ == '__main__':
    main()
