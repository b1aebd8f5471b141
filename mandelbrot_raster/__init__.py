"""Public API for Mandelbrot raster rendering."""

from .escape import BOUNDED, ITERATION_LIMIT, Bounded, EscapeResult, Escaped, escape_time, intensity
from .output import to_array, write_image
from .parsing import parse_bounds, parse_complex, parse_pair
from .plane import pixel_to_point, plane_size, validate_bounds, validate_rectangle
from .renderer import (
    Band,
    RenderParameters,
    render,
    render_band,
    render_banded,
    render_parameters,
    row_bands,
)

__all__ = [
    "BOUNDED",
    "Band",
    "Bounded",
    "EscapeResult",
    "Escaped",
    "ITERATION_LIMIT",
    "RenderParameters",
    "escape_time",
    "intensity",
    "parse_bounds",
    "parse_complex",
    "parse_pair",
    "pixel_to_point",
    "plane_size",
    "render",
    "render_band",
    "render_banded",
    "render_parameters",
    "row_bands",
    "to_array",
    "validate_bounds",
    "validate_rectangle",
    "write_image",
]
