"""Rendering primitives for Mandelbrot rasters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, MutableSequence, Optional

from .escape import ITERATION_LIMIT, escape_time, intensity
from .plane import pixel_to_point, validate_bounds, validate_rectangle


@dataclass(frozen=True)
class RenderParameters:
    """Parameters that describe a single render of the Mandelbrot set."""

    width: int
    height: int
    upper_left: complex
    lower_right: complex

    @property
    def bounds(self) -> tuple[int, int]:
        return self.width, self.height

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    def validate(self) -> None:
        validate_bounds(self.bounds)
        validate_rectangle(self.upper_left, self.lower_right)


@dataclass(frozen=True)
class Band:
    """A contiguous range of image rows, ``top`` inclusive."""

    top: int
    rows: int

    @property
    def bottom(self) -> int:
        return self.top + self.rows


def _check_length(pixels: MutableSequence[int], expected: int, what: str) -> None:
    if len(pixels) != expected:
        raise ValueError(f"{what} holds {len(pixels)} bytes, expected {expected}.")


def _render_rows(
    pixels: MutableSequence[int],
    bounds: tuple[int, int],
    first_row: int,
    rows: int,
    upper_left: complex,
    lower_right: complex,
) -> None:
    width = bounds[0]
    for offset_row in range(rows):
        row = first_row + offset_row
        base = offset_row * width
        for column in range(width):
            point = pixel_to_point(bounds, (column, row), upper_left, lower_right)
            pixels[base + column] = intensity(escape_time(point, ITERATION_LIMIT))


def render(
    pixels: MutableSequence[int],
    bounds: tuple[int, int],
    upper_left: complex,
    lower_right: complex,
) -> None:
    """Render a rectangle of the Mandelbrot set into a buffer of pixels.

    ``pixels`` holds one byte per pixel in row-major order and must be exactly
    ``bounds[0] * bounds[1]`` long; it is overwritten in place.
    """

    _check_length(pixels, bounds[0] * bounds[1], "pixel buffer")
    _render_rows(pixels, bounds, 0, bounds[1], upper_left, lower_right)


def row_bands(bounds: tuple[int, int], rows_per_band: int) -> list[Band]:
    """Split the image rows into disjoint bands of at most ``rows_per_band`` rows."""

    if rows_per_band < 1:
        raise ValueError(f"rows_per_band must be at least 1, got {rows_per_band}.")
    height = bounds[1]
    return [Band(top, min(rows_per_band, height - top)) for top in range(0, height, rows_per_band)]


def render_band(
    band_pixels: MutableSequence[int],
    bounds: tuple[int, int],
    band: Band,
    upper_left: complex,
    lower_right: complex,
) -> None:
    """Render the rows of ``band`` into ``band_pixels``.

    Points are mapped against the full image ``bounds``, so the bytes match the
    same rows of a full :func:`render`.
    """

    _check_length(band_pixels, band.rows * bounds[0], f"band at row {band.top}")
    _render_rows(band_pixels, bounds, band.top, band.rows, upper_left, lower_right)


def render_banded(
    pixels: MutableSequence[int],
    bounds: tuple[int, int],
    upper_left: complex,
    lower_right: complex,
    rows_per_band: int,
    on_band: Optional[Callable[[int, int], None]] = None,
) -> None:
    """Render band by band, each band writing its own slice of ``pixels``.

    ``pixels`` must support the buffer protocol (``bytearray``, a ``uint8``
    numpy array) so that every band gets a writable view rather than a copy.
    """

    _check_length(pixels, bounds[0] * bounds[1], "pixel buffer")
    bands = row_bands(bounds, rows_per_band)
    view = memoryview(pixels)
    width = bounds[0]
    for index, band in enumerate(bands):
        render_band(view[band.top * width:band.bottom * width], bounds, band, upper_left, lower_right)
        if on_band is not None:
            on_band(index, len(bands))


def render_parameters(params: RenderParameters, *, rows_per_band: Optional[int] = None,
                      on_band: Optional[Callable[[int, int], None]] = None) -> bytearray:
    """Allocate a buffer for ``params`` and render into it."""

    params.validate()
    pixels = bytearray(params.pixel_count)
    if rows_per_band is None:
        render(pixels, params.bounds, params.upper_left, params.lower_right)
    else:
        render_banded(pixels, params.bounds, params.upper_left, params.lower_right, rows_per_band, on_band)
    return pixels
