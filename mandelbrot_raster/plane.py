"""Mapping between image pixels and points of the complex plane."""

from __future__ import annotations

import math


def plane_size(upper_left: complex, lower_right: complex) -> tuple[float, float]:
    """Return the width and height of the plane rectangle."""

    return lower_right.real - upper_left.real, upper_left.imag - lower_right.imag


def pixel_to_point(
    bounds: tuple[int, int],
    pixel: tuple[int, int],
    upper_left: complex,
    lower_right: complex,
) -> complex:
    """Return the point of the complex plane depicted by ``pixel``.

    ``bounds`` is the ``(width, height)`` of the image in pixels and ``pixel``
    a ``(column, row)`` pair inside it. ``upper_left`` and ``lower_right``
    designate the area of the plane the image covers. The rectangle is not
    validated here; see :func:`validate_rectangle`.
    """

    width, height = plane_size(upper_left, lower_right)
    column, row = pixel
    # rows grow downward, the imaginary axis grows upward
    return complex(
        upper_left.real + column * width / bounds[0],
        upper_left.imag - row * height / bounds[1],
    )


def validate_bounds(bounds: tuple[int, int]) -> None:
    if len(bounds) != 2:
        raise ValueError(f"bounds must be a (width, height) pair, got {bounds!r}.")
    for name, value in zip(("width", "height"), bounds):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"image {name} must be an integer, got {value!r}.")
        if value < 1:
            raise ValueError(f"image {name} must be at least 1, got {value}.")


def validate_rectangle(upper_left: complex, lower_right: complex) -> None:
    """Reject plane rectangles that are degenerate, inverted or not finite."""

    for name, corner in (("upper-left", upper_left), ("lower-right", lower_right)):
        if not (math.isfinite(corner.real) and math.isfinite(corner.imag)):
            raise ValueError(f"{name} corner must be finite, got {corner!r}.")
    width, height = plane_size(upper_left, lower_right)
    if not width > 0:
        raise ValueError(
            f"upper-left real part ({upper_left.real:g}) must be less than "
            f"lower-right real part ({lower_right.real:g})."
        )
    if not height > 0:
        raise ValueError(
            f"upper-left imaginary part ({upper_left.imag:g}) must be greater than "
            f"lower-right imaginary part ({lower_right.imag:g})."
        )
