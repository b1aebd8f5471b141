"""Escape-time test for points of the complex plane."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

ITERATION_LIMIT = 255
HORIZON_SQUARED = 4.0


@dataclass(frozen=True)
class Escaped:
    """The orbit left the radius-2 disk; ``count`` is the last iteration inside it."""

    count: int


@dataclass(frozen=True)
class Bounded:
    """The orbit stayed inside the disk for the whole iteration budget."""


BOUNDED = Bounded()

EscapeResult = Union[Escaped, Bounded]


def escape_time(c: complex, limit: int) -> EscapeResult:
    """Try to determine whether ``c`` is in the Mandelbrot set.

    Runs at most ``limit`` iterations of ``z = z*z + c`` starting from zero.
    Returns ``Escaped(i)`` when the orbit leaves the circle of radius 2 right
    after iteration ``i``, or ``BOUNDED`` when the limit is reached first and
    ``c`` is presumed to be a member.
    """

    z = 0j
    for i in range(limit):
        z = z * z + c
        if z.real * z.real + z.imag * z.imag >= HORIZON_SQUARED:
            return Escaped(i)
    return BOUNDED


def intensity(result: EscapeResult) -> int:
    """Convert an escape result into a pixel byte; 0 marks the set interior."""

    if isinstance(result, Escaped):
        return ITERATION_LIMIT - result.count
    return 0
