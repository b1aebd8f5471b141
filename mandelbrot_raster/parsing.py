"""Parsers for the numeric pairs given on the command line."""

from __future__ import annotations

from typing import Callable, Optional, TypeVar

T = TypeVar("T")


def parse_pair(s: str, separator: str, kind: Callable[[str], T] = int) -> Optional[tuple[T, T]]:
    """Parse ``s`` as two values of ``kind`` joined by ``separator``.

    ``"400x600"`` with ``"x"`` gives ``(400, 600)``. Only the first occurrence
    of ``separator`` splits. Returns ``None`` when the separator is missing or
    either half does not parse, including an empty half such as ``"10,"``.
    """

    left, found, right = s.partition(separator)
    if not found:
        return None
    try:
        return kind(left), kind(right)
    except ValueError:
        return None


def parse_complex(s: str) -> Optional[complex]:
    """Parse a pair of floats separated by a comma as a complex number."""

    pair = parse_pair(s, ",", float)
    if pair is None:
        return None
    return complex(pair[0], pair[1])


def parse_bounds(s: str) -> Optional[tuple[int, int]]:
    return parse_pair(s, "x", int)
