"""Persist rendered pixel buffers as grayscale images."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Union

import numpy as np
import PIL.Image

DEFAULT_FORMAT = "png"


def _pil_format_name(ext: str) -> str:
    upper = ext.upper()
    if upper == "JPG":
        return "JPEG"
    if upper == "TIF":
        return "TIFF"
    return upper


def image_format_for(path: Path, image_format: Optional[str] = None) -> str:
    """Resolve the file format from an explicit name or the path suffix."""

    fmt = (image_format or path.suffix or DEFAULT_FORMAT).lower().lstrip(".")
    return fmt or DEFAULT_FORMAT


def to_array(pixels: Sequence[int], bounds: tuple[int, int]) -> np.ndarray:
    """View a flat row-major buffer as a ``(height, width)`` uint8 array."""

    width, height = bounds
    if len(pixels) != width * height:
        raise ValueError(f"pixel buffer holds {len(pixels)} bytes, expected {width * height}.")
    return np.frombuffer(bytes(pixels), dtype=np.uint8).reshape(height, width)


def write_image(
    pixels: Sequence[int],
    bounds: tuple[int, int],
    path: Union[str, Path],
    image_format: Optional[str] = None,
) -> Path:
    """Write the buffer to ``path`` as a single-channel image."""

    output_path = Path(path)
    fmt = image_format_for(output_path, image_format)
    image = PIL.Image.fromarray(to_array(pixels, bounds))
    output_path.parent.mkdir(parents=True, exist_ok=True)
    image.save(str(output_path), format=_pil_format_name(fmt))
    return output_path
