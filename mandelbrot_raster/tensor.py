"""Vectorized TensorFlow backend producing the same bytes as the scalar renderer."""

from __future__ import annotations

from typing import Optional

import numpy as np
import tensorflow as tf

from .escape import HORIZON_SQUARED, ITERATION_LIMIT
from .plane import plane_size
from .renderer import RenderParameters


def select_device(verbose: bool = False) -> str:
    """Use the first visible GPU when TensorFlow finds one, the CPU otherwise."""

    gpus = tf.config.list_physical_devices('GPU')
    if not gpus:
        if verbose:
            print("No GPU found, using CPU")
        return '/CPU:0'
    try:
        for gpu in gpus:
            tf.config.experimental.set_memory_growth(gpu, True)
    except RuntimeError as e:
        # memory growth must be set before the GPUs are initialized
        if verbose:
            print(e)
        return '/CPU:0'
    if verbose:
        print("GPU found, using %s" % gpus[0].name)
    return '/GPU:0'


def _plane_grid(params: RenderParameters) -> tuple[np.ndarray, np.ndarray]:
    plane_width, plane_height = plane_size(params.upper_left, params.lower_right)
    columns = np.arange(params.width, dtype=np.float64)
    rows = np.arange(params.height, dtype=np.float64)
    # same operation order as pixel_to_point, element by element
    re = np.float64(params.upper_left.real) + columns * np.float64(plane_width) / np.float64(params.width)
    im = np.float64(params.upper_left.imag) - rows * np.float64(plane_height) / np.float64(params.height)
    return np.meshgrid(re, im)


@tf.function
def _escape_step(
    i: tf.Tensor,
    cr: tf.Tensor,
    ci: tf.Tensor,
    zr: tf.Tensor,
    zi: tf.Tensor,
    counts: tf.Tensor,
    active: tf.Tensor,
) -> tuple[tf.Tensor, tf.Tensor, tf.Tensor, tf.Tensor]:
    """Advance every orbit that is still inside the disk by one iteration."""

    zr_new = zr * zr - zi * zi + cr
    zi_new = zr * zi + zi * zr + ci
    norm = zr_new * zr_new + zi_new * zi_new
    escaped = tf.logical_and(active, norm >= tf.constant(HORIZON_SQUARED, dtype=norm.dtype))
    counts = tf.where(escaped, tf.fill(tf.shape(counts), i), counts)
    zr = tf.where(active, zr_new, zr)
    zi = tf.where(active, zi_new, zi)
    active = tf.logical_and(active, tf.logical_not(escaped))
    return zr, zi, counts, active


@tf.function
def _escape_run(cr: tf.Tensor, ci: tf.Tensor, limit: tf.Tensor) -> tf.Tensor:
    """Return the escape iteration per point, -1 for orbits that stayed bounded."""

    limit = tf.cast(limit, tf.int32)
    i = tf.constant(0, dtype=tf.int32)
    zr = tf.zeros_like(cr)
    zi = tf.zeros_like(ci)
    counts = tf.fill(tf.shape(cr), tf.constant(-1, dtype=tf.int32))
    active = tf.ones_like(counts, tf.bool)

    def cond(i, zr, zi, counts, active):
        return tf.logical_and(tf.less(i, limit), tf.reduce_any(active))

    def body(i, zr, zi, counts, active):
        zr, zi, counts, active = _escape_step(i, cr, ci, zr, zi, counts, active)
        return i + 1, zr, zi, counts, active

    _, _, _, counts, _ = tf.while_loop(cond, body, (i, zr, zi, counts, active))
    return counts


def render_tensor(params: RenderParameters, *, device: Optional[str] = None) -> np.ndarray:
    """Render ``params`` into a flat row-major uint8 array."""

    params.validate()
    re, im = _plane_grid(params)
    limit = tf.constant(ITERATION_LIMIT, dtype=tf.int32)

    with tf.device(device if device is not None else "/CPU:0"):
        cr = tf.convert_to_tensor(re, dtype=tf.float64)
        ci = tf.convert_to_tensor(im, dtype=tf.float64)
        counts = _escape_run(cr, ci, limit)
        pixels = tf.where(counts >= 0, ITERATION_LIMIT - counts, tf.zeros_like(counts))

    return pixels.numpy().astype(np.uint8).reshape(-1)
