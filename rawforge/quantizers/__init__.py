"""Per-channel quantization and a unified entry-point for application.

Exported API
------------
- apply_quantize(image_array, channel_bits, mode=-1)
- bucket_table(channel_bits, mode)

Supported modes
---------------
- ``-1``     : uniform buckets of equal width
- ``0..255`` : pivot-weighted buckets, finest around ``255 - mode``

Implementation notes
--------------------
Each channel byte is replaced by the nearer edge of the first bucket that
contains it, ties going to the lower edge. Values past the last scanned
bucket clamp to ``table[num_buckets - 1]``. Because the input domain is only
256 values, the rule is evaluated once per byte value into a lookup table
and applied to the whole raster with a single indexing pass.
"""
from __future__ import annotations

import logging

import numpy as np

from ..errors import InvalidParameterError
from .pivot import pivot_intervals
from .uniform import uniform_intervals

Array = np.ndarray

UNIFORM_MODE = -1

logger = logging.getLogger(__name__)


def validate_quantize_params(channel_bits: int, mode: int) -> None:
    """Raise InvalidParameterError unless 1 <= channel_bits <= 8 and mode is -1 or 0..255."""
    if not 1 <= channel_bits <= 8:
        raise InvalidParameterError(f"channel_bits must be in [1, 8], got {channel_bits}")
    if mode != UNIFORM_MODE and not 0 <= mode <= 255:
        raise InvalidParameterError(f"mode must be -1 or in [0, 255], got {mode}")


def bucket_table(channel_bits: int, mode: int) -> Array:
    """Build the bucket thresholds for ``channel_bits`` and ``mode``."""
    validate_quantize_params(channel_bits, mode)
    if mode == UNIFORM_MODE:
        return uniform_intervals(channel_bits)
    return pivot_intervals(channel_bits, mode)


def quantize_value(value: int, intervals: Array, num_buckets: int) -> int:
    """Snap one channel value to the nearer edge of its bucket."""
    for i in range(num_buckets - 1):
        lo, hi = int(intervals[i]), int(intervals[i + 1])
        if lo <= value <= hi:
            return lo if value <= (lo + hi) // 2 else hi
    return int(intervals[num_buckets - 1])


def build_lookup(intervals: Array, num_buckets: int) -> Array:
    """Evaluate :func:`quantize_value` for every byte value 0..255."""
    return np.array(
        [quantize_value(v, intervals, num_buckets) for v in range(256)],
        dtype=np.uint8,
    )


def apply_quantize(image_array: Array, channel_bits: int, mode: int = UNIFORM_MODE) -> Array:
    """Quantize every channel of an image array in place.

    Parameters
    ----------
    image_array : np.ndarray
        Writable RGB image array of shape (H, W, 3), dtype=uint8.
    channel_bits : int
        Bits kept per channel (1..8). 8 leaves the array untouched.
    mode : int
        ``-1`` for uniform buckets, ``0..255`` for pivot-weighted buckets.

    Returns
    -------
    np.ndarray
        The same array, quantized.
    """
    if not isinstance(image_array, np.ndarray) or image_array.ndim != 3 or image_array.shape[2] != 3:
        raise ValueError("image_array must be an RGB array with shape (H, W, 3)")
    if image_array.dtype != np.uint8:
        raise TypeError("image_array must have dtype=uint8")
    validate_quantize_params(channel_bits, mode)

    if channel_bits == 8:
        return image_array

    num_buckets = 1 << channel_bits
    intervals = bucket_table(channel_bits, mode)
    logger.debug(
        "quantize to %d buckets (%s): %s",
        num_buckets,
        "uniform" if mode == UNIFORM_MODE else f"pivot {255 - mode}",
        intervals.tolist(),
    )
    lut = build_lookup(intervals, num_buckets)
    image_array[...] = lut[image_array]
    return image_array


__all__ = [
    "UNIFORM_MODE",
    "apply_quantize",
    "bucket_table",
    "build_lookup",
    "quantize_value",
    "validate_quantize_params",
]
