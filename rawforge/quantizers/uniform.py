"""Uniform bucket thresholds: equal-width buckets across 0..255."""
from __future__ import annotations

import numpy as np

Array = np.ndarray


def uniform_intervals(channel_bits: int) -> Array:
    """Start value of each of the ``2 ** channel_bits`` equal-width buckets.

    ``interval[i] = floor(i * 256 / num_buckets)``. No closing upper bound is
    stored; values above the last start are clamped to it when quantizing.

    Parameters
    ----------
    channel_bits : int
        Bits per channel after quantization (1..8).

    Returns
    -------
    np.ndarray
        1-D int32 array of length ``2 ** channel_bits``.
    """
    num_buckets = 1 << channel_bits
    return (np.arange(num_buckets, dtype=np.int32) * 256) // num_buckets
