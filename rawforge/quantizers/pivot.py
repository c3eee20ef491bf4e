"""Pivot-weighted bucket thresholds.

Bucket edges follow an exponential layout, ``lb[i] = 256 ** (i / N)``, that
is scaled toward the pivot from the left and mirrored and scaled toward it
from the right. Subtracting the two sides gives edges that are dense near
the pivot and sparse far from it.

All arithmetic is exact: ``256 ** (i / N) == 2 ** (8 * i / N)`` where
``8 * i / N`` is a dyadic rational (N is a power of two), so integer
exponents evaluate exactly before flooring, and the scaled edges use
integer ceiling division. Truncating a floating-point ``exp`` instead would
turn exact powers such as 16, 64 and 256 into 15, 63 and 255; that
rounding artifact is deliberately not reproduced, so these tables differ
from ones built that way by one at those edges.
"""
from __future__ import annotations

import numpy as np

Array = np.ndarray


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


def _exp_edges(num_buckets: int) -> list[int]:
    # lb[0] is pinned to 0, not 256 ** 0
    edges = [0]
    for i in range(1, num_buckets + 1):
        edges.append(int(np.floor(2.0 ** (8 * i / num_buckets))))
    return edges


def pivot_intervals(channel_bits: int, mode: int) -> Array:
    """Bucket edges concentrated around ``255 - mode``.

    Parameters
    ----------
    channel_bits : int
        Bits per channel after quantization (1..7).
    mode : int
        Pivot selector in 0..255. The pivot used is ``255 - mode``.

    Returns
    -------
    np.ndarray
        1-D int32 array of ``2 ** channel_bits + 1`` non-decreasing edges,
        starting at 0 and clipped to 255.
    """
    n = 1 << channel_bits
    pivot = 255 - mode
    lb = _exp_edges(n)

    left = [_ceil_div(lb[i] * pivot, 256) for i in range(n + 1)]
    right = [_ceil_div(lb[n - i] * (256 - pivot), 256) for i in range(n + 1)]

    shift = left[0] - right[0]
    intervals = np.array([left[i] - right[i] - shift for i in range(n + 1)], dtype=np.int32)
    # The closing edge can reach 256
    return np.clip(intervals, 0, 255)
