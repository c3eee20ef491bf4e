"""Box-filtered resampling of RGB arrays.

The source image is first smoothed with the 3x3 neighborhood average, then
pixels are moved to the destination grid using independent row and column
scale factors ``new_h / H`` and ``new_w / W``.

Two mappings are available:

- ``"scatter"``: every source pixel is projected forward to
  ``(floor(row * row_ratio), floor(col * col_ratio))``. When several source
  pixels land on the same destination pixel the last one in raster-scan
  order wins. When upscaling, destination pixels no source pixel reaches
  stay zero.
- ``"gather"``: every destination pixel reads the source pixel at
  ``(floor(i / row_ratio), floor(j / col_ratio))``, so the destination is
  always fully covered.
"""
from __future__ import annotations

import logging
import math
from typing import Literal

import numpy as np

from ..errors import AllocationFailure, InvalidParameterError
from .average import box_average

Array = np.ndarray
Mapping = Literal["scatter", "gather"]

MAPPINGS = ("scatter", "gather")

logger = logging.getLogger(__name__)


def _allocate(new_h: int, new_w: int) -> Array:
    try:
        return np.zeros((new_h, new_w, 3), dtype=np.uint8)
    except (MemoryError, ValueError) as e:
        raise AllocationFailure(f"cannot allocate a {new_w}x{new_h} RGB raster: {e}") from e


def _scatter_axis(size: int, new_size: int) -> tuple[Array, Array]:
    """Destination indices hit along one axis and the last source index for each.

    The forward map ``floor(i * ratio)`` is non-decreasing, so the last
    source index landing on a destination index is found with a right-sided
    search over the mapped values.
    """
    ratio = new_size / size
    mapped = np.floor(np.arange(size) * ratio).astype(np.int64)
    dst = np.unique(mapped)
    src = np.searchsorted(mapped, dst, side="right") - 1
    return dst, src


def _gather_axis(size: int, new_size: int) -> Array:
    """Source index read by each destination index along one axis."""
    src = (np.arange(new_size, dtype=np.int64) * size) // new_size
    return np.minimum(src, size - 1)


def resample(arr: Array, new_h: int, new_w: int, mapping: Mapping = "scatter") -> Array:
    """Resize an RGB image to (new_h, new_w) through the 3x3 box average.

    Parameters
    ----------
    arr : np.ndarray
        Source array of shape (H, W, 3), dtype=uint8.
    new_h : int
        Target height (>=1).
    new_w : int
        Target width (>=1).
    mapping : str
        ``"scatter"`` (forward projection of source pixels) or ``"gather"``
        (every destination pixel samples the source).

    Returns
    -------
    np.ndarray
        Newly allocated interleaved array of shape (new_h, new_w, 3).
    """
    if not isinstance(arr, np.ndarray) or arr.ndim != 3 or arr.shape[2] != 3:
        raise ValueError("arr must be an RGB image with shape (H, W, 3)")
    if new_h < 1 or new_w < 1:
        raise InvalidParameterError("new_h and new_w must be >= 1")
    if mapping not in MAPPINGS:
        raise InvalidParameterError(f"Unknown mapping: {mapping}")

    H, W, _ = arr.shape
    out = _allocate(new_h, new_w)
    smoothed = box_average(arr)
    logger.debug(
        "resample %dx%d -> %dx%d (%s), row ratio %.6f, col ratio %.6f",
        W, H, new_w, new_h, mapping, new_h / H, new_w / W,
    )

    if mapping == "scatter":
        dst_rows, src_rows = _scatter_axis(H, new_h)
        dst_cols, src_cols = _scatter_axis(W, new_w)
        out[np.ix_(dst_rows, dst_cols)] = smoothed[np.ix_(src_rows, src_cols)]
        if dst_rows.size < new_h or dst_cols.size < new_w:
            logger.debug(
                "scatter left %d of %d destination pixels unwritten",
                new_h * new_w - dst_rows.size * dst_cols.size,
                new_h * new_w,
            )
    else:
        src_rows = _gather_axis(H, new_h)
        src_cols = _gather_axis(W, new_w)
        out[...] = smoothed[np.ix_(src_rows, src_cols)]

    return out


def resample_scale(arr: Array, scale: float, mapping: Mapping = "scatter") -> Array:
    """Resize by a float ``scale`` applied to both axes.

    The target size is ``int(scale * size)`` per axis (truncated).

    Parameters
    ----------
    arr : np.ndarray
        Source array of shape (H, W, 3), dtype=uint8.
    scale : float
        Scale factor (finite, >0). Values >1 upscale, <1 downscale.
    mapping : str
        See :func:`resample`.
    """
    H, W, _ = arr.shape
    if not math.isfinite(scale * max(H, W)) or scale <= 0:
        raise InvalidParameterError(f"scale must be a finite number > 0, got {scale}")
    new_h = int(scale * H)
    new_w = int(scale * W)
    if new_h < 1 or new_w < 1:
        raise InvalidParameterError(f"scale {scale} is too small for a {W}x{H} image")
    return resample(arr, new_h, new_w, mapping)
