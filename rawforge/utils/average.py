"""3x3 neighborhood averaging (box blur) on NumPy arrays.

Each output pixel is the truncated integer mean of the pixel itself and
whichever of its 8 neighbors lie inside the image. Out-of-bounds cells are
left out of both the sum and the count, so corners average 4 cells and
edges average 6.
"""
from __future__ import annotations

import numpy as np

Array = np.ndarray

_OFFSETS = (-1, 0, 1)


def neighbor_count(shape: tuple[int, ...], row: int, col: int) -> int:
    """Number of in-bounds cells in the 3x3 window centered on (row, col)."""
    H, W = shape[0], shape[1]
    rows = sum(1 for a in _OFFSETS if 0 <= row + a < H)
    cols = sum(1 for b in _OFFSETS if 0 <= col + b < W)
    return rows * cols


def neighborhood_average(arr: Array, row: int, col: int) -> tuple[int, int, int]:
    """Average the 3x3 window around a single source pixel.

    Parameters
    ----------
    arr : np.ndarray
        Source RGB array (H, W, 3), dtype=uint8.
    row, col : int
        Coordinate of the window center; must be inside the image.

    Returns
    -------
    tuple[int, int, int]
        Per-channel sums divided by the cell count, truncated.
    """
    H, W, _ = arr.shape
    if not (0 <= row < H and 0 <= col < W):
        raise IndexError(f"({row}, {col}) is outside a {W}x{H} image")

    total = [0, 0, 0]
    count = 0
    for a in _OFFSETS:
        for b in _OFFSETS:
            r, c = row + a, col + b
            if r < 0 or r >= H or c < 0 or c >= W:
                continue
            for ch in range(3):
                total[ch] += int(arr[r, c, ch])
            count += 1
    # The center cell always qualifies, count >= 1
    return (total[0] // count, total[1] // count, total[2] // count)


def box_average(arr: Array) -> Array:
    """Evaluate :func:`neighborhood_average` for every pixel at once.

    Parameters
    ----------
    arr : np.ndarray
        Source RGB array (H, W, 3), dtype=uint8.

    Returns
    -------
    np.ndarray
        Averaged image with the same shape, dtype=uint8.
    """
    if not isinstance(arr, np.ndarray) or arr.ndim != 3 or arr.shape[2] != 3:
        raise ValueError("arr must be an RGB array with shape (H, W, 3)")

    H, W, _ = arr.shape
    # Zero padding contributes nothing to the sums; the count map below
    # excludes the padded cells from the divisor.
    padded = np.pad(arr.astype(np.int32), ((1, 1), (1, 1), (0, 0)), mode="constant")
    ones = np.pad(np.ones((H, W), dtype=np.int32), 1, mode="constant")

    sums = np.zeros((H, W, 3), dtype=np.int32)
    counts = np.zeros((H, W), dtype=np.int32)
    for a in range(3):
        for b in range(3):
            sums += padded[a:a + H, b:b + W, :]
            counts += ones[a:a + H, b:b + W]

    return (sums // counts[:, :, None]).astype(np.uint8)
