"""Raw planar RGB loading and image saving utilities.

Input files are headerless and plane-major: all R samples of the image,
then all G samples, then all B samples, each plane row-major. Everything
past the loader works on interleaved NumPy ``uint8`` arrays of shape
(H, W, 3); Pillow is only used to write the finished raster.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

from ..errors import InputSizeError

Array = np.ndarray

SOURCE_WIDTH = 512
SOURCE_HEIGHT = 512
RAW_SUFFIXES = (".rgb", ".raw")

logger = logging.getLogger(__name__)


def decode_planar(data: bytes, width: int = SOURCE_WIDTH, height: int = SOURCE_HEIGHT) -> Array:
    """Convert plane-major RGB bytes into an interleaved array.

    Parameters
    ----------
    data : bytes
        Exactly ``width * height * 3`` bytes laid out as R plane, G plane,
        B plane.
    width, height : int
        Raster dimensions.

    Returns
    -------
    np.ndarray
        Read-only array of shape (height, width, 3), dtype=uint8.
    """
    expected = width * height * 3
    if len(data) != expected:
        raise InputSizeError(
            f"raw buffer must be exactly {expected} bytes for {width}x{height} RGB, got {len(data)}"
        )
    planes = np.frombuffer(data, dtype=np.uint8).reshape(3, height, width)
    # Transpose plane-major (C, H, W) into pixel-interleaved (H, W, C)
    arr = np.ascontiguousarray(planes.transpose(1, 2, 0))
    arr.flags.writeable = False
    return arr


def encode_planar(arr: Array) -> bytes:
    """Convert an (H, W, 3) uint8 array back into plane-major bytes."""
    if not isinstance(arr, np.ndarray) or arr.ndim != 3 or arr.shape[2] != 3:
        raise ValueError("arr must be an RGB array with shape (H, W, 3)")
    if arr.dtype != np.uint8:
        raise TypeError("arr must have dtype=uint8")
    return np.ascontiguousarray(arr.transpose(2, 0, 1)).tobytes()


def load_raw(
    path: Union[str, Path],
    width: int = SOURCE_WIDTH,
    height: int = SOURCE_HEIGHT,
) -> Array:
    """Load a planar ``.rgb`` file into a read-only RGB array.

    Parameters
    ----------
    path : str | Path
        Path to the raw file.
    width, height : int
        Expected raster dimensions (512x512 for the pipeline).

    Returns
    -------
    np.ndarray
        Array of shape (height, width, 3), dtype=uint8.

    Raises
    ------
    InputSizeError
        If the file cannot be read or has the wrong size.
    """
    p = Path(path)
    try:
        data = p.read_bytes()
    except OSError as e:
        raise InputSizeError(f"cannot read raw image {p}: {e}") from e
    arr = decode_planar(data, width, height)
    logger.debug("loaded %s (%dx%d)", p, width, height)
    return arr


def to_pil(arr: Array) -> Image.Image:
    """Wrap an RGB array in a Pillow image for display."""
    return Image.fromarray(np.ascontiguousarray(arr))


def save_image(arr: Array, path: Union[str, Path]) -> None:
    """Save an RGB NumPy array (uint8) to a file.

    ``.rgb`` and ``.raw`` paths are written in the planar input layout;
    any other extension goes through Pillow, which infers the format.

    Parameters
    ----------
    arr : np.ndarray
        Array of shape (H, W, 3), dtype=uint8.
    path : str | Path
        Output file path.
    """
    if not isinstance(arr, np.ndarray):
        raise TypeError("arr must be a NumPy array")
    if arr.dtype != np.uint8:
        raise TypeError("arr must have dtype=uint8")
    if arr.ndim != 3 or arr.shape[2] != 3:
        raise ValueError("arr must have shape (H, W, 3)")

    p = Path(path)
    if p.suffix.lower() in RAW_SUFFIXES:
        p.write_bytes(encode_planar(arr))
    else:
        to_pil(arr).save(p)
    logger.debug("saved %s (%dx%d)", p, arr.shape[1], arr.shape[0])
