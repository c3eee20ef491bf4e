"""The resample-then-quantize pipeline as a single synchronous call."""
from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Union

import numpy as np

from .errors import InputSizeError, InvalidParameterError
from .quantizers import UNIFORM_MODE, apply_quantize, validate_quantize_params
from .utils.loader import SOURCE_HEIGHT, SOURCE_WIDTH, load_raw
from .utils.resize import MAPPINGS, resample

logger = logging.getLogger(__name__)


@dataclass
class PipelineParams:
    """Settings for one pipeline run.

    Attributes
    ----------
    scale : float
        Factor applied to the source size on both axes (finite, >0).
    channel_bits : int
        Bits kept per channel, 1..8. 8 skips quantization.
    mode : int
        -1 for uniform buckets, 0..255 for pivot-weighted buckets.
    mapping : str
        "scatter" or "gather", see :func:`rawforge.utils.resize.resample`.
    """

    scale: float = 1.0
    channel_bits: int = 8
    mode: int = UNIFORM_MODE
    mapping: str = "scatter"

    def target_size(self, width: int = SOURCE_WIDTH, height: int = SOURCE_HEIGHT) -> tuple[int, int]:
        """Destination (height, width) for a source of the given size."""
        return int(self.scale * height), int(self.scale * width)

    def validate(self, width: int = SOURCE_WIDTH, height: int = SOURCE_HEIGHT) -> None:
        if not math.isfinite(self.scale * max(width, height)) or self.scale <= 0:
            raise InvalidParameterError(f"scale must be a finite number > 0, got {self.scale}")
        validate_quantize_params(self.channel_bits, self.mode)
        if self.mapping not in MAPPINGS:
            raise InvalidParameterError(f"Unknown mapping: {self.mapping}")
        new_h, new_w = self.target_size(width, height)
        if new_h < 1 or new_w < 1:
            raise InvalidParameterError(f"scale {self.scale} is too small for a {width}x{height} image")


def run_pipeline(src: np.ndarray, params: PipelineParams) -> np.ndarray:
    """Resample ``src`` and quantize the result.

    Parameters are checked before anything is allocated. The source array is
    never modified; the returned array is newly allocated and owned by the
    caller.

    Raises
    ------
    InputSizeError
        If ``src`` is not an (H, W, 3) array.
    InvalidParameterError
        For out-of-range parameters.
    AllocationFailure
        If the destination raster cannot be allocated.
    """
    if not isinstance(src, np.ndarray) or src.ndim != 3 or src.shape[2] != 3:
        raise InputSizeError("src must be an RGB array with shape (H, W, 3)")
    H, W, _ = src.shape
    params.validate(W, H)
    new_h, new_w = params.target_size(W, H)

    t0 = time.perf_counter()
    out = resample(src, new_h, new_w, mapping=params.mapping)
    t1 = time.perf_counter()
    apply_quantize(out, params.channel_bits, params.mode)
    t2 = time.perf_counter()
    logger.debug("resample %.1f ms, quantize %.1f ms", (t1 - t0) * 1e3, (t2 - t1) * 1e3)
    return out


def run_file(path: Union[str, Path], params: PipelineParams) -> np.ndarray:
    """Load a 512x512 planar ``.rgb`` file and run the pipeline on it."""
    params.validate()
    src = load_raw(path)
    return run_pipeline(src, params)
