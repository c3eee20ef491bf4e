"""RawForge: box-filtered resizing and channel quantization of raw RGB images."""
from __future__ import annotations

from .errors import AllocationFailure, InputSizeError, InvalidParameterError, RawForgeError
from .pipeline import PipelineParams, run_file, run_pipeline
from .quantizers import apply_quantize, bucket_table
from .utils.average import box_average, neighborhood_average
from .utils.loader import decode_planar, encode_planar, load_raw, save_image
from .utils.resize import resample, resample_scale

__all__ = [
    "AllocationFailure",
    "InputSizeError",
    "InvalidParameterError",
    "RawForgeError",
    "PipelineParams",
    "run_file",
    "run_pipeline",
    "apply_quantize",
    "bucket_table",
    "box_average",
    "neighborhood_average",
    "decode_planar",
    "encode_planar",
    "load_raw",
    "save_image",
    "resample",
    "resample_scale",
]
