"""Utility functions for RawForge.

Modules:
- loader: Planar raw <-> NumPy conversion and Pillow output.
- average: 3x3 neighborhood averaging.
- resize: Box-filtered scatter/gather resampling.
"""
from .loader import decode_planar, encode_planar, load_raw, save_image, to_pil
from .average import box_average, neighborhood_average, neighbor_count
from .resize import resample, resample_scale

__all__ = [
    "decode_planar",
    "encode_planar",
    "load_raw",
    "save_image",
    "to_pil",
    "box_average",
    "neighborhood_average",
    "neighbor_count",
    "resample",
    "resample_scale",
]
