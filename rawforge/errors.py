"""Exception types raised by the RawForge pipeline.

Every failure is raised to the caller; only the command-line entry point
turns them into an exit status.
"""
from __future__ import annotations


class RawForgeError(Exception):
    """Base class for all pipeline errors."""


class InputSizeError(RawForgeError, ValueError):
    """Raw input is missing, unreadable, or not exactly ``W*H*3`` bytes."""


class InvalidParameterError(RawForgeError, ValueError):
    """A pipeline parameter is outside its accepted range."""


class AllocationFailure(RawForgeError, MemoryError):
    """The destination raster could not be allocated."""


__all__ = [
    "RawForgeError",
    "InputSizeError",
    "InvalidParameterError",
    "AllocationFailure",
]
