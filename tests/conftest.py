"""Shared fixtures for RawForge tests."""

import numpy as np
import pytest

from rawforge.utils.loader import encode_planar


def constant_image(color, height=512, width=512):
    arr = np.empty((height, width, 3), dtype=np.uint8)
    arr[...] = color
    return arr


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def constant_source():
    """512x512 source filled with (200, 100, 50)."""
    return constant_image((200, 100, 50))


@pytest.fixture
def raw_file(tmp_path, constant_source):
    """The constant source written as a planar .rgb file."""
    p = tmp_path / "constant.rgb"
    p.write_bytes(encode_planar(constant_source))
    return p
