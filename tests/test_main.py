"""Tests for the command-line entry point."""

import numpy as np
import pytest
from PIL import Image

from rawforge.main import main, parse_args


def test_negative_mode_is_positional():
    ns = parse_args(["in.rgb", "0.5", "4", "-1"])
    assert ns.scale == 0.5
    assert ns.channel_bits == 4
    assert ns.mode == -1
    assert ns.mapping == "scatter"


def test_writes_png(raw_file, tmp_path):
    out = tmp_path / "out.png"
    assert main([str(raw_file), "0.5", "1", "-1", "-o", str(out)]) == 0
    with Image.open(out) as im:
        assert im.size == (256, 256)
        arr = np.array(im.convert("RGB"))
    assert (arr == np.array([128, 128, 0], dtype=np.uint8)).all()


def test_default_output_name(raw_file):
    assert main([str(raw_file), "0.25", "8", "-1"]) == 0
    assert raw_file.with_name("constant_out.png").exists()


def test_raw_output(raw_file, tmp_path):
    out = tmp_path / "out.rgb"
    assert main([str(raw_file), "1", "8", "-1", "--mapping", "gather", "-o", str(out)]) == 0
    assert out.read_bytes() == raw_file.read_bytes()


def test_missing_input(tmp_path, capsys):
    assert main([str(tmp_path / "missing.rgb"), "1", "8", "-1"]) == 2
    assert "Input file not found" in capsys.readouterr().out


def test_invalid_channel_bits(raw_file):
    assert main([str(raw_file), "1", "12", "-1"]) == 2


def test_invalid_scale(raw_file):
    assert main([str(raw_file), "0", "8", "-1"]) == 2


def test_wrong_input_size(tmp_path, capsys):
    p = tmp_path / "tiny.rgb"
    p.write_bytes(bytes(300))
    assert main([str(p), "1", "8", "-1"]) == 2
    assert "Error" in capsys.readouterr().out


@pytest.mark.parametrize("scale", ["inf", "nan", "1e308"])
def test_non_finite_scale(raw_file, capsys, scale):
    assert main([str(raw_file), scale, "8", "-1"]) == 2
    assert "Argument error" in capsys.readouterr().out
