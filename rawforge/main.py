"""Command-line entry point for RawForge.

This tool loads a 512x512 planar ``.rgb`` image, resizes it through a
3x3 box average, optionally quantizes every channel to fewer bits, and
saves the result.

All processing occurs on NumPy arrays; Pillow is used only for saving
and previewing.

Usage example:
    python -m rawforge.main input.rgb 0.5 4 -1 -o output.png
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

from .errors import RawForgeError
from .pipeline import PipelineParams, run_file
from .utils.loader import save_image, to_pil
from .utils.resize import MAPPINGS

logger = logging.getLogger("rawforge")


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Parameters
    ----------
    argv : list[str] | None
        Optional list of arguments for testing. If None, uses sys.argv.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog="rawforge",
        description=(
            "Resize a 512x512 planar RGB image with a 3x3 box average and "
            "quantize each channel to a reduced bit depth."
        ),
    )

    parser.add_argument("input", help="Path to a 512x512 planar .rgb file")
    parser.add_argument("scale", type=float, help="Scale factor applied to 512 (>0)")
    parser.add_argument("channel_bits", type=int, help="Bits per channel, 1..8 (8 skips quantization)")
    parser.add_argument(
        "mode",
        type=int,
        help="-1 for uniform quantization, 0..255 for pivot-weighted quantization",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output file path (.png, .bmp, ... or .rgb for planar raw). Default: <input>_out.png",
    )
    parser.add_argument(
        "--mapping",
        type=str,
        default="scatter",
        choices=list(MAPPINGS),
        help=(
            "Pixel mapping: scatter projects source pixels forward (may leave gaps "
            "when upscaling) | gather samples the source for every output pixel."
        ),
    )
    parser.add_argument("--show", action="store_true", help="Open the result in the system image viewer")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    return parser.parse_args(argv)


def validate_args(ns: argparse.Namespace) -> None:
    """Validate argument values and raise ValueError for invalid inputs.

    Parameters
    ----------
    ns : argparse.Namespace
        Parsed CLI arguments.
    """
    if not Path(ns.input).exists():
        raise ValueError(f"Input file not found: {ns.input}")
    params_from_args(ns).validate()


def params_from_args(ns: argparse.Namespace) -> PipelineParams:
    """Build pipeline settings from parsed CLI arguments."""
    return PipelineParams(
        scale=ns.scale,
        channel_bits=ns.channel_bits,
        mode=ns.mode,
        mapping=ns.mapping,
    )


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry function for the CLI.

    Parameters
    ----------
    argv : list[str] | None
        Optional list of arguments for testing.

    Returns
    -------
    int
        Exit status code (0 for success, non-zero for failure).
    """
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        validate_args(args)
    except ValueError as e:
        print(f"Argument error: {e}")
        return 2

    try:
        out = run_file(args.input, params_from_args(args))
    except RawForgeError as e:
        print(f"Error: {e}")
        return 2

    output = args.output or str(Path(args.input).with_name(Path(args.input).stem + "_out.png"))
    save_image(out, output)
    logger.info("wrote %dx%d image to %s", out.shape[1], out.shape[0], output)

    if args.show:  # pragma: no cover - opens an external viewer
        to_pil(out).show()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
