"""Command-line entry point for TriPool.

This tool loads an image, computes its min, max and average pooled
variants over non-overlapping square tiles, writes each variant next to
the input with a ``_min``/``_max``/``_avg`` suffix, and prints the
dimensions of every image.

All processing occurs on NumPy arrays; Pillow is used only for
loading and saving.

Usage example:
    python -m poolforge.main photo.png 4
"""
from __future__ import annotations

import argparse
import logging
from typing import Optional

from .errors import DecodeFailure, EncodeFailure, InvalidArguments, InvalidParameter
from .pipeline import run
from .report import format_report

logger = logging.getLogger(__name__)

DEFAULT_BLOCK_SIZE = 2

USAGE = (
    "Usage1 : poolforge <IMAGE_PATH>\n"
    "Usage2 : poolforge <IMAGE_PATH> <BLOCK_SIZE>"
)


class _ArgumentParser(argparse.ArgumentParser):
    """Raise InvalidArguments instead of exiting on bad input."""

    def error(self, message: str):
        raise InvalidArguments(message)


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
    parser = _ArgumentParser(
        prog="poolforge",
        description=(
            "Downsample an image with min, max and average pooling and write "
            "the three results next to it."
        ),
        usage="%(prog)s [-h] [-v] [-q] IMAGE_PATH [BLOCK_SIZE]",
    )

    parser.add_argument("image_path", metavar="IMAGE_PATH", help="Path to input image file")
    parser.add_argument(
        "block_size",
        metavar="BLOCK_SIZE",
        nargs="?",
        type=int,
        default=DEFAULT_BLOCK_SIZE,
        help=(
            f"Side length of the square tiles (>=1, default {DEFAULT_BLOCK_SIZE}). "
            "Partial tiles at the right and bottom edges are dropped."
        ),
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Do not print the dimension report"
    )

    return parser.parse_args(argv)


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
    try:
        args = parse_args(argv)
    except InvalidArguments as e:
        print(f"Argument error: {e}")
        print(USAGE)
        return 2

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)-22s - %(levelname)-8s - %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        source, derived = run(args.image_path, args.block_size)
    except DecodeFailure as e:
        logger.debug("decode failed: %s", e)
        print("Failed to load image")
        return 1
    except InvalidParameter as e:
        print(f"Argument error: {e}")
        return 1
    except EncodeFailure as e:
        print(f"Write error: {e}")
        return 1

    if not args.quiet:
        print(format_report(source, derived))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
