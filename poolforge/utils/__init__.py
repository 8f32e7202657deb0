"""Utility functions for poolforge.

Modules:
- buffer: PixelBuffer and Artifact types.
- loader: Load/save Pillow <-> PixelBuffer conversion utilities.
- paths: Derived output file names.
- pooling: Min/max/average pooling over non-overlapping tiles.
"""
from .buffer import PixelBuffer, Artifact
from .loader import load_image, save_image, load_artifact, write_artifact
from .paths import derive_path, extension_of
from .pooling import Reducer, pooled_size, block_pool, min_pool, max_pool, avg_pool

__all__ = [
    "PixelBuffer",
    "Artifact",
    "load_image",
    "save_image",
    "load_artifact",
    "write_artifact",
    "derive_path",
    "extension_of",
    "Reducer",
    "pooled_size",
    "block_pool",
    "min_pool",
    "max_pool",
    "avg_pool",
]
