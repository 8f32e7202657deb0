from __future__ import annotations

# Alias package: re-export public API from the existing implementation.
from poolforge.errors import DecodeFailure, EncodeNoOp, InvalidParameter  # noqa: F401
from poolforge.pipeline import derive_artifacts, run  # noqa: F401
from poolforge.utils.buffer import Artifact, PixelBuffer  # noqa: F401
from poolforge.utils.loader import load_image, save_image  # noqa: F401
from poolforge.utils.paths import derive_path  # noqa: F401
from poolforge.utils.pooling import Reducer, avg_pool, block_pool, max_pool, min_pool  # noqa: F401

__all__ = [
    "DecodeFailure",
    "EncodeNoOp",
    "InvalidParameter",
    "derive_artifacts",
    "run",
    "Artifact",
    "PixelBuffer",
    "load_image",
    "save_image",
    "derive_path",
    "Reducer",
    "block_pool",
    "min_pool",
    "max_pool",
    "avg_pool",
]
