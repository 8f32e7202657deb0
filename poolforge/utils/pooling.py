"""Block pooling over non-overlapping square tiles.

The image is cut into ``block x block`` tiles starting at the top-left
corner. Each tile collapses to one output pixel using a reducer (min, max or
truncating average). Tiles that would run past the right or bottom edge are
discarded, so the output size is ``(W - b) // b + 1`` by ``(H - b) // b + 1``.

Only the first ``POOLED_CHANNELS`` channels are sampled and written. An alpha
channel in the source is dropped.
"""
from __future__ import annotations

import enum
import logging
import numbers

import numpy as np

from ..errors import InvalidParameter
from .buffer import PixelBuffer

Array = np.ndarray

logger = logging.getLogger(__name__)

POOLED_CHANNELS = 3


class Reducer(enum.Enum):
    """Per-tile reduction applied by :func:`block_pool`."""

    MIN = "min"
    MAX = "max"
    AVERAGE = "avg"


def pooled_size(width: int, height: int, block_size: int) -> tuple[int, int]:
    """Return ``(out_width, out_height)`` for complete tiles only."""
    _check_block_size(width, height, block_size)
    out_w = (width - block_size) // block_size + 1
    out_h = (height - block_size) // block_size + 1
    return out_w, out_h


def _check_block_size(width: int, height: int, block_size: int) -> None:
    if isinstance(block_size, bool) or not isinstance(block_size, numbers.Integral):
        raise InvalidParameter(f"block size must be an integer, got {block_size!r}")
    if block_size <= 0:
        raise InvalidParameter(f"block size must be >= 1, got {block_size}")
    if block_size > min(width, height):
        raise InvalidParameter(
            f"block size {block_size} exceeds the smaller image dimension "
            f"of {width}x{height}"
        )


def _tiles(arr: Array, block_size: int, out_w: int, out_h: int) -> Array:
    """View ``arr`` as (out_h, b, out_w, b, POOLED_CHANNELS) tiles."""
    b = block_size
    cropped = arr[: out_h * b, : out_w * b, :POOLED_CHANNELS]
    return cropped.reshape(out_h, b, out_w, b, POOLED_CHANNELS)


def block_pool(buffer: PixelBuffer, block_size: int, reducer: Reducer) -> PixelBuffer:
    """Pool ``buffer`` over ``block_size`` tiles with ``reducer``.

    Parameters
    ----------
    buffer : PixelBuffer
        Source pixels with at least ``POOLED_CHANNELS`` channels.
    block_size : int
        Tile side length, ``1 <= block_size <= min(width, height)``.
    reducer : Reducer
        ``MIN``, ``MAX`` or ``AVERAGE``. The average uses truncating integer
        division of the tile sum by ``block_size ** 2``.

    Returns
    -------
    PixelBuffer
        New buffer with ``POOLED_CHANNELS`` channels. The source is untouched.
    """
    if not isinstance(buffer, PixelBuffer):
        raise TypeError("buffer must be a PixelBuffer")
    reducer = Reducer(reducer)
    if buffer.channels < POOLED_CHANNELS:
        raise InvalidParameter(
            f"pooling needs at least {POOLED_CHANNELS} channels, got {buffer.channels}"
        )
    out_w, out_h = pooled_size(buffer.width, buffer.height, block_size)

    tiles = _tiles(buffer.array, block_size, out_w, out_h)
    if reducer is Reducer.MIN:
        out = tiles.min(axis=(1, 3))
    elif reducer is Reducer.MAX:
        out = tiles.max(axis=(1, 3))
    else:
        sums = tiles.sum(axis=(1, 3), dtype=np.uint64)
        out = sums // (block_size * block_size)

    logger.debug(
        "%s pooling %dx%d -> %dx%d (block=%d)",
        reducer.value,
        buffer.width,
        buffer.height,
        out_w,
        out_h,
        block_size,
    )
    return PixelBuffer(out.astype(np.uint8))


def min_pool(buffer: PixelBuffer, block_size: int) -> PixelBuffer:
    """Minimum of each tile."""
    return block_pool(buffer, block_size, Reducer.MIN)


def max_pool(buffer: PixelBuffer, block_size: int) -> PixelBuffer:
    """Maximum of each tile."""
    return block_pool(buffer, block_size, Reducer.MAX)


def avg_pool(buffer: PixelBuffer, block_size: int) -> PixelBuffer:
    """Truncated mean of each tile."""
    return block_pool(buffer, block_size, Reducer.AVERAGE)


__all__ = [
    "POOLED_CHANNELS",
    "Reducer",
    "pooled_size",
    "block_pool",
    "min_pool",
    "max_pool",
    "avg_pool",
]
