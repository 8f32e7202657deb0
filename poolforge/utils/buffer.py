"""Pixel buffer and named artifact types.

A :class:`PixelBuffer` wraps a ``uint8`` NumPy array of shape (H, W, C).
The flat row-major view matches the classic interleaved layout where the
byte at (row, col, channel) sits at ``row*W*C + col*C + channel``.
"""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ..errors import InvalidParameter

Array = np.ndarray


class PixelBuffer:
    """Owned, contiguous 8-bit pixel data with width, height and channels."""

    __slots__ = ("_data",)

    def __init__(self, data: Array) -> None:
        if not isinstance(data, np.ndarray):
            raise TypeError("data must be a NumPy array")
        if data.dtype != np.uint8:
            raise TypeError("data must have dtype=uint8")
        if data.ndim == 2:
            data = data[:, :, None]
        if data.ndim != 3:
            raise ValueError("data must have shape (H, W) or (H, W, C)")
        h, w, c = data.shape
        if h < 1 or w < 1 or c < 1:
            raise ValueError("width, height and channels must be >= 1")
        self._data = np.array(data, order="C")
        self._data.flags.writeable = False

    @classmethod
    def from_bytes(cls, data: bytes, width: int, height: int, channels: int) -> "PixelBuffer":
        """Build a buffer from flat row-major bytes."""
        expected = width * height * channels
        if len(data) != expected:
            raise InvalidParameter(
                f"buffer length {len(data)} does not match "
                f"{width}x{height}x{channels}={expected}"
            )
        arr = np.frombuffer(data, dtype=np.uint8).reshape(height, width, channels)
        return cls(arr)

    @property
    def width(self) -> int:
        return self._data.shape[1]

    @property
    def height(self) -> int:
        return self._data.shape[0]

    @property
    def channels(self) -> int:
        return self._data.shape[2]

    @property
    def array(self) -> Array:
        """Read-only (H, W, C) view of the pixel data."""
        return self._data

    def __len__(self) -> int:
        return self._data.size

    def index(self, row: int, col: int, channel: int) -> int:
        """Flat offset of (row, col, channel)."""
        return row * self.width * self.channels + col * self.channels + channel

    def at(self, row: int, col: int, channel: int) -> int:
        return int(self._data.reshape(-1)[self.index(row, col, channel)])

    def tobytes(self) -> bytes:
        return self._data.tobytes()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return self._data.shape == other._data.shape and np.array_equal(self._data, other._data)

    def __repr__(self) -> str:
        return f"PixelBuffer(width={self.width}, height={self.height}, channels={self.channels})"


@dataclass(frozen=True)
class Artifact:
    """A pixel buffer together with the path it is read from or written to."""

    path: str
    buffer: PixelBuffer


__all__ = ["PixelBuffer", "Artifact"]
