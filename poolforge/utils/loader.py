"""Image loading and saving utilities using Pillow, with NumPy arrays.

All pooling happens on :class:`PixelBuffer` objects. These helpers only
convert between Pillow images and 8-bit buffers for IO, keeping the number
of channels the file was stored with.
"""
from __future__ import annotations

import logging
import warnings
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image, UnidentifiedImageError

from ..errors import DecodeFailure, EncodeFailure, EncodeNoOp
from .buffer import Artifact, PixelBuffer
from .paths import extension_of

logger = logging.getLogger(__name__)

JPEG_QUALITY = 100

# Extension (case-sensitive) -> Pillow format name
ENCODERS = {
    ".jpg": "JPEG",
    ".jpeg": "JPEG",
    ".png": "PNG",
}

_NATIVE_MODES = ("L", "LA", "RGB", "RGBA")


def _to_native_mode(im: Image.Image) -> Image.Image:
    """Convert ``im`` to an 8-bit mode with 1 to 4 channels."""
    if im.mode in _NATIVE_MODES:
        return im
    if im.mode in ("P", "PA"):
        has_alpha = im.mode == "PA" or "transparency" in im.info
        return im.convert("RGBA" if has_alpha else "RGB")
    if im.mode == "1":
        return im.convert("L")
    return im.convert("RGB")


def load_image(path: Union[str, Path]) -> PixelBuffer:
    """Load an image file into a :class:`PixelBuffer`.

    Parameters
    ----------
    path : str | Path
        Path to an image supported by Pillow.

    Returns
    -------
    PixelBuffer
        Pixels as stored in the file: 1 (grey), 2 (grey+alpha), 3 (RGB) or
        4 (RGBA) channels.

    Raises
    ------
    DecodeFailure
        The file is missing, unreadable or not a decodable image.
    """
    p = Path(path)
    try:
        with Image.open(p) as im:
            im = _to_native_mode(im)
            arr = np.array(im, dtype=np.uint8)
    except (FileNotFoundError, UnidentifiedImageError, OSError, ValueError) as e:
        raise DecodeFailure(f"Failed to load image {p}: {e}") from e
    logger.debug("loaded %s (%s)", p, arr.shape)
    return PixelBuffer(arr)


def save_image(buffer: PixelBuffer, path: Union[str, Path]) -> bool:
    """Save a :class:`PixelBuffer` to an image file via Pillow.

    The format comes from the extension, matched case-sensitively:
    ``.jpg``/``.jpeg`` write JPEG at quality 100, ``.png`` writes PNG. Any
    other extension writes nothing and emits an :class:`EncodeNoOp` warning.

    Returns
    -------
    bool
        True when a file was written.
    """
    if not isinstance(buffer, PixelBuffer):
        raise TypeError("buffer must be a PixelBuffer")

    p = str(path)
    fmt = ENCODERS.get(extension_of(p))
    if fmt is None:
        warnings.warn(
            f"Unsupported output extension for {p!r}; nothing written",
            EncodeNoOp,
            stacklevel=2,
        )
        return False

    arr = buffer.array
    if buffer.channels == 1:
        arr = arr[:, :, 0]
    im = Image.fromarray(arr)
    if fmt == "JPEG" and im.mode in ("LA", "RGBA"):
        # JPEG has no alpha
        im = im.convert(im.mode[:-1])

    try:
        if fmt == "JPEG":
            im.save(p, format=fmt, quality=JPEG_QUALITY)
        else:
            im.save(p, format=fmt)
    except OSError as e:
        raise EncodeFailure(f"Failed to write image {p}: {e}") from e
    logger.debug("wrote %s (%s)", p, fmt)
    return True


def load_artifact(path: Union[str, Path]) -> Artifact:
    """Load ``path`` and pair it with its pixels."""
    return Artifact(str(path), load_image(path))


def write_artifact(artifact: Artifact) -> bool:
    return save_image(artifact.buffer, artifact.path)


__all__ = [
    "JPEG_QUALITY",
    "ENCODERS",
    "load_image",
    "save_image",
    "load_artifact",
    "write_artifact",
]
