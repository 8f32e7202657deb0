"""Error kinds raised across poolforge."""
from __future__ import annotations


class PoolforgeError(Exception):
    """Base class for all poolforge errors."""


class InvalidArguments(PoolforgeError):
    """Command-line arguments have the wrong arity or format."""


class DecodeFailure(PoolforgeError):
    """The image could not be decoded into pixel data."""


class EncodeFailure(PoolforgeError):
    """The encoder failed while writing an image."""


class InvalidParameter(PoolforgeError, ValueError):
    """A pooling parameter or input buffer is out of the valid range."""


class EncodeNoOp(UserWarning):
    """The output extension is not recognised, so nothing was written."""


__all__ = [
    "PoolforgeError",
    "InvalidArguments",
    "DecodeFailure",
    "EncodeFailure",
    "InvalidParameter",
    "EncodeNoOp",
]
