"""poolforge: min, max and average block pooling for raster images."""

__version__ = "0.1.0"
