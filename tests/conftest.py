"""
Pytest configuration and fixtures for the poolforge test suite.

Shared fixtures build small synthetic pixel buffers with known values and
write them to disk with Pillow.
"""
import os
import sys

import numpy as np
import pytest
from PIL import Image


def pytest_configure(config):
    """Configure pytest with custom settings."""
    # Add the package root to Python path for testing
    package_root = os.path.dirname(os.path.dirname(__file__))
    if package_root not in sys.path:
        sys.path.insert(0, package_root)


def pytest_collection_modifyitems(config, items):
    """Mark import tests for easy selection."""
    for item in items:
        if "test_imports.py" in str(item.fspath):
            item.add_marker("importtest")


@pytest.fixture
def quadrant_array():
    """4x4 RGB array whose 2x2 quadrants have hand-checked pooled values.

    Channel 0 quadrants: TL [10, 11, 12, 14], TR [0, 255, 255, 255],
    BL [1, 2, 3, 5], BR [100, 100, 100, 101]. Channel 1 is 255 - channel 0
    and channel 2 is constant 7.
    """
    red = np.array(
        [
            [10, 11, 0, 255],
            [12, 14, 255, 255],
            [1, 2, 100, 100],
            [3, 5, 100, 101],
        ],
        dtype=np.uint8,
    )
    green = 255 - red
    blue = np.full_like(red, 7)
    return np.stack([red, green, blue], axis=-1)


@pytest.fixture(scope="session")
def random_rgb_array():
    """Reproducible 9x7 RGB array (H x W)."""
    rng = np.random.default_rng(42)
    return rng.integers(0, 256, size=(9, 7, 3), dtype=np.uint8)


@pytest.fixture
def write_image(tmp_path):
    """Write a NumPy array to ``tmp_path / name`` with Pillow and return the path."""

    def _write(arr, name="photo.png"):
        path = tmp_path / name
        data = arr[:, :, 0] if arr.ndim == 3 and arr.shape[2] == 1 else arr
        Image.fromarray(data).save(path)
        return path

    return _write
