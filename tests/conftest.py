"""
Pytest configuration and fixtures for PyFastResize test suite.

This file contains shared fixtures, test configuration, and utilities
used across the test suite.
"""
import os
import sys

import numpy as np
import pytest


def pytest_configure(config):
    """Configure pytest with custom settings."""
    # Add the package root to Python path for testing
    package_root = os.path.dirname(os.path.dirname(__file__))
    if package_root not in sys.path:
        sys.path.insert(0, package_root)

    for marker in ("unit", "integration", "importtest", "slow", "taichi"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers."""
    for item in items:
        # Taichi compiles kernels on first use
        if "taichi" in item.keywords:
            item.add_marker("slow")

        # Mark import tests for easy selection
        if "import" in item.name.lower() or "test_imports.py" in str(item.fspath):
            item.add_marker("importtest")


class ImageDataManager:
    """Helper class for creating test rasters and image files."""

    @staticmethod
    def random_pixels(width=23, height=17, seed=42):
        """Random RGBA8 pixels of shape (height, width, 4)."""
        rng = np.random.default_rng(seed)
        return rng.integers(0, 256, size=(height, width, 4), dtype=np.uint8)

    @staticmethod
    def gradient_pixels(width=32, height=16):
        """Horizontal gray ramp, fully opaque."""
        ramp = np.linspace(0, 255, width).round().astype(np.uint8)
        pixels = np.empty((height, width, 4), dtype=np.uint8)
        pixels[..., :3] = ramp[None, :, None]
        pixels[..., 3] = 255
        return pixels

    @staticmethod
    def write_image(path, pixels, fmt=None):
        """Write pixels to an image file with Pillow and return the path."""
        from PIL import Image

        Image.fromarray(np.asarray(pixels, dtype=np.uint8)).save(path, format=fmt)
        return path


@pytest.fixture
def image_data_manager():
    """Provide access to test image creation utilities."""
    return ImageDataManager()


@pytest.fixture
def random_raster():
    """Provide a small random RGBA raster."""
    from pyfastresize.rastermanip import RasterImage

    return RasterImage(ImageDataManager.random_pixels())


@pytest.fixture
def png_file(tmp_path):
    """Provide a 20x10 gradient PNG on disk."""
    return ImageDataManager.write_image(
        tmp_path / "input.png", ImageDataManager.gradient_pixels(20, 10)
    )


@pytest.fixture
def skip_if_no_taichi():
    """Skip test if Taichi is not available."""
    try:
        import taichi  # noqa: F401
    except ImportError:
        pytest.skip("Taichi not available")
    return True
