"""
Pytest configuration and shared fixtures for Picture Processor tests.

This module provides shared test fixtures and configuration
used across multiple test modules.
"""

import pytest

from PP_Libs.PictureLib.picture import Picture


@pytest.fixture
def sample_rgb_colors():
    """
    Provide a list of sample RGB color tuples for testing.

    Returns:
        List of (R, G, B) tuples with common test colors
    """
    return [
        (255, 0, 0),      # Red
        (0, 255, 0),      # Green
        (0, 0, 255),      # Blue
        (255, 255, 255),  # White
        (0, 0, 0),        # Black
        (128, 128, 128),  # Gray
    ]


def _make_picture(width, height):
    """Build a picture whose every pixel is distinct and position dependent."""
    picture = Picture(width, height)
    for y in range(height):
        for x in range(width):
            picture.set_pixel(x, y, ((x * 37 + y * 11) % 256, (x * 5 + y * 53) % 256, (x + y * 7) % 256))
    return picture


@pytest.fixture
def picture_factory():
    """Provide a builder for patterned pictures of any size."""
    return _make_picture


@pytest.fixture
def patterned_picture():
    """A 5x4 picture with distinct pixels, so geometry mistakes show up."""
    return _make_picture(5, 4)


@pytest.fixture
def rgbw_picture():
    """2x2 picture: red, green / blue, white in raster order."""
    picture = Picture(2, 2)
    picture.set_pixel(0, 0, (255, 0, 0))
    picture.set_pixel(1, 0, (0, 255, 0))
    picture.set_pixel(0, 1, (0, 0, 255))
    picture.set_pixel(1, 1, (255, 255, 255))
    return picture
