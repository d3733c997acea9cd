"""
Error types raised by the picture library.

Every error derives from PictureError so callers (the CLI in particular) can
catch the whole family at once. Each also derives from the closest builtin
exception, so existing `except ValueError` / `except OSError` code keeps working.
"""

from pathlib import Path
from typing import Optional, Union


class PictureError(Exception):
    """Base class for all picture library errors."""


class InvalidDimensionError(PictureError, ValueError):
    """Raised when a picture is constructed with a negative or non-int size."""


class OutOfBoundsError(PictureError, IndexError):
    """Raised when a pixel coordinate lies outside the picture."""

    def __init__(self, x: int, y: int, width: int, height: int):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(
            f"Pixel ({x}, {y}) is outside a {width}x{height} picture"
        )


class InvalidArgumentError(PictureError, ValueError):
    """Raised for bad transform parameters (angle, direction, channel value)."""


class EmptyInputError(PictureError, ValueError):
    """Raised when blending an empty sequence of pictures."""


class _PathError(PictureError, OSError):
    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else None
        super().__init__(message)


class DecodeError(_PathError):
    """Raised when a source file cannot be read as a picture."""


class EncodeError(_PathError):
    """Raised when a picture cannot be written to its destination."""
