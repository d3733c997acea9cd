"""
Picture data models for Picture Processor.

This module defines the value types shared by the picture buffer, the
transforms and the codec.

Classes:
    Color: Immutable RGB triple with 8-bit channels
    FlipDirection: Axis selector for the flip transform

Functions:
    is_int_value: Integer check shared by channel, dimension and angle validation

Type Aliases:
    RgbColor: A tuple of 3 integers representing RGB color values (0-255)
"""

from dataclasses import dataclass
from enum import Enum
import numbers
from typing import Any, Sequence, Tuple

from PP_Libs.constants import CHANNEL_COUNT, MAX_CHANNEL_VALUE, MIN_CHANNEL_VALUE
from PP_Libs.PictureLib.picture_errors import InvalidArgumentError

RgbColor = Tuple[int, int, int]


def is_int_value(value: Any) -> bool:
    """True for int and numpy integer scalars. bool is an int subclass but never counts."""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


@dataclass(frozen=True)
class Color:
    """An RGB color value.

    Attributes:
        red: Red channel (0-255)
        green: Green channel (0-255)
        blue: Blue channel (0-255)
    """
    red: int
    green: int
    blue: int

    def __post_init__(self):
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if not is_int_value(value):
                raise InvalidArgumentError(
                    f"{name} channel must be an int, got {type(value).__name__}"
                )
            if not (MIN_CHANNEL_VALUE <= value <= MAX_CHANNEL_VALUE):
                raise InvalidArgumentError(
                    f"{name} channel must be {MIN_CHANNEL_VALUE}-{MAX_CHANNEL_VALUE}, got {value}"
                )
            object.__setattr__(self, name, int(value))

    def as_tuple(self) -> RgbColor:
        return self.red, self.green, self.blue

    def to_rgb_int(self) -> int:
        """Pack the channels as 0xRRGGBB."""
        return (self.red << 16) | (self.green << 8) | self.blue

    @classmethod
    def from_rgb_int(cls, value: int) -> "Color":
        """Unpack a 0xRRGGBB integer. Bits above the low 24 are ignored."""
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    @classmethod
    def coerce(cls, value: Any) -> "Color":
        """
        Convert a Color or an (r, g, b) sequence to a Color.

        Raises:
            InvalidArgumentError: If value is neither, or a channel is invalid
        """
        if isinstance(value, Color):
            return value
        if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
            if len(value) != CHANNEL_COUNT:
                raise InvalidArgumentError(
                    f"Expected {CHANNEL_COUNT} channels, got {len(value)}"
                )
            return cls(*value)
        raise InvalidArgumentError(f"Cannot convert {type(value).__name__} to Color")

    def __str__(self) -> str:
        return f"({self.red},{self.green},{self.blue})"


Color.BLACK = Color(0, 0, 0)
Color.WHITE = Color(MAX_CHANNEL_VALUE, MAX_CHANNEL_VALUE, MAX_CHANNEL_VALUE)


class FlipDirection(Enum):
    """Axis to mirror a picture across."""

    HORIZONTAL = "H"
    VERTICAL = "V"

    @classmethod
    def parse(cls, value: Any) -> "FlipDirection":
        """
        Parse a flip direction.

        Accepts a FlipDirection, 'H'/'V' or 'horizontal'/'vertical'
        (case-insensitive).

        Raises:
            InvalidArgumentError: If value names no known direction
        """
        if isinstance(value, FlipDirection):
            return value

        text = str(value).strip().upper()
        for direction in cls:
            if text in (direction.value, direction.name):
                return direction

        raise InvalidArgumentError(
            f"Invalid flip direction: {value!r}. Must be 'H', 'V', 'horizontal' or 'vertical'"
        )
