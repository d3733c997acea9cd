"""
Picture: an in-memory RGB pixel buffer and its transformations.

A Picture owns a row-major grid of Color values. Pixel access is bounds
checked, equality and hashing work on content, and every transform returns a
freshly allocated Picture, leaving the receiver untouched.

Example:
    >>> pic = Picture.from_file("photo.png")
    >>> pic.rotate(90).flip("H").save_as("out.png")
"""

from typing import Any, Callable, Iterator, List, Sequence, Tuple

import numpy as np

from PP_Libs.constants import (
    CHANNEL_COUNT,
    FULL_TURN_QUARTERS,
    HASH_MASK,
    HASH_MULTIPLIER,
    MAX_CHANNEL_VALUE,
    MIN_CHANNEL_VALUE,
    NEIGHBOURHOOD_PIXELS,
    NEIGHBOURHOOD_RADIUS,
    QUARTER_TURN_DEGREES,
    ROW_SEPARATOR,
)
from PP_Libs.PictureLib.picture_errors import (
    EmptyInputError,
    InvalidArgumentError,
    InvalidDimensionError,
    OutOfBoundsError,
)
from PP_Libs.PictureLib.picture_models import Color, FlipDirection, is_int_value


class Picture:
    """
    A width x height grid of RGB pixels.

    Coordinates are (x, y) with the origin at the top-left corner.
    """

    def __init__(self, width: int, height: int):
        """
        Create a blank (black) picture.

        Raises:
            InvalidDimensionError: If width or height is negative or not an int
        """
        for name, value in (("width", width), ("height", height)):
            if not is_int_value(value):
                raise InvalidDimensionError(f"{name} must be an int, got {type(value).__name__}")
            if value < 0:
                raise InvalidDimensionError(f"{name} must be >= 0, got {value}")

        width, height = int(width), int(height)
        self._width = width
        self._height = height
        self._rows: List[List[Color]] = [
            [Color.BLACK] * width for _ in range(height)
        ]

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_file(cls, path) -> "Picture":
        """
        Load a picture from an image file.

        Raises:
            DecodeError: If the file is missing, unreadable or not a supported format
        """
        from PP_Libs.PictureLib.picture_codec import decode_picture

        return decode_picture(path)

    @classmethod
    def from_array(cls, array: Any) -> "Picture":
        """
        Build a picture from an (height, width, 3) array of channel values.

        Raises:
            InvalidDimensionError: If the array is not (H, W, 3)
            InvalidArgumentError: If a value lies outside 0-255
        """
        arr = np.asarray(array)
        if arr.ndim != 3 or arr.shape[2] != CHANNEL_COUNT:
            raise InvalidDimensionError(
                f"Expected an array of shape (height, width, {CHANNEL_COUNT}), got {arr.shape}"
            )
        if arr.size and (arr.min() < MIN_CHANNEL_VALUE or arr.max() > MAX_CHANNEL_VALUE):
            raise InvalidArgumentError(
                f"Channel values must be {MIN_CHANNEL_VALUE}-{MAX_CHANNEL_VALUE}"
            )

        height, width = int(arr.shape[0]), int(arr.shape[1])
        picture = cls(width, height)
        for y, row in enumerate(arr.astype(np.int64).tolist()):
            picture._rows[y] = [Color(r, g, b) for r, g, b in row]
        return picture

    def to_array(self) -> np.ndarray:
        """Return the pixels as a (height, width, 3) uint8 array."""
        arr = np.zeros((self._height, self._width, CHANNEL_COUNT), dtype=np.uint8)
        for y, row in enumerate(self._rows):
            for x, color in enumerate(row):
                arr[y, x] = color.as_tuple()
        return arr

    def save_as(self, path, config=None):
        """
        Write the picture to disk (PNG unless configured otherwise).

        Returns:
            Path the picture was written to

        Raises:
            EncodeError: If the destination cannot be written
        """
        from PP_Libs.PictureLib.picture_codec import encode_picture

        return encode_picture(self, path, config)

    def copy(self) -> "Picture":
        picture = Picture(self._width, self._height)
        picture._rows = [list(row) for row in self._rows]
        return picture

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> Tuple[int, int]:
        return self._width, self._height

    def contains(self, x: int, y: int) -> bool:
        """Test if the point (x, y) lies within the boundaries of this picture."""
        return 0 <= x < self._width and 0 <= y < self._height

    def get_pixel(self, x: int, y: int) -> Color:
        """
        Return the color at (x, y).

        Raises:
            OutOfBoundsError: If (x, y) is outside the picture
        """
        if not self.contains(x, y):
            raise OutOfBoundsError(x, y, self._width, self._height)
        return self._rows[y][x]

    def set_pixel(self, x: int, y: int, color: Any) -> None:
        """
        Overwrite the color at (x, y). Accepts a Color or an (r, g, b) sequence.

        Raises:
            OutOfBoundsError: If (x, y) is outside the picture
            InvalidArgumentError: If color is not a valid RGB value
        """
        if not self.contains(x, y):
            raise OutOfBoundsError(x, y, self._width, self._height)
        self._rows[y][x] = Color.coerce(color)

    def iter_pixels(self) -> Iterator[Tuple[int, int, Color]]:
        """Yield (x, y, color) in raster order."""
        for y, row in enumerate(self._rows):
            for x, color in enumerate(row):
                yield x, y, color

    # ------------------------------------------------------------------
    # Equality, hashing, text
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Picture):
            return NotImplemented
        if self.size != other.size:
            return False
        return self._rows == other._rows

    def __hash__(self) -> int:
        return self.content_hash()

    def content_hash(self) -> int:
        """Polynomial hash over the packed pixel values in raster order."""
        h = 0
        for _, _, color in self.iter_pixels():
            h = (h * HASH_MULTIPLIER + color.to_rgb_int()) & HASH_MASK
        return h

    def __str__(self) -> str:
        return ROW_SEPARATOR.join(
            "".join(str(color) for color in row) for row in self._rows
        )

    def __repr__(self) -> str:
        return f"Picture(width={self._width}, height={self._height})"

    # ------------------------------------------------------------------
    # Transforms
    # ------------------------------------------------------------------

    def _map_colors(self, func: Callable[[Color], Color]) -> "Picture":
        picture = Picture(self._width, self._height)
        picture._rows = [[func(color) for color in row] for row in self._rows]
        return picture

    def invert(self) -> "Picture":
        """Replace every channel c with 255 - c."""
        return self._map_colors(
            lambda c: Color(
                MAX_CHANNEL_VALUE - c.red,
                MAX_CHANNEL_VALUE - c.green,
                MAX_CHANNEL_VALUE - c.blue,
            )
        )

    def grayscale(self) -> "Picture":
        """Set every channel to the truncated mean of the three channels."""
        def to_gray(c: Color) -> Color:
            average = (c.red + c.green + c.blue) // 3
            return Color(average, average, average)

        return self._map_colors(to_gray)

    def rotate(self, angle: int) -> "Picture":
        """
        Rotate clockwise by a multiple of 90 degrees.

        Raises:
            InvalidArgumentError: If angle is negative or not a multiple of 90
        """
        if not is_int_value(angle):
            raise InvalidArgumentError(f"angle must be an int, got {type(angle).__name__}")
        if angle < 0 or angle % QUARTER_TURN_DEGREES != 0:
            raise InvalidArgumentError(
                f"angle must be a non-negative multiple of {QUARTER_TURN_DEGREES}, got {angle}"
            )
        angle = int(angle)

        picture = self.copy()
        for _ in range((angle // QUARTER_TURN_DEGREES) % FULL_TURN_QUARTERS):
            picture = picture._rotate_quarter_turn()
        return picture

    def _rotate_quarter_turn(self) -> "Picture":
        # (x, y) -> (H - 1 - y, x) in an H x W destination
        rotated = Picture(self._height, self._width)
        for x, y, color in self.iter_pixels():
            rotated._rows[x][self._height - 1 - y] = color
        return rotated

    def flip(self, direction: Any) -> "Picture":
        """
        Mirror the picture.

        HORIZONTAL maps (x, y) to (W - 1 - x, y); VERTICAL maps (x, y) to
        (x, H - 1 - y).

        Raises:
            InvalidArgumentError: If direction is not recognised
        """
        direction = FlipDirection.parse(direction)
        flipped = Picture(self._width, self._height)
        if direction is FlipDirection.HORIZONTAL:
            flipped._rows = [list(reversed(row)) for row in self._rows]
        else:
            flipped._rows = [list(row) for row in reversed(self._rows)]
        return flipped

    def blend(self, others: Sequence["Picture"] = ()) -> "Picture":
        """
        Average this picture with every picture in others.

        The result covers only the area shared by all inputs:
        (min width, min height). Channel averages use integer truncation.
        """
        pictures = [self] + list(others)
        min_width = min(p.width for p in pictures)
        min_height = min(p.height for p in pictures)
        count = len(pictures)

        blended = Picture(min_width, min_height)
        for y in range(min_height):
            row = []
            for x in range(min_width):
                red = green = blue = 0
                for p in pictures:
                    color = p._rows[y][x]
                    red += color.red
                    green += color.green
                    blue += color.blue
                row.append(Color(red // count, green // count, blue // count))
            blended._rows[y] = row
        return blended

    def blur(self) -> "Picture":
        """
        3x3 box blur.

        Pixels on the border (any edge neighbour out of bounds) are copied
        unchanged.
        """
        blurred = self.copy()
        for x, y, _ in self.iter_pixels():
            if self._has_neighbourhood(x, y):
                blurred._rows[y][x] = self._average_of_neighbourhood(x, y)
        return blurred

    def _has_neighbourhood(self, x: int, y: int) -> bool:
        return (
            self.contains(x - 1, y)
            and self.contains(x + 1, y)
            and self.contains(x, y - 1)
            and self.contains(x, y + 1)
        )

    def _average_of_neighbourhood(self, x: int, y: int) -> Color:
        red = green = blue = 0
        r = NEIGHBOURHOOD_RADIUS
        for j in range(y - r, y + r + 1):
            for i in range(x - r, x + r + 1):
                color = self._rows[j][i]
                red += color.red
                green += color.green
                blue += color.blue
        return Color(
            red // NEIGHBOURHOOD_PIXELS,
            green // NEIGHBOURHOOD_PIXELS,
            blue // NEIGHBOURHOOD_PIXELS,
        )


def blend_pictures(pictures: Sequence[Picture]) -> Picture:
    """
    Blend a sequence of pictures; the first one acts as the receiver.

    Raises:
        EmptyInputError: If pictures is empty
    """
    pictures = list(pictures)
    if not pictures:
        raise EmptyInputError("blend requires at least one picture")
    return pictures[0].blend(pictures[1:])
