"""
Transform variants for Picture Processor.

Each transform kind is a small frozen dataclass carrying its own typed
parameters. A transform is applied to a sequence of source pictures: blend
consumes all of them, every other kind consumes exactly one.

Example:
    >>> transform = RotateTransform(angle=180)
    >>> result = transform.apply([picture])
    >>> transform.to_dict()
    {'kind': 'rotate', 'angle': 180}

Classes:
    TransformKind: The six supported transform kinds
    InvertTransform, GrayscaleTransform, RotateTransform,
    FlipTransform, BlendTransform, BlurTransform: Transform variants

Functions:
    transform_from_dict: Rebuild a transform from its dict form
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Sequence, Union

from PP_Libs.constants import (
    COMMAND_BLEND,
    COMMAND_BLUR,
    COMMAND_FLIP,
    COMMAND_GRAYSCALE,
    COMMAND_INVERT,
    COMMAND_ROTATE,
    FIELD_ANGLE,
    FIELD_DIRECTION,
    FIELD_KIND,
    QUARTER_TURN_DEGREES,
)
from PP_Libs.PictureLib.picture import Picture, blend_pictures
from PP_Libs.PictureLib.picture_errors import EmptyInputError, InvalidArgumentError
from PP_Libs.PictureLib.picture_models import FlipDirection, is_int_value


class TransformKind(Enum):
    INVERT = COMMAND_INVERT
    GRAYSCALE = COMMAND_GRAYSCALE
    ROTATE = COMMAND_ROTATE
    FLIP = COMMAND_FLIP
    BLEND = COMMAND_BLEND
    BLUR = COMMAND_BLUR


class _SingleSourceTransform:
    """Shared behaviour for transforms that read exactly one picture."""

    kind: TransformKind

    def apply(self, pictures: Sequence[Picture]) -> Picture:
        """
        Apply the transform to the single picture in pictures.

        Raises:
            EmptyInputError: If pictures is empty
            InvalidArgumentError: If more than one picture is given
        """
        if not pictures:
            raise EmptyInputError(f"{self.kind.value} requires one input picture")
        if len(pictures) > 1:
            raise InvalidArgumentError(
                f"{self.kind.value} takes one input picture, got {len(pictures)}"
            )
        return self._apply_one(pictures[0])

    def _apply_one(self, picture: Picture) -> Picture:
        raise NotImplementedError

    def to_dict(self) -> Dict[str, Any]:
        return {FIELD_KIND: self.kind.value}


@dataclass(frozen=True)
class InvertTransform(_SingleSourceTransform):
    kind = TransformKind.INVERT

    def _apply_one(self, picture: Picture) -> Picture:
        return picture.invert()


@dataclass(frozen=True)
class GrayscaleTransform(_SingleSourceTransform):
    kind = TransformKind.GRAYSCALE

    def _apply_one(self, picture: Picture) -> Picture:
        return picture.grayscale()


@dataclass(frozen=True)
class RotateTransform(_SingleSourceTransform):
    """Clockwise rotation by a non-negative multiple of 90 degrees."""

    angle: int = QUARTER_TURN_DEGREES
    kind = TransformKind.ROTATE

    def __post_init__(self):
        if not is_int_value(self.angle):
            raise InvalidArgumentError(f"angle must be an int, got {type(self.angle).__name__}")
        if self.angle < 0 or self.angle % QUARTER_TURN_DEGREES != 0:
            raise InvalidArgumentError(
                f"angle must be a non-negative multiple of {QUARTER_TURN_DEGREES}, got {self.angle}"
            )
        object.__setattr__(self, "angle", int(self.angle))

    def _apply_one(self, picture: Picture) -> Picture:
        return picture.rotate(self.angle)

    def to_dict(self) -> Dict[str, Any]:
        return {FIELD_KIND: self.kind.value, FIELD_ANGLE: self.angle}


@dataclass(frozen=True)
class FlipTransform(_SingleSourceTransform):
    direction: FlipDirection = FlipDirection.HORIZONTAL
    kind = TransformKind.FLIP

    def __post_init__(self):
        # Normalise 'H' / 'vertical' etc. to the enum
        object.__setattr__(self, "direction", FlipDirection.parse(self.direction))

    def _apply_one(self, picture: Picture) -> Picture:
        return picture.flip(self.direction)

    def to_dict(self) -> Dict[str, Any]:
        return {FIELD_KIND: self.kind.value, FIELD_DIRECTION: self.direction.value}


@dataclass(frozen=True)
class BlurTransform(_SingleSourceTransform):
    kind = TransformKind.BLUR

    def _apply_one(self, picture: Picture) -> Picture:
        return picture.blur()


@dataclass(frozen=True)
class BlendTransform:
    """Average all source pictures over their shared area."""

    kind = TransformKind.BLEND

    def apply(self, pictures: Sequence[Picture]) -> Picture:
        return blend_pictures(pictures)

    def to_dict(self) -> Dict[str, Any]:
        return {FIELD_KIND: self.kind.value}


Transform = Union[
    InvertTransform,
    GrayscaleTransform,
    RotateTransform,
    FlipTransform,
    BlendTransform,
    BlurTransform,
]


def transform_from_dict(data: Dict[str, Any]) -> Transform:
    """
    Rebuild a transform from the dict produced by its to_dict().

    Raises:
        InvalidArgumentError: If the kind is missing or unknown
    """
    kind_value = str(data.get(FIELD_KIND, "")).strip().lower()
    try:
        kind = TransformKind(kind_value)
    except ValueError:
        valid = ", ".join(k.value for k in TransformKind)
        raise InvalidArgumentError(
            f"Unknown transform kind: {kind_value!r}. Valid kinds: {valid}"
        ) from None

    if kind is TransformKind.INVERT:
        return InvertTransform()
    elif kind is TransformKind.GRAYSCALE:
        return GrayscaleTransform()
    elif kind is TransformKind.ROTATE:
        return RotateTransform(data.get(FIELD_ANGLE, QUARTER_TURN_DEGREES))
    elif kind is TransformKind.FLIP:
        return FlipTransform(data.get(FIELD_DIRECTION, FlipDirection.HORIZONTAL))
    elif kind is TransformKind.BLEND:
        return BlendTransform()
    else:
        return BlurTransform()
