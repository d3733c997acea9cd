"""
PictureLib - Core picture functionality

This module provides the Picture pixel buffer, its value types and errors,
and the Pillow-backed codec for the Picture Processor project.
"""

from PP_Libs.PictureLib.picture_models import Color, FlipDirection, RgbColor
from PP_Libs.PictureLib.picture_errors import (
    PictureError,
    InvalidDimensionError,
    OutOfBoundsError,
    InvalidArgumentError,
    EmptyInputError,
    DecodeError,
    EncodeError,
)
from PP_Libs.PictureLib.picture import Picture, blend_pictures
from PP_Libs.PictureLib.picture_codec import (
    CodecConfig,
    decode_picture,
    encode_picture,
    config_for_path,
    get_supported_formats,
    is_supported_format,
)

__all__ = [
    "Color",
    "FlipDirection",
    "RgbColor",
    "PictureError",
    "InvalidDimensionError",
    "OutOfBoundsError",
    "InvalidArgumentError",
    "EmptyInputError",
    "DecodeError",
    "EncodeError",
    "Picture",
    "blend_pictures",
    "CodecConfig",
    "decode_picture",
    "encode_picture",
    "config_for_path",
    "get_supported_formats",
    "is_supported_format",
]
