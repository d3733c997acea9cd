"""
Picture codec for Picture Processor.

Translates between image files on disk and Picture buffers using Pillow for
file formats and numpy for the pixel hand-off.

Classes:
    CodecConfig: Options controlling how pictures are written

Functions:
    decode_picture: Load a Picture from an image file
    encode_picture: Write a Picture to an image file
    config_for_path: CodecConfig whose format follows a destination extension
    get_supported_formats: List of readable/writable file extensions
    is_supported_format: Check a path's extension
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
import logging

import numpy as np

from PP_Libs.constants import (
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_PICTURE_MODE,
    SUPPORTED_STANDARD_IMAGES,
)
from PP_Libs.pillow_compat import DecompressionBombError, Image, UnidentifiedImageError
from PP_Libs.PictureLib.picture import Picture
from PP_Libs.PictureLib.picture_errors import DecodeError, EncodeError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def get_supported_formats() -> List[str]:
    """
    Get list of supported image formats.

    Returns:
        Sorted list of file extensions (e.g., ['.bmp', '.gif', ...])
    """
    return sorted(SUPPORTED_STANDARD_IMAGES)


def is_supported_format(file_path: PathLike) -> bool:
    """Return True if the file path has a supported image extension."""
    return Path(file_path).suffix.lower() in SUPPORTED_STANDARD_IMAGES


@dataclass
class CodecConfig:
    """Configuration for writing pictures.

    Attributes:
        save_format: Image format to save as (PNG, JPG, BMP, etc., default: PNG)
        quality: JPEG quality 1-100 (default: 95, only for JPG)
        create_directories: Create missing parent directories (default: True)
        overwrite: Replace an existing destination file (default: True)
    """
    save_format: str = DEFAULT_OUTPUT_FORMAT
    quality: int = 95
    create_directories: bool = True
    overwrite: bool = True

    def get_save_kwargs(self) -> Dict[str, Any]:
        """Get PIL Image.save() kwargs based on format."""
        # PIL uses "JPEG" not "JPG"
        save_format = self.save_format.upper()
        if save_format == "JPG":
            save_format = "JPEG"

        kwargs: Dict[str, Any] = {"format": save_format}

        if save_format == "JPEG":
            kwargs["quality"] = max(1, min(100, self.quality))

        return kwargs


def config_for_path(path: PathLike, **options: Any) -> CodecConfig:
    """
    Build a CodecConfig whose save format matches the destination extension.

    Extensions outside the supported set (or no extension) fall back to PNG.

    Args:
        path: Destination file path
        **options: Other CodecConfig fields (quality, overwrite, ...)

    Example:
        >>> config_for_path("out.jpg").save_format
        'JPEG'
    """
    ext = Path(path).suffix.lower()
    save_format = DEFAULT_OUTPUT_FORMAT
    if ext in SUPPORTED_STANDARD_IMAGES:
        save_format = Image.registered_extensions().get(ext, DEFAULT_OUTPUT_FORMAT)
    return CodecConfig(save_format=save_format, **options)


def decode_picture(path: PathLike) -> Picture:
    """
    Load a picture from disk.

    Any image mode is converted to RGB; alpha is discarded.

    Args:
        path: Path to the image file

    Returns:
        Picture holding the decoded pixels

    Raises:
        DecodeError: If the file is missing, not a file, has an unsupported
                     extension, cannot be decoded, or exceeds
                     Pillow's decompression-bomb limit
    """
    file_path = Path(path)

    if not file_path.exists():
        raise DecodeError(f"Image file not found: {file_path}", file_path)

    if not file_path.is_file():
        raise DecodeError(f"Path is not a file: {file_path}", file_path)

    if not is_supported_format(file_path):
        raise DecodeError(
            f"Unsupported image format '{file_path.suffix}'. "
            f"Supported: {', '.join(get_supported_formats())}",
            file_path,
        )

    try:
        with Image.open(file_path) as img:
            rgb = img.convert(DEFAULT_PICTURE_MODE)
            pixels = np.asarray(rgb, dtype=np.uint8)
    except (OSError, UnidentifiedImageError, DecompressionBombError, ValueError) as e:
        raise DecodeError(f"Failed to load image from {file_path}: {e}", file_path) from e

    logger.debug(f"Decoded {file_path} ({pixels.shape[1]}x{pixels.shape[0]})")
    return Picture.from_array(pixels)


def encode_picture(
    picture: Picture,
    path: PathLike,
    config: Optional[CodecConfig] = None,
) -> Path:
    """
    Write a picture to disk.

    Args:
        picture: Picture to save
        path: Destination file path
        config: Write options (default: PNG, overwrite, create directories)

    Returns:
        Path where the picture was saved

    Raises:
        EncodeError: If the destination exists and overwrite is False, or the
                     file cannot be written
    """
    if not isinstance(picture, Picture):
        raise TypeError(f"Expected Picture, got {type(picture)}")

    config = config or CodecConfig()
    output_file = Path(path)

    if output_file.exists() and not config.overwrite:
        raise EncodeError(
            f"Output file already exists: {output_file}. Set overwrite=True to replace.",
            output_file,
        )

    try:
        if config.create_directories:
            output_file.parent.mkdir(parents=True, exist_ok=True)
        image = Image.fromarray(picture.to_array())
        image.save(output_file, **config.get_save_kwargs())
    except (OSError, ValueError, KeyError, SystemError) as e:
        raise EncodeError(f"Failed to save image to {output_file}: {e}", output_file) from e

    logger.debug(f"Encoded {picture!r} to {output_file}")
    return output_file
