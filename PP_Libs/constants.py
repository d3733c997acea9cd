"""
Constants and configuration values for Picture Processor.

This module centralizes all constant values, magic numbers, and
configuration settings used throughout the application.
"""

# Channel bounds
MIN_CHANNEL_VALUE = 0
MAX_CHANNEL_VALUE = 255
CHANNEL_COUNT = 3

# Rotation
QUARTER_TURN_DEGREES = 90
FULL_TURN_QUARTERS = 4

# Blur neighbourhood (3x3 box)
NEIGHBOURHOOD_RADIUS = 1
NEIGHBOURHOOD_PIXELS = 9

# Content hash
HASH_MULTIPLIER = 31
HASH_MASK = 0xFFFFFFFF

# Text dump
ROW_SEPARATOR = "\n"

# File naming
DEFAULT_OUTPUT_FORMAT = "PNG"
DEFAULT_PICTURE_MODE = "RGB"

# Supported file formats
SUPPORTED_STANDARD_IMAGES = {".png", ".jpg", ".jpeg", ".bmp", ".gif", ".tiff", ".tif", ".webp", ".ppm"}

# Command names
COMMAND_INVERT = "invert"
COMMAND_GRAYSCALE = "grayscale"
COMMAND_ROTATE = "rotate"
COMMAND_FLIP = "flip"
COMMAND_BLEND = "blend"
COMMAND_BLUR = "blur"

# Transform dict field names
FIELD_KIND = "kind"
FIELD_ANGLE = "angle"
FIELD_DIRECTION = "direction"

# CLI exit codes
EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
