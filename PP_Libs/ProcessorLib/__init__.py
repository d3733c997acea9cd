"""
ProcessorLib - Transform dispatch for Picture Processor

This module provides the typed transform variants, the command registry
that maps command names to them, and the command-line entry point.
"""

from PP_Libs.ProcessorLib.transform_ops import (
    TransformKind,
    InvertTransform,
    GrayscaleTransform,
    RotateTransform,
    FlipTransform,
    BlendTransform,
    BlurTransform,
    transform_from_dict,
)
from PP_Libs.ProcessorLib.transform_registry import (
    TransformRegistry,
    get_default_registry,
    register_default_commands,
)

__all__ = [
    "TransformKind",
    "InvertTransform",
    "GrayscaleTransform",
    "RotateTransform",
    "FlipTransform",
    "BlendTransform",
    "BlurTransform",
    "transform_from_dict",
    "TransformRegistry",
    "get_default_registry",
    "register_default_commands",
]
