"""
Transform Command Registry.

This module provides a centralized registry mapping command names (as typed
on the command line) to transform factories. A factory turns the command's
textual parameters into a typed transform from transform_ops.

Classes:
    TransformRegistry: Registry for transform commands

Functions:
    get_default_registry: Get the global default registry (singleton)
    register_default_commands: Register the six built-in commands
"""

from typing import Any, Callable, Dict, List, Optional, Sequence
import logging

from PP_Libs.constants import (
    COMMAND_BLEND,
    COMMAND_BLUR,
    COMMAND_FLIP,
    COMMAND_GRAYSCALE,
    COMMAND_INVERT,
    COMMAND_ROTATE,
)
from PP_Libs.PictureLib.picture_errors import InvalidArgumentError
from PP_Libs.ProcessorLib.transform_ops import (
    BlendTransform,
    BlurTransform,
    FlipTransform,
    GrayscaleTransform,
    InvertTransform,
    RotateTransform,
    Transform,
)

logger = logging.getLogger(__name__)

# Type alias for factory function: textual params -> transform
TransformFactory = Callable[[Sequence[str]], Transform]


class TransformRegistry:
    """
    Registry for transform commands.

    Example:
        >>> registry = TransformRegistry()
        >>> registry.register("invert", lambda params: InvertTransform())
        >>> transform = registry.build("invert", [])
        >>> result = transform.apply([picture])
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._factories: Dict[str, TransformFactory] = {}
        self._metadata: Dict[str, Dict[str, Any]] = {}

    def register(
        self,
        command: str,
        factory: TransformFactory,
        description: str = "",
        param_names: Optional[List[str]] = None,
        min_sources: int = 1,
        max_sources: Optional[int] = 1,
    ) -> None:
        """
        Register a transform command.

        Args:
            command: Command name (e.g., "rotate")
            factory: Callable turning the textual params into a transform
            description: Human-readable description of the command
            param_names: Names of the positional params preceding the sources
            min_sources: Minimum number of source pictures
            max_sources: Maximum number of source pictures (None = unbounded)

        Raises:
            ValueError: If command is empty, factory is not callable, or the
                        source bounds are inconsistent
            RuntimeError: If command is already registered
        """
        command = str(command).strip().lower()

        if not command:
            raise ValueError("command cannot be empty")

        if not callable(factory):
            raise ValueError(f"factory must be callable, got {type(factory)}")

        if min_sources < 1 or (max_sources is not None and max_sources < min_sources):
            raise ValueError(
                f"Invalid source bounds: min_sources={min_sources}, max_sources={max_sources}"
            )

        if command in self._factories:
            raise RuntimeError(
                f"Command '{command}' is already registered."
            )

        self._factories[command] = factory
        self._metadata[command] = {
            "description": str(description),
            "param_names": list(param_names) if param_names else [],
            "min_sources": int(min_sources),
            "max_sources": max_sources,
        }

        logger.debug(f"Registered transform command: {command}")

    def get_factory(self, command: str) -> TransformFactory:
        """
        Get the factory for a command.

        Raises:
            KeyError: If command is not registered
        """
        command = str(command).strip().lower()

        if command not in self._factories:
            available = ", ".join(self.list_commands())
            raise KeyError(
                f"Unknown command '{command}'. Available commands: {available}"
            )

        return self._factories[command]

    def has_command(self, command: str) -> bool:
        return str(command).strip().lower() in self._factories

    def build(self, command: str, params: Sequence[str]) -> Transform:
        """
        Build a transform from a command and its textual params.

        Raises:
            KeyError: If command is not registered
            InvalidArgumentError: If the param count is wrong or a param is malformed
        """
        factory = self.get_factory(command)
        expected = self.get_metadata(command)["param_names"]
        if len(params) != len(expected):
            raise InvalidArgumentError(
                f"'{command}' expects {len(expected)} parameter(s) "
                f"({' '.join(expected) or 'none'}), got {len(params)}"
            )
        return factory(params)

    def list_commands(self) -> List[str]:
        """Sorted list of all registered command names."""
        return sorted(self._factories.keys())

    def get_metadata(self, command: str) -> Dict[str, Any]:
        """
        Get metadata for a command.

        Returns:
            Dictionary with description, param_names, min_sources, max_sources

        Raises:
            KeyError: If command is not registered
        """
        command = str(command).strip().lower()

        if command not in self._metadata:
            raise KeyError(f"No metadata for command: {command}")

        return dict(self._metadata[command])

    def usage(self, command: str) -> str:
        """One-line usage string, e.g. 'rotate angle src dst'."""
        meta = self.get_metadata(command)
        parts = [str(command).strip().lower()] + meta["param_names"]
        if meta["max_sources"] == 1:
            parts.append("src")
        else:
            parts.append("src1 src2 ...")
        parts.append("dst")
        return " ".join(parts)


def _parse_angle(params: Sequence[str]) -> RotateTransform:
    try:
        angle = int(params[0])
    except ValueError:
        raise InvalidArgumentError(f"angle must be an integer, got {params[0]!r}") from None
    return RotateTransform(angle)


# Global singleton registry
_default_registry: Optional[TransformRegistry] = None


def get_default_registry() -> TransformRegistry:
    """
    Get the global default registry (singleton).

    Creates the registry on first call and registers the built-in commands.
    """
    global _default_registry

    if _default_registry is None:
        _default_registry = TransformRegistry()
        register_default_commands(_default_registry)

    return _default_registry


def register_default_commands(registry: TransformRegistry) -> None:
    """
    Register the built-in commands: invert, grayscale, rotate, flip, blend, blur.

    Args:
        registry: The registry to register commands with
    """
    registry.register(
        command=COMMAND_INVERT,
        factory=lambda params: InvertTransform(),
        description="Invert every colour channel",
    )

    registry.register(
        command=COMMAND_GRAYSCALE,
        factory=lambda params: GrayscaleTransform(),
        description="Convert to grayscale by averaging the channels",
    )

    registry.register(
        command=COMMAND_ROTATE,
        factory=_parse_angle,
        description="Rotate clockwise by a multiple of 90 degrees",
        param_names=["angle"],
    )

    registry.register(
        command=COMMAND_FLIP,
        factory=lambda params: FlipTransform(params[0]),
        description="Mirror horizontally (H) or vertically (V)",
        param_names=["direction"],
    )

    registry.register(
        command=COMMAND_BLEND,
        factory=lambda params: BlendTransform(),
        description="Average several pictures over their shared area",
        min_sources=1,
        max_sources=None,
    )

    registry.register(
        command=COMMAND_BLUR,
        factory=lambda params: BlurTransform(),
        description="3x3 box blur; border pixels are kept",
    )

    logger.debug("Registered default transform commands")
