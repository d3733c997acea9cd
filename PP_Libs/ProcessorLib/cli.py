"""
Command-line entry point for Picture Processor.

Usage:
    picture-processor [-v] <command> [params...] <src...> <dst>

Commands:
    invert src dst
    grayscale src dst
    rotate angle src dst
    flip direction src dst
    blend src1 src2 ... dst
    blur src dst
"""

from typing import List, Optional, Sequence
import logging
import sys

from PP_Libs.constants import EXIT_FAILURE, EXIT_OK, EXIT_USAGE
from PP_Libs.PictureLib.picture import Picture
from PP_Libs.PictureLib.picture_codec import config_for_path
from PP_Libs.PictureLib.picture_errors import InvalidArgumentError, PictureError
from PP_Libs.ProcessorLib.transform_registry import TransformRegistry, get_default_registry

logger = logging.getLogger(__name__)


def print_usage(registry: TransformRegistry, stream=None) -> None:
    stream = stream or sys.stdout
    print("Usage:", file=stream)
    print("  picture-processor [-v] <command> [params...] <src...> <dst>", file=stream)
    print("\nCommands:", file=stream)
    for command in registry.list_commands():
        meta = registry.get_metadata(command)
        print(f"  {registry.usage(command):<28} {meta['description']}", file=stream)
    print("\nExamples:", file=stream)
    print("  picture-processor rotate 90 input.png output.png", file=stream)
    print("  picture-processor flip H input.png output.png", file=stream)
    print("  picture-processor blend a.png b.png c.png output.png", file=stream)


def run_command(
    command: str,
    args: Sequence[str],
    registry: Optional[TransformRegistry] = None,
):
    """
    Load the sources, apply the command's transform and save the result.

    The output format follows the destination extension (PNG when unknown).

    Args:
        command: Registered command name
        args: Params, then source paths, then the destination path
        registry: Registry to resolve the command in (default: global registry)

    Returns:
        Path the result was written to

    Raises:
        KeyError: If command is unknown
        InvalidArgumentError: If the argument count or a param is wrong
        DecodeError: If a source cannot be read
        EncodeError: If the destination cannot be written
    """
    registry = registry or get_default_registry()
    meta = registry.get_metadata(command)
    param_count = len(meta["param_names"])

    params = list(args[:param_count])
    paths = list(args[param_count:])
    if len(params) < param_count or len(paths) < 2:
        raise InvalidArgumentError(f"usage: {registry.usage(command)}")

    sources, destination = paths[:-1], paths[-1]
    if len(sources) < meta["min_sources"] or (
        meta["max_sources"] is not None and len(sources) > meta["max_sources"]
    ):
        raise InvalidArgumentError(f"usage: {registry.usage(command)}")

    transform = registry.build(command, params)
    pictures = [Picture.from_file(source) for source in sources]
    logger.debug(f"Applying {transform.to_dict()} to {len(pictures)} picture(s)")

    result = transform.apply(pictures)
    output_path = result.save_as(destination, config_for_path(destination))
    logger.info(f"{command}: wrote {result.width}x{result.height} picture to {output_path}")
    return output_path


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI and return the process exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    registry = get_default_registry()

    verbose = False
    while args and args[0] in ("-v", "--verbose"):
        verbose = True
        args.pop(0)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    if not args or args[0] in ("-h", "--help"):
        print_usage(registry, sys.stderr if not args else None)
        return EXIT_OK if args else EXIT_USAGE

    command = args[0].lower()
    if not registry.has_command(command):
        print(f"Error: unknown command '{args[0]}'", file=sys.stderr)
        print_usage(registry, sys.stderr)
        return EXIT_USAGE

    try:
        run_command(command, args[1:], registry)
    except InvalidArgumentError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE
    except PictureError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
