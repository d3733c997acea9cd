"""
PP_Libs - Picture Processor Library Modules

This package contains core functionality for the Picture Processor project,
organized into specialized sub-packages:

- PictureLib: The Picture pixel buffer, its colour model, errors and codec
- ProcessorLib: Transform variants, the command registry and the CLI
"""

__version__ = "0.1.0"
