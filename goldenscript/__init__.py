"""
goldenscript: golden-master testing with scripted commands.

A goldenscript is a plain text file of input commands and their expected
output, separated by ---:

    command argument key=value
    ---
    output

The output is generated by a Runner and written back with
UPDATE_GOLDENFILES=1, reviewed, and committed. Later runs fail with a diff
if the output changes.
"""

from goldenscript.core.arguments import ArgumentConsumer
from goldenscript.core.config import GoldenConfig, load_config
from goldenscript.core.parser import parse, parse_command
from goldenscript.domain.errors import (
    ArgumentError,
    CommandError,
    ConfigError,
    GoldenscriptError,
    HookError,
    ParseError,
    UnexpectedCommandFailure,
    UnexpectedCommandSuccess,
)
from goldenscript.domain.schemas import Argument, Block, Command
from goldenscript.testing.golden.runner import (
    CIEnvironmentError,
    GoldenScript,
    Runner,
    discover_scripts,
    generate,
    run,
)

__version__ = "0.1.0"

__all__ = [
    # Schemas
    "Argument",
    "Block",
    "Command",
    "ArgumentConsumer",
    # Parsing
    "parse",
    "parse_command",
    # Running
    "Runner",
    "generate",
    "run",
    "GoldenScript",
    "discover_scripts",
    # Config
    "GoldenConfig",
    "load_config",
    # Errors
    "GoldenscriptError",
    "ParseError",
    "HookError",
    "UnexpectedCommandFailure",
    "UnexpectedCommandSuccess",
    "ConfigError",
    "CommandError",
    "ArgumentError",
    "CIEnvironmentError",
]
