"""Domain layer: errors, schemas and constants."""

from .errors import (
    ArgumentError,
    CommandError,
    ConfigError,
    ErrorCodes,
    GoldenscriptError,
    HookError,
    ParseError,
    UnexpectedCommandFailure,
    UnexpectedCommandSuccess,
)
from .schemas import Argument, Block, Command

__all__ = [
    "GoldenscriptError",
    "ParseError",
    "HookError",
    "UnexpectedCommandFailure",
    "UnexpectedCommandSuccess",
    "ConfigError",
    "CommandError",
    "ArgumentError",
    "ErrorCodes",
    "Argument",
    "Command",
    "Block",
]
