"""
Core layer: grammar, parser, argument helper, config and file I/O.
"""

from .arguments import ArgumentConsumer
from .config import GoldenConfig, load_config
from .files import atomic_write_text, read_script
from .parser import parse, parse_command
from .strings import Scanner

__all__ = [
    # strings
    "Scanner",
    # parser
    "parse",
    "parse_command",
    # arguments
    "ArgumentConsumer",
    # config
    "GoldenConfig",
    "load_config",
    # files
    "read_script",
    "atomic_write_text",
]
