"""
Data schemas for parsed goldenscripts.

Rules:
- Produced once by the parser, never mutated afterwards (frozen)
- Argument order is significant and preserved
- Line numbers are 1-based source lines, for diagnostics
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeVar

from .errors import ArgumentError

if TYPE_CHECKING:
    from goldenscript.core.arguments import ArgumentConsumer

T = TypeVar("T")


def _parse_bool(value: str) -> bool:
    """Strict bool parsing: only "true" and "false" are accepted."""
    if value == "true":
        return True
    if value == "false":
        return False
    raise ValueError("provided string was not `true` or `false`")


@dataclass(frozen=True)
class Argument:
    """
    A command argument.

    key is set for `key=value` arguments (a bare `key=` gives an empty
    value). Keys are not guaranteed unique; runners handle duplicates as
    they see fit.
    """
    value: str
    key: str | None = None

    def parse(self, type_: Callable[[str], T]) -> T:
        """
        Parse the value with the given conversion callable.

        Args:
            type_: str -> T conversion (int, float, Decimal, ...). bool only
                accepts "true" and "false".

        Returns:
            The converted value

        Raises:
            ArgumentError: "invalid argument '<value>': <reason>"
        """
        convert: Callable[[str], Any] = _parse_bool if type_ is bool else type_
        try:
            result: T = convert(self.value)
        except (ValueError, TypeError, ArithmeticError) as e:
            raise ArgumentError(f"invalid argument '{self.value}': {e}") from e
        return result


@dataclass(frozen=True)
class Command:
    """A single command line."""
    name: str
    args: tuple[Argument, ...] = ()
    prefix: str | None = None
    silent: bool = False
    fail: bool = False
    tags: tuple[str, ...] = ()
    line_number: int = 1

    def pos_args(self) -> list[Argument]:
        """Positional (keyless) arguments, in order."""
        return [arg for arg in self.args if arg.key is None]

    def key_args(self) -> list[Argument]:
        """Key/value arguments, in order."""
        return [arg for arg in self.args if arg.key is not None]

    def consume_args(self) -> "ArgumentConsumer":
        """Return a one-shot argument consumer over a copy of the arguments."""
        from goldenscript.core.arguments import ArgumentConsumer

        return ArgumentConsumer(self.args)


@dataclass(frozen=True)
class Block:
    """
    An input/output block.

    literal is the verbatim command section (comments and blank lines
    included), reproduced as-is in generated output. A trailing block of
    only comments/blank lines has no commands.
    """
    literal: str
    commands: tuple[Command, ...] = field(default_factory=tuple)
    line_number: int = 1
