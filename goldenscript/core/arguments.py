"""
Argument consumption helper.

Takes a snapshot of a command's arguments and hands them out one at a time,
in any order, so a runner can finish with reject_rest() to catch anything
it didn't understand. The command itself is never modified.
"""

from collections import deque
from collections.abc import Callable, Iterable
from typing import TypeVar

from goldenscript.domain.errors import ArgumentError
from goldenscript.domain.schemas import Argument

T = TypeVar("T")


class ArgumentConsumer:
    """
    Consumes command arguments.

    Usage:
        args = command.consume_args()
        message = args.next_pos()
        retry = args.lookup_and_parse("retry", bool) or False
        args.reject_rest()
    """

    def __init__(self, args: Iterable[Argument]):
        self._args: deque[Argument] = deque(args)

    def __len__(self) -> int:
        return len(self._args)

    def __iter__(self):
        return iter(list(self._args))

    def next(self) -> Argument | None:
        """Remove and return the next argument."""
        return self._args.popleft() if self._args else None

    def next_key(self) -> Argument | None:
        """Remove and return the next key/value argument."""
        return self._take_first(lambda arg: arg.key is not None)

    def next_pos(self) -> Argument | None:
        """Remove and return the next positional argument."""
        return self._take_first(lambda arg: arg.key is None)

    def lookup(self, key: str) -> Argument | None:
        """
        Look up a key/value argument by key.

        Duplicate keys collapse: the last one wins, and all of them are
        removed.
        """
        argument = self._find_last(key)
        if argument is not None:
            self._remove_key(key)
        return argument

    def lookup_and_parse(self, key: str, type_: Callable[[str], T]) -> T | None:
        """
        Look up a key/value argument by key and parse its value.

        Returns None if the key isn't given. If parsing fails, nothing is
        removed and ArgumentError is raised.
        """
        argument = self._find_last(key)
        if argument is None:
            return None
        value = argument.parse(type_)
        self._remove_key(key)
        return value

    def reject_rest(self) -> None:
        """
        Raise ArgumentError if any arguments remain. Does not consume.
        """
        if not self._args:
            return
        argument = self._args[0]
        if argument.key is not None:
            raise ArgumentError(f"unknown argument '{argument.key}'")
        raise ArgumentError(f"unknown argument '{argument.value}'")

    def rest(self) -> list[Argument]:
        """Remove and return all remaining arguments."""
        rest = list(self._args)
        self._args.clear()
        return rest

    def rest_key(self) -> list[Argument]:
        """Remove and return all remaining key/value arguments."""
        return self._take_all(lambda arg: arg.key is not None)

    def rest_pos(self) -> list[Argument]:
        """Remove and return all remaining positional arguments."""
        return self._take_all(lambda arg: arg.key is None)

    # =========================================================================
    # Internals
    # =========================================================================

    def _find_last(self, key: str) -> Argument | None:
        for argument in reversed(self._args):
            if argument.key == key:
                return argument
        return None

    def _remove_key(self, key: str) -> None:
        self._args = deque(arg for arg in self._args if arg.key != key)

    def _take_first(self, predicate: Callable[[Argument], bool]) -> Argument | None:
        for i, argument in enumerate(self._args):
            if predicate(argument):
                del self._args[i]
                return argument
        return None

    def _take_all(self, predicate: Callable[[Argument], bool]) -> list[Argument]:
        taken = [arg for arg in self._args if predicate(arg)]
        self._args = deque(arg for arg in self._args if not predicate(arg))
        return taken
