"""
Goldenscript parser: script text -> ordered list of Blocks.

A script is a sequence of blocks. Each block is a command section (command
lines, blank lines and comments), a --- separator, and an output section
running to the first blank line or EOF. The output text is only skipped;
the generator always renders it afresh.

The whole script is parsed before any command runs.
"""

import logging

from goldenscript.domain.constants import INLINE_SPACE, TAG_SEPARATORS
from goldenscript.domain.errors import ParseError
from goldenscript.domain.schemas import Argument, Block, Command

from .strings import Scanner

logger = logging.getLogger(__name__)


def parse(text: str) -> list[Block]:
    """
    Parse a goldenscript into blocks.

    Args:
        text: Full script text

    Returns:
        Blocks in source order. The last block may have no commands if the
        script ends with comments or blank lines.

    Raises:
        ParseError: On malformed syntax
    """
    scanner = Scanner(text)
    blocks: list[Block] = []
    while not scanner.at_eof():
        blocks.append(_block(scanner))
    logger.debug(f"Parsed {len(blocks)} block(s)")
    return blocks


def parse_command(text: str) -> Command:
    """
    Parse a single command line.

    Raises:
        ParseError: On malformed syntax or trailing input
    """
    scanner = Scanner(text)
    command = _command(scanner)
    if not scanner.at_eof():
        raise scanner.error("unexpected input after command")
    return command


# =============================================================================
# Blocks
# =============================================================================

def _block(scanner: Scanner) -> Block:
    """Parse a command section, its separator, and skip its output."""
    start = scanner.pos
    line_number = scanner.line
    commands = _commands(scanner)
    literal = scanner.text[start:scanner.pos]

    # Trailing comments/blank lines at EOF form a command-less block.
    if scanner.at_eof() and not commands:
        return Block(literal=literal, commands=(), line_number=line_number)

    if not scanner.separator():
        raise scanner.error("expected --- separator")

    _skip_output(scanner)

    return Block(literal=literal, commands=tuple(commands), line_number=line_number)


def _commands(scanner: Scanner) -> list[Command]:
    """
    Parse command lines up to a separator or EOF.

    Stops at a separator only once at least one command was parsed, so a
    separator with no commands fails as a missing command.
    """
    commands: list[Command] = []
    while True:
        if scanner.empty_or_comment_line() is not None:
            continue

        # Premature EOF is handled by the caller.
        if scanner.at_eof():
            return commands

        if commands and scanner.is_separator():
            return commands

        commands.append(_command(scanner))


def _skip_output(scanner: Scanner) -> None:
    """
    Skip the output section: up to and including the first blank line
    (two consecutive line endings), or EOF.

    An immediate line ending or EOF means the output is empty.
    """
    if scanner.line_end_or_eof():
        return

    while not scanner.at_eof():
        if scanner.line_ending() is not None:
            if scanner.line_end_or_eof():
                return
            continue
        scanner.pos += 1


# =============================================================================
# Commands
# =============================================================================

def _command(scanner: Scanner) -> Command:
    """
    Parse one command line, including trailing whitespace, comment and line
    ending.

    Grammar:
        [( ] [PREFIX: ] [! ] NAME [ ARG...] [ [TAG, ...]] [ )] [# comment]
    """
    # Silencing parenthesis.
    silent = scanner.eat("(")
    if silent:
        scanner.space0()

    prefix = _prefix(scanner)

    fail = scanner.eat("!")
    if fail:
        scanner.space0()

    line_number = scanner.line
    name_pos = scanner.pos
    if not scanner.at_string():
        raise scanner.error("expected command name")
    name = scanner.string()
    if not name:
        raise scanner.error("empty command name", name_pos)

    args = _arguments(scanner)
    tags = _tags(scanner)

    if silent:
        scanner.space0()
        if not scanner.eat(")"):
            raise scanner.error("unterminated silencing parenthesis, expected )")

    # Ignore trailing whitespace and comments.
    scanner.space0()
    scanner.comment()
    if not scanner.line_end_or_eof():
        raise scanner.error(f"unexpected character '{scanner.peek()}'")

    return Command(
        name=name,
        args=tuple(args),
        prefix=prefix,
        silent=silent,
        fail=fail,
        tags=tuple(tags),
        line_number=line_number,
    )


def _prefix(scanner: Scanner) -> str | None:
    """Parse an optional `PREFIX:` label, backtracking if there is none."""
    start = scanner.pos
    if not scanner.at_string():
        return None
    try:
        prefix = scanner.string()
    except ParseError:
        # Reported when the same string is parsed as the command name.
        scanner.pos = start
        return None
    if not scanner.eat(":"):
        scanner.pos = start
        return None
    scanner.space0()
    return prefix


def _arguments(scanner: Scanner) -> list[Argument]:
    """Parse space-separated `value` or `key=[value]` arguments."""
    args: list[Argument] = []
    while True:
        start = scanner.pos
        if not scanner.space1() or not scanner.at_string():
            scanner.pos = start
            return args

        value = scanner.string()
        if scanner.eat("="):
            key = value
            value = scanner.string() if scanner.at_string() else ""
            args.append(Argument(key=key, value=value))
        else:
            args.append(Argument(value=value))


def _tags(scanner: Scanner) -> list[str]:
    """Parse an optional [tag, tag ...] list, separated by commas or spaces."""
    start = scanner.pos
    if not scanner.space1() or scanner.peek() != "[":
        scanner.pos = start
        return []
    open_pos = scanner.pos
    scanner.pos += 1

    tags: list[str] = []
    while True:
        separated = scanner.skip(TAG_SEPARATORS + INLINE_SPACE)
        if scanner.peek() == "]":
            if not tags:
                raise scanner.error("empty tag list")
            scanner.pos += 1
            return tags
        if scanner.at_eof() or scanner.is_line_ending():
            raise scanner.error("unterminated tag list, expected ]", open_pos)
        if tags and not separated:
            raise scanner.error("expected , or ] in tag list")
        if not scanner.at_string():
            raise scanner.error("expected tag")
        tags.append(scanner.string())
