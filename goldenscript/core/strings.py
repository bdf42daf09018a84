"""
Grammar primitives: string literals, escapes, comments, whitespace and lines.

A Scanner walks the script text with an explicit position. Every primitive
either consumes input and returns what it matched, or leaves the position
untouched and returns None/False, so callers can backtrack by saving and
restoring `pos`. Hard syntax errors raise ParseError with line/column.
"""

from bisect import bisect_right

from goldenscript.domain.constants import (
    COMMENT_PREFIXES,
    ESCAPES,
    INLINE_SPACE,
    LINE_ENDINGS,
    QUOTES,
    SEPARATOR,
    UNICODE_ESCAPE_MAX_DIGITS,
    UNQUOTED_PUNCTUATION,
)
from goldenscript.domain.errors import ParseError

_HEX_DIGITS = "0123456789abcdefABCDEF"


def _is_ascii_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


class Scanner:
    """
    Cursor over script text with line/column tracking.

    Usage:
        scanner = Scanner('echo "hi"\\n')
        scanner.string()  # 'echo'
    """

    def __init__(self, text: str, pos: int = 0):
        self.text = text
        self.pos = pos
        # Offsets of every "\n", for line lookups.
        self._newlines = [i for i, char in enumerate(text) if char == "\n"]

    # =========================================================================
    # Position
    # =========================================================================

    def at_eof(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self, length: int = 1) -> str:
        return self.text[self.pos:self.pos + length]

    def line_at(self, pos: int) -> int:
        """1-based line number of a position."""
        return bisect_right(self._newlines, pos - 1) + 1

    @property
    def line(self) -> int:
        return self.line_at(self.pos)

    def _line_start(self, pos: int) -> int:
        index = bisect_right(self._newlines, pos - 1)
        return self._newlines[index - 1] + 1 if index > 0 else 0

    def error(self, reason: str, pos: int | None = None) -> ParseError:
        """Build a ParseError pointing at pos (default: current position)."""
        if pos is None:
            pos = self.pos
        start = self._line_start(pos)
        end = self.text.find("\n", start)
        if end == -1:
            end = len(self.text)
        snippet = self.text[start:end].removesuffix("\r")
        return ParseError(reason, line=self.line_at(pos), column=pos - start + 1, snippet=snippet)

    # =========================================================================
    # Whitespace, lines, comments
    # =========================================================================

    def eat(self, literal: str) -> bool:
        """Consume literal if it is next."""
        if self.text.startswith(literal, self.pos):
            self.pos += len(literal)
            return True
        return False

    def skip(self, chars: str) -> str:
        """Consume any run of the given characters."""
        start = self.pos
        while self.pos < len(self.text) and self.text[self.pos] in chars:
            self.pos += 1
        return self.text[start:self.pos]

    def space0(self) -> str:
        """Consume zero or more spaces/tabs."""
        return self.skip(INLINE_SPACE)

    def space1(self) -> bool:
        """Consume one or more spaces/tabs."""
        return bool(self.space0())

    def line_ending(self) -> str | None:
        """Consume "\\r\\n" or "\\n"."""
        for ending in LINE_ENDINGS:
            if self.eat(ending):
                return ending
        return None

    def is_line_ending(self, pos: int | None = None) -> bool:
        if pos is None:
            pos = self.pos
        return any(self.text.startswith(ending, pos) for ending in LINE_ENDINGS)

    def line_end_or_eof(self) -> bool:
        """Consume a line ending, or match EOF."""
        return self.line_ending() is not None or self.at_eof()

    def comment(self) -> str | None:
        """Consume a # or // comment up to (not including) the line ending."""
        if not any(self.text.startswith(p, self.pos) for p in COMMENT_PREFIXES):
            return None
        start = self.pos
        while not self.at_eof() and not self.is_line_ending():
            self.pos += 1
        return self.text[start:self.pos]

    def empty_or_comment_line(self) -> str | None:
        """
        Consume a line holding only whitespace and/or a comment.

        Must consume something, so an exhausted input never matches.
        """
        start = self.pos
        self.space0()
        self.comment()
        if not self.line_end_or_eof() or self.pos == start:
            self.pos = start
            return None
        return self.text[start:self.pos]

    def is_separator(self) -> bool:
        """Whether a --- separator line starts here. Does not consume."""
        if not self.text.startswith(SEPARATOR, self.pos):
            return False
        end = self.pos + len(SEPARATOR)
        return end >= len(self.text) or self.is_line_ending(end)

    def separator(self) -> bool:
        """Consume a --- separator and its line ending."""
        if not self.is_separator():
            return False
        self.pos += len(SEPARATOR)
        self.line_ending()
        return True

    # =========================================================================
    # Strings
    # =========================================================================

    def at_string(self) -> bool:
        """Whether a string literal (quoted or unquoted) starts here."""
        char = self.peek()
        return bool(char) and (_is_ascii_alnum(char) or char == "_" or char in QUOTES)

    def string(self) -> str:
        """
        Parse a quoted or unquoted string literal.

        Raises:
            ParseError: no string here, or a malformed quoted string
        """
        char = self.peek()
        if char in QUOTES and char:
            return self.quoted_string(char)
        value = self.unquoted_string()
        if value is None:
            raise self.error("expected string")
        return value

    def unquoted_string(self) -> str | None:
        """
        [a-zA-Z0-9_][a-zA-Z0-9_-./@]*

        Returns None without consuming if no unquoted string starts here.
        """
        char = self.peek()
        if not char or not (_is_ascii_alnum(char) or char == "_"):
            return None
        start = self.pos
        self.pos += 1
        while not self.at_eof():
            char = self.text[self.pos]
            if not (_is_ascii_alnum(char) or char in UNQUOTED_PUNCTUATION):
                break
            self.pos += 1
        return self.text[start:self.pos]

    def quoted_string(self, quote: str) -> str:
        """
        Parse a ' or " quoted string, decoding escape sequences.

        Quoted strings may hold any Unicode, including line breaks.

        Raises:
            ParseError: unterminated string or invalid escape sequence
        """
        start = self.pos
        if not self.eat(quote):
            raise self.error(f"expected {quote}")
        if self.eat(quote):
            return ""

        chunks: list[str] = []
        while True:
            if self.at_eof():
                raise self.error("unterminated quoted string", start)
            char = self.text[self.pos]
            if char == quote:
                self.pos += 1
                return "".join(chunks)
            if char == "\\":
                chunks.append(self._escape())
                continue
            chunks.append(char)
            self.pos += 1

    def _escape(self) -> str:
        """Decode one escape sequence starting at the backslash."""
        start = self.pos
        self.pos += 1
        char = self.peek()

        if char in ESCAPES and char:
            self.pos += 1
            return ESCAPES[char]

        if char == "x":
            digits = self.text[self.pos + 1:self.pos + 3]
            if len(digits) != 2 or any(d not in _HEX_DIGITS for d in digits):
                raise self.error("invalid hex escape sequence", start)
            self.pos += 3
            return chr(int(digits, 16))

        if char == "u":
            if self.text[self.pos + 1:self.pos + 2] != "{":
                raise self.error("invalid unicode escape sequence", start)
            digits_start = self.pos + 2
            end = digits_start
            while end < len(self.text) and self.text[end] in _HEX_DIGITS:
                end += 1
            digits = self.text[digits_start:end]
            if not 1 <= len(digits) <= UNICODE_ESCAPE_MAX_DIGITS or not self.text.startswith("}", end):
                raise self.error("invalid unicode escape sequence", start)
            codepoint = int(digits, 16)
            # Surrogates are not Unicode scalar values.
            if codepoint > 0x10FFFF or 0xD800 <= codepoint <= 0xDFFF:
                raise self.error(f"invalid unicode codepoint {digits}", start)
            self.pos = end + 1
            return chr(codepoint)

        raise self.error("invalid escape sequence", start)
