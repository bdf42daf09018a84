"""
Error definitions for goldenscript.

Rules:
- No silent failures: every engine error aborts generation with one exception
- Expected failures (`!` commands) are rendered as output, never raised
- Runners raise CommandError for ordinary failures; anything else is a fault
"""

from typing import Any


class GoldenscriptError(Exception):
    """
    Base error for parse and generation failures.

    Carries a stable error code and structured context for logs, alongside
    a human-readable message.

    Usage:
        raise GoldenscriptError("something broke", code=ErrorCodes.CONFIG_INVALID, key="runner")
    """

    code = "GOLDENSCRIPT_ERROR"

    def __init__(self, message: str, code: str | None = None, **context: Any) -> None:
        if code is not None:
            self.code = code
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """For log/JSON serialization."""
        return {
            "code": self.code,
            "message": self.message,
            **self.context,
        }


class ParseError(GoldenscriptError):
    """
    Malformed script syntax.

    Always fatal. The message shows the offending source line with a caret
    under the failing column.
    """

    code = "PARSE_ERROR"

    def __init__(self, reason: str, line: int, column: int, snippet: str) -> None:
        self.reason = reason
        self.line = line
        self.column = column
        self.snippet = snippet
        message = (
            f"parse error at line {line} column {column}: {reason}:\n"
            f"{snippet}\n"
            f"{' ' * (column - 1)}^"
        )
        super().__init__(message, reason=reason, line=line, column=column)


class HookError(GoldenscriptError):
    """A runner lifecycle hook raised."""

    code = "HOOK_FAILED"

    def __init__(self, hook: str, error: BaseException, line_number: int | None = None) -> None:
        self.hook = hook
        self.line_number = line_number
        if line_number is None:
            message = f"{hook} failed: {error}"
        else:
            message = f"{hook} failed at line {line_number}: {error}"
        super().__init__(message, hook=hook, line_number=line_number)


class UnexpectedCommandFailure(GoldenscriptError):
    """A command without `!` raised CommandError."""

    code = "COMMAND_FAILED"

    def __init__(self, name: str, line_number: int, error: BaseException) -> None:
        self.name = name
        self.line_number = line_number
        super().__init__(
            f"command '{name}' failed at line {line_number}: {error}",
            command=name,
            line_number=line_number,
        )


class UnexpectedCommandSuccess(GoldenscriptError):
    """A command marked with `!` returned output instead of failing."""

    code = "COMMAND_SUCCEEDED"

    def __init__(self, name: str, line_number: int, output: str) -> None:
        self.name = name
        self.line_number = line_number
        self.output = output
        super().__init__(
            f"expected command '{name}' to fail at line {line_number}, succeeded with: {output}",
            command=name,
            line_number=line_number,
        )


class ConfigError(GoldenscriptError):
    """Invalid goldenscript configuration."""

    code = "CONFIG_INVALID"


class CommandError(Exception):
    """
    Ordinary command failure, raised by runners.

    Rendered as "Error: <message>" for `!` commands, otherwise reported as
    UnexpectedCommandFailure.
    """
    pass


class ArgumentError(CommandError):
    """Invalid or unconsumed command argument."""
    pass


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """Error code constants."""

    # === Parse ===
    PARSE_ERROR = ParseError.code

    # === Generation ===
    HOOK_FAILED = HookError.code
    COMMAND_FAILED = UnexpectedCommandFailure.code
    COMMAND_SUCCEEDED = UnexpectedCommandSuccess.code

    # === Config ===
    CONFIG_INVALID = ConfigError.code
