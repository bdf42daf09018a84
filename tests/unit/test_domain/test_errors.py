"""
test_errors.py - error code and serialization tests

DoD:
- every engine error carries the matching ErrorCodes constant
- to_dict() exposes code, message and structured context
- errors raised by the library serialize with their context
"""

import pytest

from goldenscript.core.config import GoldenConfig
from goldenscript.core.strings import Scanner
from goldenscript.domain.errors import (
    ConfigError,
    ErrorCodes,
    GoldenscriptError,
    HookError,
    ParseError,
    UnexpectedCommandFailure,
    UnexpectedCommandSuccess,
)


# =============================================================================
# Error codes
# =============================================================================

class TestErrorCodes:
    """Each error class reports its code."""

    def test_default_code(self):
        """The base error has a generic code."""
        assert GoldenscriptError("m").code == "GOLDENSCRIPT_ERROR"

    def test_code_override(self):
        """An explicit code replaces the class default."""
        assert GoldenscriptError("m", code=ErrorCodes.CONFIG_INVALID).code == "CONFIG_INVALID"

    @pytest.mark.parametrize("error,code", [
        (ParseError("bad", 1, 1, "x"), ErrorCodes.PARSE_ERROR),
        (HookError("start_block", ValueError("x")), ErrorCodes.HOOK_FAILED),
        (UnexpectedCommandFailure("c", 1, ValueError("e")), ErrorCodes.COMMAND_FAILED),
        (UnexpectedCommandSuccess("c", 1, "out"), ErrorCodes.COMMAND_SUCCEEDED),
        (ConfigError("m"), ErrorCodes.CONFIG_INVALID),
    ])
    def test_class_codes(self, error: GoldenscriptError, code: str):
        """Subclasses carry their ErrorCodes constant."""
        assert error.code == code
        assert error.to_dict()["code"] == code


# =============================================================================
# Serialization
# =============================================================================

class TestToDict:
    """Structured error payloads."""

    def test_base_context(self):
        """Context keyword arguments are merged into the payload."""
        error = GoldenscriptError("m", code="C", key="v")
        assert error.to_dict() == {"code": "C", "message": "m", "key": "v"}

    def test_hook_error(self):
        assert HookError("start_block", ValueError("x"), 3).to_dict() == {
            "code": ErrorCodes.HOOK_FAILED,
            "message": "start_block failed at line 3: x",
            "hook": "start_block",
            "line_number": 3,
        }

    def test_hook_error_without_line(self):
        """Script-level hooks have no line number."""
        data = HookError("end_script", ValueError("x")).to_dict()
        assert data["message"] == "end_script failed: x"
        assert data["line_number"] is None

    def test_command_errors(self):
        """Command errors name the command and its line."""
        failure = UnexpectedCommandFailure("get", 4, ValueError("boom")).to_dict()
        assert failure["command"] == "get"
        assert failure["line_number"] == 4
        assert failure["message"] == "command 'get' failed at line 4: boom"

        success = UnexpectedCommandSuccess("get", 7, "value").to_dict()
        assert success["command"] == "get"
        assert success["line_number"] == 7

    def test_parse_error_from_scanner(self):
        """A parse failure serializes its reason and position."""
        scanner = Scanner('"open')
        with pytest.raises(ParseError) as exc_info:
            scanner.string()
        data = exc_info.value.to_dict()
        assert data["code"] == ErrorCodes.PARSE_ERROR
        assert data["line"] == 1
        assert data["column"] >= 1
        assert data["reason"]
        assert "snippet" not in data

    def test_config_error_from_loader(self):
        """Config validation reports the offending keys."""
        with pytest.raises(ConfigError) as exc_info:
            GoldenConfig.from_dict({"bogus": 1})
        data = exc_info.value.to_dict()
        assert data["code"] == ErrorCodes.CONFIG_INVALID
        assert data["keys"] == ["bogus"]
