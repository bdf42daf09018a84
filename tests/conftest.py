"""
Pytest fixtures for goldenscript tests.
"""

from collections.abc import Callable
from pathlib import Path

import pytest

from goldenscript.domain.constants import CI_INDICATORS, UPDATE_ENV_VAR
from goldenscript.testing.golden.debug import DebugRunner

# =============================================================================
# Script Fixtures
# =============================================================================

@pytest.fixture
def write_script(tmp_path: Path) -> Callable[[str, str], Path]:
    """
    Write a script file verbatim (no newline translation).

    Usage:
        path = write_script("echo\\n---\\n", "echo")
    """
    def _write(content: str, name: str = "script") -> Path:
        path = tmp_path / name
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        return path

    return _write


# =============================================================================
# Runner Fixtures
# =============================================================================

@pytest.fixture
def debug_runner() -> DebugRunner:
    """Fresh DebugRunner."""
    return DebugRunner()


# =============================================================================
# Environment Fixtures
# =============================================================================

@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Environment without CI indicators or update mode."""
    for name in (*CI_INDICATORS, UPDATE_ENV_VAR):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
