"""
Golden test utilities for goldenscripts.

A goldenscript pairs input commands with their expected output. The runner
regenerates the output from scratch and compares it byte-for-byte with the
file, so any change in behavior shows up as a diff.

Philosophy:
- Output is generated, reviewed, then committed
- Deterministic rendering: regenerating an up-to-date script is a no-op
- One failure aborts the script; expected failures are marked with `!`

Safety Features:
- CI environment guard to prevent accidental golden file updates
- Atomic golden file writes
"""

from .compare import assert_golden_match, compare_text, format_diff_report
from .debug import DebugRunner
from .runner import (
    CIEnvironmentError,
    GoldenScript,
    Runner,
    check_ci_environment,
    discover_scripts,
    generate,
    run,
)

__all__ = [
    # Runner
    "Runner",
    "generate",
    "run",
    "GoldenScript",
    "discover_scripts",
    "CIEnvironmentError",
    "check_ci_environment",
    "DebugRunner",
    # Comparison
    "assert_golden_match",
    "compare_text",
    "format_diff_report",
]
