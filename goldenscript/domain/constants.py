"""
Domain Constants: script format and environment constants.

Values shared by the parser, the generator and the file wrapper.
"""

# =============================================================================
# Script Format
# =============================================================================
# command [args...]
# ---
# output
# <blank line>

SEPARATOR = "---"
COMMENT_PREFIXES = ("//", "#")
LINE_ENDINGS = ("\r\n", "\n")

# Inline whitespace: spaces and tabs, never newlines.
INLINE_SPACE = " \t"

# Characters allowed after the first character of an unquoted string.
UNQUOTED_PUNCTUATION = "_-./@"

QUOTES = ("'", '"')

# Single-character escapes inside quoted strings. \x and \u{} are handled
# separately.
ESCAPES = {
    "\\": "\\",
    "'": "'",
    '"': '"',
    "0": "\0",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}
UNICODE_ESCAPE_MAX_DIGITS = 6

# Tag list separators, in addition to inline whitespace.
TAG_SEPARATORS = ","

# =============================================================================
# Output Rendering
# =============================================================================

DEFAULT_BLOCK_OUTPUT = "ok"
ESCAPE_PREFIX = "> "
ERROR_OUTPUT_PREFIX = "Error: "
PANIC_OUTPUT_PREFIX = "Panic: "

# =============================================================================
# Environment / Config
# =============================================================================

UPDATE_ENV_VAR = "UPDATE_GOLDENFILES"
CONFIG_FILENAME = "goldenscript.yaml"
CONFIG_SECTION = "goldenscript"

CI_INDICATORS = (
    "CI",  # generic, used by GitHub Actions, GitLab CI, etc.
    "GITHUB_ACTIONS",
    "GITLAB_CI",
    "JENKINS_URL",
    "CIRCLECI",
    "TRAVIS",
    "BUILDKITE",
    "TF_BUILD",  # Azure Pipelines
    "CODEBUILD_BUILD_ID",  # AWS CodeBuild
)
