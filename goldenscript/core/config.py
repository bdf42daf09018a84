"""
Configuration: goldenscript.yaml.

Example:
    goldenscript:
      update_env: UPDATE_GOLDENFILES
      ci_guard: true
      encoding: utf-8
      scripts_dir: tests/golden/scripts
      pattern: "*"
      runner: mypackage.runners:KVRunner
"""

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from goldenscript.domain.constants import CONFIG_FILENAME, CONFIG_SECTION, UPDATE_ENV_VAR
from goldenscript.domain.errors import ConfigError


@dataclass
class GoldenConfig:
    """Goldenscript settings."""
    # Env var that enables update mode when set to "1"
    update_env: str = UPDATE_ENV_VAR

    # Refuse to rewrite golden files in CI
    ci_guard: bool = True

    encoding: str = "utf-8"

    # CLI defaults
    scripts_dir: Path | None = None
    pattern: str = "*"
    runner: str | None = None

    def update_mode(self) -> bool:
        """Whether the update env var is set to 1."""
        return os.environ.get(self.update_env) == "1"

    @classmethod
    def from_dict(cls, data: dict[str, Any], base_dir: Path | None = None) -> "GoldenConfig":
        """
        Build a config from a mapping, validating keys and types.

        Args:
            data: The `goldenscript:` mapping
            base_dir: Directory relative scripts_dir paths resolve against

        Raises:
            ConfigError: Unknown key or wrong value type
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"unknown config key(s): {', '.join(unknown)}", keys=unknown)

        values: dict[str, Any] = {}
        for key, value in data.items():
            if key == "ci_guard":
                if not isinstance(value, bool):
                    raise ConfigError(f"{key} must be a boolean, got {value!r}", key=key)
            elif key in ("scripts_dir", "runner") and value is None:
                pass
            elif not isinstance(value, str) or not value:
                raise ConfigError(f"{key} must be a non-empty string, got {value!r}", key=key)

            if key == "scripts_dir" and value is not None:
                path = Path(value)
                if base_dir is not None and not path.is_absolute():
                    path = base_dir / path
                value = path
            values[key] = value

        return cls(**values)


def load_config(config_path: Path | None = None) -> GoldenConfig:
    """
    Load goldenscript.yaml.

    Args:
        config_path: Config file (default: goldenscript.yaml in the current
            directory). A missing file gives the defaults.

    Returns:
        GoldenConfig

    Raises:
        ConfigError: Malformed YAML or invalid settings
    """
    if config_path is None:
        config_path = Path.cwd() / CONFIG_FILENAME

    if not config_path.exists():
        return GoldenConfig()

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in {config_path}: {e}", path=str(config_path)) from e

    if data is None:
        return GoldenConfig()

    section = data.get(CONFIG_SECTION) if isinstance(data, dict) else None
    if not isinstance(data, dict) or not isinstance(section or {}, dict):
        raise ConfigError(
            f"{config_path} must contain a '{CONFIG_SECTION}:' mapping",
            path=str(config_path),
        )

    return GoldenConfig.from_dict(section or {}, base_dir=config_path.parent)
