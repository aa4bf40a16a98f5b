"""Configuration file loading.

duesort reads an optional ``duesort_config.yaml``::

    scheduler:
      check_feasibility: true
      working_hours_per_day: 6
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ParseError
from .scheduler import SchedulerConfig

CONFIG_FILENAME = "duesort_config.yaml"

# Set from the CLI --config option
_config_override: Path | None = None


def set_config_override(path: Path | None) -> None:
    global _config_override  # noqa: PLW0603
    _config_override = path


def get_config_override() -> Path | None:
    return _config_override


class DuesortConfig(BaseModel):
    """Top-level configuration file contents."""

    scheduler: SchedulerConfig = Field(default_factory=SchedulerConfig)


def load_config(path: Path | str) -> DuesortConfig:
    """Load configuration from a YAML file."""
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)
    except OSError as e:
        raise ParseError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ParseError(f"Failed to parse config YAML: {e}") from e

    if data is None:
        return DuesortConfig()
    if not isinstance(data, dict):
        raise ParseError("Config YAML must contain a dictionary at the root level")

    try:
        return DuesortConfig.model_validate(data)
    except PydanticValidationError as e:
        raise ParseError(f"Invalid config file {path}: {e}") from e


def discover_config(input_path: Path | None = None, config_path: Path | None = None) -> DuesortConfig:
    """Find and load configuration, falling back to defaults.

    Search order:
    1. Explicit config_path argument
    2. Override set via CLI --config
    3. Directory of the input file / duesort_config.yaml
    4. Current directory / duesort_config.yaml
    """
    if config_path and config_path.exists():
        return load_config(config_path)

    override = get_config_override()
    if override and override.exists():
        return load_config(override)

    if input_path is not None:
        dir_config = Path(input_path).parent / CONFIG_FILENAME
        if dir_config.exists():
            return load_config(dir_config)

    cwd_config = Path(CONFIG_FILENAME)
    if cwd_config.exists():
        return load_config(cwd_config)

    return DuesortConfig()
