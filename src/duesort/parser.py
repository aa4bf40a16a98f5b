"""YAML/JSON loader for schedule request files."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ParseError
from .schemas import ScheduleRequestSchema


def parse_request_data(data: Any) -> ScheduleRequestSchema:
    """Validate already-loaded request data.

    Accepts either ``{"tasks": [...]}`` or a bare list of tasks.
    """
    if isinstance(data, list):
        data = {"tasks": data}
    if not isinstance(data, dict):
        raise ParseError("Request must be a mapping with a 'tasks' key or a list of tasks")

    try:
        return ScheduleRequestSchema.model_validate(data)
    except PydanticValidationError as e:
        raise ParseError(f"Invalid schedule request: {e}") from e


def load_schedule_request(path: Path | str) -> ScheduleRequestSchema:
    """Read a schedule request from a YAML or JSON file."""
    path = Path(path)
    if not path.exists():
        raise ParseError(f"File not found: {path}")

    try:
        with path.open(encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ParseError(f"Failed to parse YAML: {e}") from e

    if data is None:
        raise ParseError(f"File is empty: {path}")

    return parse_request_data(data)
