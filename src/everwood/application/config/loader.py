"""Configuration file loader with error reporting.

Loads the JSON application configuration and turns file system, JSON and
Pydantic validation failures into a single ConfigError type.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from everwood.application.config.schema import EverwoodConfiguration


class ConfigError(Exception):
    """Exception raised for configuration-related errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, json_parse, validation, ...)
        path: Path to the configuration file (if applicable)
        details: Additional error details (line/column for JSON, validation errors, etc.)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("share", "origin"))
        'share.origin'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _validation_error(
    error: PydanticValidationError, path: Path | None
) -> ConfigError:
    details = [
        {
            "path": _format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]
    lines = ["Configuration validation failed:"]
    lines.extend(f"  - {d['path']}: {d['message']}" for d in details)
    return ConfigError(
        message="\n".join(lines),
        error_type="validation",
        path=path,
        details=details,
    )


def load_config(path: Path) -> EverwoodConfiguration:
    """Load and validate the application configuration from a JSON file.

    Raises:
        ConfigError: With error_type "file_not_found", "file_read_error",
            "json_parse" or "validation".
    """
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in config file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e

    try:
        return EverwoodConfiguration.model_validate(data)
    except PydanticValidationError as e:
        raise _validation_error(e, path) from e


def load_config_from_dict(data: dict[str, Any]) -> EverwoodConfiguration:
    """Validate an already-parsed configuration dictionary.

    Raises:
        ConfigError: If validation fails.
    """
    try:
        return EverwoodConfiguration.model_validate(data)
    except PydanticValidationError as e:
        raise _validation_error(e, None) from e
