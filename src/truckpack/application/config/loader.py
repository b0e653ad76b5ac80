"""Pack document loader with structured error reporting.

This module loads JSON pack documents from disk or from already-parsed
data. File system errors, JSON syntax errors and schema violations are all
raised as ConfigError with a category and per-field details.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from truckpack.application.config.schema import PackDocument


class ConfigError(Exception):
    """Exception raised for pack document errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, permission_denied,
            file_read_error, json_parse, validation, unknown_preset)
        path: Path to the document (if loaded from a file)
        details: Additional details (line/column for JSON, field errors, etc.)
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
        >>> _format_json_path(("container", "length"))
        'container.length'
        >>> _format_json_path(("catalog", 0, "dimensions", "width"))
        'catalog[0].dimensions.width'
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


def _extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    details: list[dict[str, Any]] = []
    for err in error.errors():
        details.append(
            {
                "path": _format_json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
        )
    return details


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    lines = ["Pack document validation failed:"]
    for detail in details:
        path = detail["path"] or "<root>"
        value = detail.get("value")
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {path}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {path}: {detail['message']}")
    return "\n".join(lines)


def load_pack_document_from_dict(
    data: Any, path: Path | None = None
) -> PackDocument:
    """Validate an already-parsed pack document.

    Args:
        data: Parsed JSON data.
        path: Source path, recorded on errors when known.

    Returns:
        A validated PackDocument.

    Raises:
        ConfigError: If the data fails validation.
    """
    try:
        return PackDocument.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        )


def load_pack_document(path: Path) -> PackDocument:
    """Load and validate a pack document from a JSON file.

    Args:
        path: Path to the JSON document.

    Returns:
        A validated PackDocument.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.
            ``error_type`` is one of file_not_found, permission_denied,
            file_read_error, json_parse or validation.

    Example:
        >>> try:
        ...     doc = load_pack_document(Path("pack.json"))
        ... except ConfigError as e:
        ...     for detail in e.details:
        ...         print(f"  {detail['path']}: {detail['message']}")
    """
    if not path.exists():
        raise ConfigError(
            message=f"Pack file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading pack file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading pack file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in pack file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[
                {
                    "line": e.lineno,
                    "column": e.colno,
                    "message": e.msg,
                }
            ],
        )

    return load_pack_document_from_dict(data, path=path)
