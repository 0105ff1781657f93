"""Reading session files into validated SessionConfiguration models."""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from sketchcad.application.config.schema import SessionConfiguration


class ConfigError(Exception):
    """A session file could not be read, parsed or validated.

    Attributes:
        message: Human readable summary, also the ``str()`` of the error.
        error_type: One of ``file_not_found``, ``file_read_error``,
            ``json_parse`` or ``validation``.
        path: Session file the error refers to, None for in-memory data.
        details: Structured details. ``json_parse`` carries ``line``,
            ``column`` and ``message``; ``validation`` carries one entry per
            failing field with ``path``, ``message``, ``value`` and
            ``error_type``.
    """

    def __init__(
        self,
        message: str,
        error_type: str,
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []


def _json_path(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic error location the way it reads in the session file.

    >>> _json_path(("beds", 2, "area"))
    'beds[2].area'
    >>> _json_path(())
    '<root>'
    """
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        else:
            path += f".{segment}" if path else str(segment)
    return path or "<root>"


def _validate(data: Any, path: Path | None = None) -> SessionConfiguration:
    try:
        return SessionConfiguration.model_validate(data)
    except ValidationError as e:
        details = [
            {
                "path": _json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
            for err in e.errors()
        ]
        lines = [f"Invalid session{f' {path}' if path else ''}:"]
        for detail in details:
            line = f"  - {detail['path']}: {detail['message']}"
            # Object and array inputs would repeat the whole subtree
            if not isinstance(detail["value"], (dict, list, type(None))):
                line += f" (got: {detail['value']!r})"
            lines.append(line)
        raise ConfigError(
            "\n".join(lines), error_type="validation", path=path, details=details
        ) from None


def load_config(path: Path) -> SessionConfiguration:
    """Load and validate a JSON session file.

    Raises:
        ConfigError: The file is missing or unreadable, is not valid JSON,
            or does not match the session schema. ``error_type`` tells
            which.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(
            f"Session file not found: {path}", error_type="file_not_found", path=path
        ) from None
    except OSError as e:
        raise ConfigError(
            f"Cannot read session file {path}: {e.strerror or e}",
            error_type="file_read_error",
            path=path,
        ) from None

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in {path} at line {e.lineno}, column {e.colno}: {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from None

    return _validate(data, path)


def load_config_from_dict(data: dict[str, Any]) -> SessionConfiguration:
    """Validate an already parsed session document.

    Raises:
        ConfigError: With ``error_type`` ``validation``.
    """
    return _validate(data)
