"""
Shared pure-utility functions for clawusecase-cli.

These helpers have no business logic. They are used by config.py,
prefs.py, and compose.py.
"""

import json
from dataclasses import dataclass, field

from clawusecase_cli.exceptions import ConfigError


@dataclass(frozen=True)
class JsonLoad:
    """Result of reading a JSON object file: data plus an optional error."""

    data: dict = field(default_factory=dict)
    error: ConfigError | None = None


def read_json_object(path, context="file"):
    """Read a JSON object from *path* without raising.

    Missing file -> empty data, no error. Unreadable, invalid, or non-object
    content -> empty data and a ConfigError describing the problem.
    """
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except FileNotFoundError:
        return JsonLoad()
    except OSError as e:
        return JsonLoad(error=ConfigError(f"Cannot read {context} {path}: {e}"))
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        return JsonLoad(
            error=ConfigError(f"Invalid JSON in {context} {path}: {e.msg} at position {e.pos}")
        )
    if not isinstance(data, dict):
        return JsonLoad(
            error=ConfigError(
                f"Invalid {context} {path}: expected object, got {type(data).__name__}"
            )
        )
    return JsonLoad(data=data)


def _text(value):
    """Return *value* if it is a non-empty string after trimming, else None."""
    if not isinstance(value, str):
        return None
    return value if value.strip() else None


def _get_field(d, snake, camel):
    """Get a value from a dict trying snake_case then camelCase key."""
    if snake in d:
        return d.get(snake)
    return d.get(camel)
