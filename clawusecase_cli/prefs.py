"""
Working-directory preference store for author identity defaults.

The file is a plain JSON object with the same camelCase keys the API uses
(authorUsername, authorHandle, authorPlatform, authorLink).
"""

import json
import os
import tempfile
from dataclasses import dataclass

from clawusecase_cli._utils import _get_field, _text, read_json_object
from clawusecase_cli.exceptions import ConfigError, PersistenceError

_KEYS = (
    ("author_username", "authorUsername"),
    ("author_handle", "authorHandle"),
    ("author_platform", "authorPlatform"),
    ("author_link", "authorLink"),
)


@dataclass(frozen=True)
class PreferenceRecord:
    author_username: str | None = None
    author_handle: str | None = None
    author_platform: str | None = None
    author_link: str | None = None

    @classmethod
    def from_dict(cls, data):
        return cls(**{snake: _text(_get_field(data, snake, camel)) for snake, camel in _KEYS})

    def to_dict(self):
        return {camel: getattr(self, snake) for snake, camel in _KEYS if getattr(self, snake)}

    def is_empty(self):
        return not self.to_dict()


@dataclass(frozen=True)
class PreferenceLoad:
    """Outcome of load_preferences(). ``error`` is set when the file was unusable."""

    record: PreferenceRecord
    error: ConfigError | None = None


def load_preferences(path):
    """Read stored preferences. Never raises; see PreferenceLoad.error."""
    loaded = read_json_object(path, "preferences file")
    if loaded.error:
        return PreferenceLoad(PreferenceRecord(), loaded.error)
    return PreferenceLoad(PreferenceRecord.from_dict(loaded.data))


def save_preferences(record, path):
    """Overwrite the preference file (write-then-rename)."""
    target_dir = os.path.dirname(os.path.abspath(path))
    try:
        fd, tmp_path = tempfile.mkstemp(dir=target_dir, prefix=".clawusecase_tmp_")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(record.to_dict(), f, indent=2)
                f.write("\n")
            os.replace(tmp_path, path)
        except BaseException:
            try:
                os.remove(tmp_path)
            except OSError:
                pass
            raise
    except OSError as e:
        raise PersistenceError(f"[ERROR] Could not save preferences to {path}: {e}") from e
