"""Tests for prefs.py: loading, saving, and the result type."""

import json
from unittest.mock import patch

import pytest

from clawusecase_cli.exceptions import ConfigError, PersistenceError
from clawusecase_cli.prefs import PreferenceRecord, load_preferences, save_preferences


class TestLoadPreferences:
    def test_missing_file_is_empty_without_error(self, tmp_path):
        loaded = load_preferences(str(tmp_path / "nope.json"))
        assert loaded.record == PreferenceRecord()
        assert loaded.error is None

    def test_reads_camel_case_keys(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text(
            json.dumps(
                {
                    "authorUsername": "alice",
                    "authorHandle": "alice_h",
                    "authorPlatform": "github",
                    "authorLink": "https://github.com/alice",
                }
            )
        )
        loaded = load_preferences(str(path))
        assert loaded.error is None
        assert loaded.record.author_username == "alice"
        assert loaded.record.author_handle == "alice_h"
        assert loaded.record.author_platform == "github"
        assert loaded.record.author_link == "https://github.com/alice"

    def test_accepts_snake_case_keys(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text('{"author_username": "alice"}')
        assert load_preferences(str(path)).record.author_username == "alice"

    def test_invalid_json_returns_error(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text("{not json")
        loaded = load_preferences(str(path))
        assert loaded.record == PreferenceRecord()
        assert isinstance(loaded.error, ConfigError)
        assert "Invalid JSON" in str(loaded.error)

    def test_non_object_returns_error(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text("[1, 2]")
        loaded = load_preferences(str(path))
        assert loaded.record.is_empty()
        assert "expected object" in str(loaded.error)

    def test_non_string_values_ignored(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text('{"authorUsername": 42, "authorHandle": ""}')
        record = load_preferences(str(path)).record
        assert record.author_username is None
        assert record.author_handle is None


class TestSavePreferences:
    def test_writes_camel_case_json(self, tmp_path):
        path = tmp_path / "prefs.json"
        save_preferences(PreferenceRecord(author_username="alice", author_platform="x"), str(path))
        assert json.loads(path.read_text()) == {"authorUsername": "alice", "authorPlatform": "x"}

    def test_round_trips_through_load(self, tmp_path):
        path = str(tmp_path / "prefs.json")
        record = PreferenceRecord("alice", "alice_h", "github", "https://github.com/alice")
        save_preferences(record, path)
        assert load_preferences(path).record == record

    def test_overwrites_existing_file(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text('{"authorUsername": "old"}')
        save_preferences(PreferenceRecord(author_username="new"), str(path))
        assert json.loads(path.read_text()) == {"authorUsername": "new"}

    def test_no_temp_files_left_behind(self, tmp_path):
        save_preferences(PreferenceRecord(author_username="a"), str(tmp_path / "prefs.json"))
        assert [p.name for p in tmp_path.iterdir()] == ["prefs.json"]

    def test_missing_directory_raises_persistence_error(self, tmp_path):
        path = tmp_path / "missing" / "prefs.json"
        with pytest.raises(PersistenceError) as exc_info:
            save_preferences(PreferenceRecord(author_username="a"), str(path))
        assert exc_info.value.exit_code == 1
        assert "Could not save preferences" in str(exc_info.value)

    def test_replace_failure_cleans_up(self, tmp_path):
        path = tmp_path / "prefs.json"
        with patch("clawusecase_cli.prefs.os.replace", side_effect=OSError("disk full")):
            with pytest.raises(PersistenceError) as exc_info:
                save_preferences(PreferenceRecord(author_username="a"), str(path))
        assert "disk full" in str(exc_info.value)
        assert list(tmp_path.iterdir()) == []
