"""
UsecaseClient: public Python API for submitting use cases and fetching
OAuth credentials.

Single entry point for the CLI commands and the MCP server. Methods return
plain JSON-compatible values and raise CliError subclasses on failure.
"""

from __future__ import annotations

from typing import Any

from clawusecase_cli import config
from clawusecase_cli.api import post_json, resolve_target
from clawusecase_cli.compose import compose_submission, ignored_fields
from clawusecase_cli.credential import fetch_credential
from clawusecase_cli.exceptions import TransportError, ValidationError
from clawusecase_cli.formatters import warn as _print_warning
from clawusecase_cli.models import SubmissionRecord
from clawusecase_cli.prefs import (
    PreferenceRecord,
    load_preferences,
    save_preferences,
)
from clawusecase_cli.validation import validate


class UsecaseClient:
    """Submit use cases to the clawusecase API.

    Args:
        settings: Resolved API targets. Loaded from env/config.json if omitted.
        prefs_path: Preference file location. Defaults to settings.prefs_path.
        warn: Callable receiving non-fatal warning messages.
    """

    def __init__(self, settings: config.Settings | None = None, *, prefs_path=None, warn=None):
        self._warn = warn or _print_warning
        self.settings = settings or config.load_settings(warn=self._warn)
        self.prefs_path = prefs_path or self.settings.prefs_path

    # -- preferences --------------------------------------------------------

    def load_preferences(self) -> PreferenceRecord:
        """Read stored author defaults, falling back to an empty record."""
        loaded = load_preferences(self.prefs_path)
        if loaded.error:
            self._warn(f"{loaded.error}. Ignoring stored preferences.")
        return loaded.record

    def _remember_author(self, record: SubmissionRecord, stored: PreferenceRecord) -> bool:
        """Persist the author identity once. Returns True if the file was written."""
        if stored.author_username:
            return False
        if record.author_username == config.ANONYMOUS_AUTHOR["author_username"]:
            return False
        save_preferences(
            PreferenceRecord(
                author_username=record.author_username,
                author_handle=record.author_handle,
                author_platform=record.author_platform,
                author_link=record.author_link,
            ),
            self.prefs_path,
        )
        return True

    # -- submission ---------------------------------------------------------

    def prepare(self, fields: dict[str, Any]) -> tuple[SubmissionRecord, PreferenceRecord]:
        """Compose and validate a submission without sending it.

        Raises ValidationError listing every violated rule.
        """
        stored = self.load_preferences()
        for name in ignored_fields(fields):
            self._warn(f"--{name.replace('_', '-')} is derived automatically and was ignored.")
        record = compose_submission(fields, stored)
        violations = validate(record)
        if violations:
            raise ValidationError(violations)
        return record, stored

    def send(self, record: SubmissionRecord, stored: PreferenceRecord) -> Any:
        """POST a validated record. Saves the author identity on first success."""
        target = resolve_target(self.settings.api_url, self.settings.api_path)
        outcome = post_json(target, record.to_payload())
        if not outcome.ok:
            raise TransportError(
                f"[ERROR] Submission failed: {outcome.message}",
                classification=outcome.classification,
                status=outcome.status,
                detail=outcome.message,
            )
        self._remember_author(record, stored)
        return outcome.body

    def submit(self, fields: dict[str, Any]) -> Any:
        """Compose, validate and send a submission. Returns the API response body."""
        record, stored = self.prepare(fields)
        return self.send(record, stored)

    # -- credentials --------------------------------------------------------

    def get_credential(self, token: str) -> Any:
        """Return the OAuth credential stored under *token*."""
        return fetch_credential(self.settings.convex_url, token)
