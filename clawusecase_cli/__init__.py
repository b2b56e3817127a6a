"""clawusecase-cli: CLI tool for submitting use cases to clawusecase.com."""

from clawusecase_cli.client import UsecaseClient
from clawusecase_cli.config import VERSION, Settings, load_settings
from clawusecase_cli.exceptions import (
    CliError,
    ConfigError,
    PersistenceError,
    TransportError,
    ValidationError,
)
from clawusecase_cli.models import SubmissionRecord
from clawusecase_cli.prefs import PreferenceRecord

__all__ = [
    "VERSION",
    "UsecaseClient",
    "Settings",
    "load_settings",
    "CliError",
    "ConfigError",
    "PersistenceError",
    "TransportError",
    "ValidationError",
    "SubmissionRecord",
    "PreferenceRecord",
]
