"""
clawusecase-cli exception hierarchy.

All custom exceptions live here to avoid circular imports.
"""


class CliError(Exception):
    """Exit code 1: validation, network, persistence, parse errors."""

    exit_code = 1


class ConfigError(CliError):
    """A local JSON file could not be read. Reported as a warning, never fatal."""


class ValidationError(CliError):
    """One or more submission fields broke a length/presence rule."""

    def __init__(self, violations):
        self.violations = list(violations)
        lines = ["[ERROR] Validation failed:"]
        lines.extend(f"  - {v}" for v in self.violations)
        super().__init__("\n".join(lines))


class TransportError(CliError):
    """The API call failed: connection, non-success status, or bad body."""

    def __init__(self, message, classification="other", status=None, detail=None):
        super().__init__(message)
        self.classification = classification
        self.status = status
        self.detail = detail


class PersistenceError(CliError):
    """The preference file could not be written."""


class HTTPError(Exception):
    """Raised by _http_request for HTTP errors that callers want to handle."""

    def __init__(self, code, reason, body, headers=None):
        self.code = code
        self.reason = reason
        self.body = body
        self.headers = headers or {}
