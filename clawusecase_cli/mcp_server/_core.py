"""Core helpers: client caching, _call dispatcher, error envelope."""

from __future__ import annotations

from clawusecase_cli import CliError, UsecaseClient, ValidationError
from clawusecase_cli.exceptions import TransportError

_client: UsecaseClient | None = None

_warnings: list[str] = []


def _collect_warning(message: str) -> None:
    _warnings.append(message)


def _get_client() -> UsecaseClient:
    """Return a cached UsecaseClient, creating one on first use."""
    global _client
    if _client is None:
        _client = UsecaseClient(warn=_collect_warning)
    return _client


def _contract_error(message: str, error_type: str = "error", **extra) -> dict:
    """Return a stable MCP error envelope."""
    out = {"ok": False, "type": error_type, "error": message}
    out.update(extra)
    return out


_ALLOWED_METHODS = {"submit", "get_credential"}


def _call(method_name: str, *args, **kwargs):
    """Call a UsecaseClient method, converting exceptions to error dicts."""
    if method_name not in _ALLOWED_METHODS:
        return _contract_error(f"Unknown method: {method_name}")
    _warnings.clear()
    try:
        result = getattr(_get_client(), method_name)(*args, **kwargs)
    except ValidationError as e:
        return _contract_error(str(e), "validation", violations=e.violations)
    except TransportError as e:
        return _contract_error(str(e), e.classification, status=e.status)
    except CliError as e:
        return _contract_error(str(e), "error")
    except Exception as e:
        return _contract_error(f"Unexpected error: {e}", "error")
    out = {"ok": True, "result": result}
    if _warnings:
        out["warnings"] = list(_warnings)
    return out
