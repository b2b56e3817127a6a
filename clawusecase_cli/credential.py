"""
OAuth credential lookup against the Convex query endpoint.

After a user finishes the OAuth flow in the browser, the backend stores the
credential under a one-time token. ``get-credential --token`` polls for it.
"""

from clawusecase_cli import config
from clawusecase_cli.api import _log_http_event, _mask_token, post_json, resolve_target
from clawusecase_cli.exceptions import CliError, TransportError

CREDENTIAL_FUNCTION = "oauth:getToken"

PENDING_HINT = "Make sure the user has clicked the OAuth link and authorized the app."


def query_convex(host, function_name, args):
    """Run a Convex query function. Only HTTP 200 counts as success."""
    target = resolve_target(host, config.CONVEX_QUERY_PATH)
    body = {"path": function_name, "args": [args], "format": "json"}
    return post_json(target, body, ok_statuses=(200,))


def extract_credential(result):
    """Pull the credential out of a query result or explain why it is missing."""
    value = result.get("value") if isinstance(result, dict) else None
    if not value:
        raise CliError("[ERROR] Token not found or expired")
    credential = value.get("credential") if isinstance(value, dict) else None
    if not credential:
        raise CliError(f"[ERROR] Authentication not yet completed\n{PENDING_HINT}")
    return credential


def fetch_credential(host, token):
    """Look up the credential stored under *token*."""
    _log_http_event(
        phase="credential_lookup", function=CREDENTIAL_FUNCTION, token=_mask_token(token)
    )
    outcome = query_convex(host, CREDENTIAL_FUNCTION, {"token": token})
    if not outcome.ok:
        raise TransportError(
            f"[ERROR] Failed to retrieve credential: {outcome.message}",
            classification=outcome.classification,
            status=outcome.status,
            detail=outcome.message,
        )
    return extract_credential(outcome.body)
