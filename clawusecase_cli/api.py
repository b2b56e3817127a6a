"""
HTTP transport for clawusecase-cli: target resolution, a single JSON POST,
and outcome classification.
"""

import http.client
import json
import re
import sys
import time
import urllib.error
import urllib.request
import uuid

from clawusecase_cli import config
from clawusecase_cli.exceptions import HTTPError
from clawusecase_cli.models import OTHER, ApiTarget, Failure, Success, classify_status

_LOOPBACK_RE = re.compile(r"^(localhost|127(\.\d{1,3}){3}|0\.0\.0\.0|::1)$", re.IGNORECASE)
_HOST_PORT_RE = re.compile(r"^(?P<host>\[[^\]]*\]|[^:\[\]]+)(?::(?P<port>\d+))?$")


# ---------------------------------------------------------------------------
# Security helpers
# ---------------------------------------------------------------------------


def _mask_token(token):
    """Show only first 6 chars of a token for safe logging."""
    return token[:6] + "..." if len(token) > 6 else token


def _sanitize_error(body, max_len=500):
    """Truncate and clean error body for safe display."""
    if not body:
        return ""
    cleaned = re.sub(r"<[^>]+>", "", body)
    cleaned = re.sub(r"\s+", " ", cleaned).strip()
    if len(cleaned) > max_len:
        return cleaned[:max_len] + "... [truncated]"
    return cleaned


def _log_http_event(**fields):
    """Emit structured HTTP logs to stderr when enabled."""
    if not config.HTTP_LOG_ENABLED:
        return
    print("[HTTP] " + json.dumps(fields, ensure_ascii=False, sort_keys=True), file=sys.stderr)


# ---------------------------------------------------------------------------
# Target resolution
# ---------------------------------------------------------------------------


def is_loopback(hostname):
    return bool(_LOOPBACK_RE.match(hostname or ""))


def split_host_port(host):
    """Split ``host[:port]`` (or ``[v6]:port``) into (hostname, port or None)."""
    m = _HOST_PORT_RE.match(host)
    if not m:
        return host, None
    hostname = m.group("host")
    if hostname.startswith("["):
        hostname = hostname[1:-1]
    port = int(m.group("port")) if m.group("port") else None
    return hostname, port


def resolve_target(host, path):
    """Work out scheme, hostname and port for an API host string.

    Loopback hosts use plain HTTP on the development port, anything else
    HTTPS on 443. A ``:port`` suffix overrides either default, and an
    explicit ``http://`` or ``https://`` prefix overrides the scheme.
    """
    host = host.strip()
    scheme = None
    if "://" in host:
        scheme, _, host = host.partition("://")
        scheme = scheme.lower()
        if scheme not in ("http", "https"):
            scheme = None
    host = host.split("/", 1)[0]
    hostname, port = split_host_port(host)
    loopback = is_loopback(hostname)
    if scheme is None:
        scheme = "http" if loopback else "https"
    if port is None:
        if scheme == "https":
            port = config.SECURE_PORT
        else:
            port = config.DEV_PORT if loopback else 80
    if not path.startswith("/"):
        path = "/" + path
    return ApiTarget(scheme=scheme, hostname=hostname, port=port, path=path)


# ---------------------------------------------------------------------------
# HTTP request layer
# ---------------------------------------------------------------------------


def _http_request(url, body, headers, method="POST"):
    """Send one request and return (status, response text).

    Raises HTTPError for error statuses. Connection problems propagate as
    OSError / http.client.HTTPException."""
    req = urllib.request.Request(url, data=body, headers=headers, method=method)
    try:
        with urllib.request.urlopen(req) as resp:
            return resp.status, resp.read().decode("utf-8", errors="replace")
    except urllib.error.HTTPError as e:
        error_body = e.read().decode("utf-8", errors="replace") if e.fp else ""
        raise HTTPError(e.code, e.reason, error_body, headers=e.headers) from e


def post_json(target, body, ok_statuses=(200, 201)):
    """POST *body* as JSON to *target* and return a Success or Failure."""
    payload = json.dumps(body).encode("utf-8")
    request_id = str(uuid.uuid4())
    headers = {
        "Content-Type": "application/json",
        "Content-Length": str(len(payload)),
        "Accept": "application/json",
        "X-Request-Id": request_id,
    }
    url = target.url
    start = time.perf_counter()
    _log_http_event(
        phase="request", method="POST", url=url, bytes=len(payload), request_id=request_id
    )
    try:
        status, raw = _http_request(url, payload, headers)
    except HTTPError as e:
        status, raw = e.code, e.body
    except (OSError, http.client.HTTPException) as e:
        reason = getattr(e, "reason", None) or e
        _log_http_event(
            phase="network_error", method="POST", url=url, error=str(reason), request_id=request_id
        )
        return Failure(OTHER, f"Request failed: {reason}")

    _log_http_event(
        phase="response",
        method="POST",
        url=url,
        status=status,
        bytes=len(raw),
        latency_ms=round((time.perf_counter() - start) * 1000, 2),
        request_id=request_id,
    )
    classification = OTHER if status in ok_statuses else classify_status(status)
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError:
        return Failure(
            classification, f"Failed to parse response: {_sanitize_error(raw)}", status
        )
    if status in ok_statuses:
        return Success(parsed)
    error = parsed.get("error") if isinstance(parsed, dict) else None
    message = str(error) if error else f"HTTP {status}: {_sanitize_error(raw)}"
    return Failure(classification, message, status)
