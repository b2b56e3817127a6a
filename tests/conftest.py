"""
Shared test fixtures for clawusecase-cli tests.
Resets config state, isolates the working directory, and provides a local
stub API server so no test touches the real network.
"""

import json
import os
import sys
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

# Add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

_ENV_KEYS = [
    "CLAWUSECASE_API_URL",
    "CLAWUSECASE_API_PATH",
    "CLAWUSECASE_PREFS_PATH",
    "CLAWUSECASE_HTTP_LOG",
    "CONVEX_URL",
]


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch, tmp_path):
    """Ensure every test starts with a clean config state.
    Prevents tests from reading a real config.json or preference file."""
    from clawusecase_cli import config

    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(config, "CONFIG_PATH", str(tmp_path / "no-config.json"))
    monkeypatch.setattr(config, "RUNTIME_QUIET", False)
    monkeypatch.setattr(config, "HTTP_LOG_ENABLED", False)
    monkeypatch.chdir(tmp_path)


def valid_fields(**overrides):
    """Normalized CLI fields that pass every validation rule."""
    fields = {
        "title": "Email notifications for Pro subscriptions",
        "hook": "Sends welcome emails automatically whenever someone upgrades to Pro",
        "problem": (
            "Users were not getting confirmation emails after upgrading, so support "
            "tickets piled up and nobody knew whether payment had gone through."
        ),
        "solution": (
            "Built a Resend integration triggered by Stripe webhooks. When a "
            "checkout.session.completed event arrives the assistant renders a welcome "
            "template, sends it through Resend, and records the message id on the "
            "customer so retries never send duplicates."
        ),
        "category": "Business/SaaS",
        "skills": "GitHub, Stripe,Resend",
        "author_username": "josephliow",
    }
    fields.update(overrides)
    return fields


def valid_argv(**overrides):
    """The same fields as valid_fields(), as command-line tokens."""
    argv = []
    for key, value in valid_fields(**overrides).items():
        if value is None:
            continue
        argv.append("--" + key.replace("_", "-"))
        if value is not True:
            argv.append(value)
    return argv


class StubServer:
    """Records POSTs and answers with a configurable status and body."""

    def __init__(self):
        self.status = 201
        self.body = json.dumps({"id": "123"})
        self.requests = []
        self.host = ""

    def respond(self, status, body):
        self.status = status
        self.body = body if isinstance(body, str) else json.dumps(body)


@pytest.fixture
def stub_server(monkeypatch):
    """A threaded HTTP server on 127.0.0.1 standing in for the remote API."""
    stub = StubServer()

    class Handler(BaseHTTPRequestHandler):
        def do_POST(self):
            length = int(self.headers.get("Content-Length", "0"))
            raw = self.rfile.read(length).decode("utf-8")
            stub.requests.append(
                {
                    "path": self.path,
                    "headers": {k.lower(): v for k, v in self.headers.items()},
                    "body": json.loads(raw),
                }
            )
            data = stub.body.encode("utf-8")
            self.send_response(stub.status)
            self.send_header("Content-Type", "application/json")
            self.send_header("Content-Length", str(len(data)))
            self.end_headers()
            self.wfile.write(data)

        def log_message(self, format, *args):
            pass

    server = ThreadingHTTPServer(("127.0.0.1", 0), Handler)
    stub.host = f"127.0.0.1:{server.server_address[1]}"
    monkeypatch.setenv("NO_PROXY", "*")
    monkeypatch.setenv("no_proxy", "*")
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield stub
    finally:
        server.shutdown()
        server.server_close()
