"""
clawusecase-cli shared configuration, constants, and module-level state.
Only imports from exceptions.py and _utils.py.
"""

import os
from dataclasses import dataclass

from clawusecase_cli._utils import read_json_object

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
_PROJECT_ROOT = os.path.dirname(_PACKAGE_DIR)

CONFIG_PATH = os.path.join(_PROJECT_ROOT, "config.json")
PREFS_FILENAME = ".clawusecase.json"

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

VERSION = "0.1.0"

DEFAULT_API_URL = "clawusecase.com"
DEFAULT_API_PATH = "/api/submissions"
DEFAULT_CONVEX_URL = "benevolent-tortoise-657.convex.cloud"
CONVEX_QUERY_PATH = "/api/query"

DEV_PORT = 3000
SECURE_PORT = 443

DEFAULT_AUTHOR_PLATFORM = "twitter"
ANONYMOUS_AUTHOR = {
    "author_username": "anonymous",
    "author_handle": "Anonymous",
    "author_platform": "anonymous",
}

# Minimum lengths for free-text fields, in validation order.
MIN_LENGTHS = (
    ("title", "Title", 20),
    ("hook", "Hook", 50),
    ("problem", "Problem", 100),
    ("solution", "Solution", 200),
)

# ---------------------------------------------------------------------------
# Environment helpers
# ---------------------------------------------------------------------------


def _env_str(environ, key):
    """Return a non-empty env value, or None."""
    raw = environ.get(key)
    if raw is None or not raw.strip():
        return None
    return raw.strip()


def _env_bool(key, default=False, environ=None):
    """Parse common boolean env formats."""
    raw = (os.environ if environ is None else environ).get(key)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def load_config_file(path=None):
    """Read the repository-level config.json.

    Returns a JsonLoad; a missing file is an empty, error-free result.
    """
    return read_json_object(path or CONFIG_PATH, "config file")


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Settings:
    """Resolved API targets. Precedence: environment > config.json > default."""

    api_url: str = DEFAULT_API_URL
    api_path: str = DEFAULT_API_PATH
    convex_url: str = DEFAULT_CONVEX_URL
    prefs_path: str = PREFS_FILENAME


def load_settings(environ=None, config_path=None, warn=None):
    """Build Settings from the environment and config.json.

    *warn* is called with a message when config.json exists but cannot be
    parsed; the file is then treated as empty.
    """
    environ = os.environ if environ is None else environ
    loaded = load_config_file(config_path)
    if loaded.error and warn is not None:
        warn(str(loaded.error))
    file_cfg = loaded.data

    def pick(env_key, file_key, default):
        value = _env_str(environ, env_key)
        if value is not None:
            return value
        file_value = file_cfg.get(file_key)
        if isinstance(file_value, str) and file_value.strip():
            return file_value.strip()
        return default

    return Settings(
        api_url=pick("CLAWUSECASE_API_URL", "apiUrl", DEFAULT_API_URL),
        api_path=pick("CLAWUSECASE_API_PATH", "apiPath", DEFAULT_API_PATH),
        convex_url=pick("CONVEX_URL", "convexUrl", DEFAULT_CONVEX_URL),
        prefs_path=_env_str(environ, "CLAWUSECASE_PREFS_PATH") or PREFS_FILENAME,
    )


# ---------------------------------------------------------------------------
# Runtime flags (set by cli.main)
# ---------------------------------------------------------------------------

HTTP_LOG_ENABLED = _env_bool("CLAWUSECASE_HTTP_LOG", False)
RUNTIME_QUIET = False
