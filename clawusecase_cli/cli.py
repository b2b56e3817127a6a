"""
clawusecase-cli: submit use cases to clawusecase.com from the command line
"""

import sys

from clawusecase_cli import config
from clawusecase_cli.client import UsecaseClient
from clawusecase_cli.commands import cmd_get_credential, cmd_submit
from clawusecase_cli.exceptions import CliError, TransportError
from clawusecase_cli.formatters import failure_hints

HELP_TEXT = """\
Usage: clawusecase [submit] --title <text> --hook <text> ... [flags]
       clawusecase get-credential --token <token>

Global flags:
  --quiet, -q             Suppress progress messages and warnings
  --verbose, -v           Enable HTTP request logging
  --version               Show version number
  --help, -h              Show this help

Commands:
  submit                  - Submit a use case (default when the first argument is a flag)
    --title <text>          At least 20 characters
    --hook <text>           One-line teaser, at least 50 characters
    --problem <text>        At least 100 characters
    --solution <text>       At least 200 characters
    --category <name>       e.g. "Business/SaaS"
    --skills <list>         Comma-separated tools (e.g. GitHub,Stripe,Resend)
    --requirements <text>   Accounts or setup needed (optional)
    --author-username <u>   Required unless stored or --anonymous
    --author-handle <h>     Display handle
    --author-platform <p>   twitter (default), github, ...
    --author-link <url>     Profile link
    --anonymous             Submit without author identity
  get-credential          - Retrieve an OAuth credential after sign-in
    --token <token>         Token from the OAuth link

Author fields are remembered in ./.clawusecase.json after the first
successful submission.

Environment:
  CLAWUSECASE_API_URL     API host (default: clawusecase.com)
  CLAWUSECASE_API_PATH    API path (default: /api/submissions)
  CONVEX_URL              Credential backend host
  CLAWUSECASE_HTTP_LOG    1 to log HTTP requests to stderr
"""

COMMANDS = {
    "submit": cmd_submit,
    "get-credential": cmd_get_credential,
}

_GLOBAL_FLAGS = {"--version", "--quiet", "-q", "--verbose", "-v", "--help", "-h"}

# Failure hints only make sense for the command that hits the submissions API.
_HINTED_COMMANDS = {"submit"}


# ---------------------------------------------------------------------------
# Argument normalization
# ---------------------------------------------------------------------------


def _canonical_key(token):
    return token[2:].replace("-", "_")


def normalize_args(tokens):
    """Turn ``--key value`` / ``--flag`` tokens into a dict. Never raises.

    A ``--flag`` followed by another ``--...`` token (or nothing) becomes
    True. Stray tokens that are not a consumed value are ignored.
    """
    parsed = {}
    i = 0
    while i < len(tokens):
        token = tokens[i]
        if not token.startswith("--"):
            i += 1
            continue
        key = _canonical_key(token)
        if i + 1 >= len(tokens) or tokens[i + 1].startswith("--"):
            parsed[key] = True
            i += 1
            continue
        parsed[key] = tokens[i + 1]
        i += 2
    return parsed


def _extract_global_flags(argv):
    """Extract global flags from argv regardless of position.

    Returns (quiet, verbose, show_help, remaining_argv).
    Handles --version directly. The token after a ``--key`` option is its
    value and is never read as a global flag, so ``--requirements -v``
    keeps "-v" as the requirements text.
    """
    quiet = False
    verbose = False
    show_help = False
    remaining = []
    i = 0
    while i < len(argv):
        arg = argv[i]
        i += 1
        if (
            arg.startswith("--")
            and arg not in _GLOBAL_FLAGS
            and i < len(argv)
            and not argv[i].startswith("--")
        ):
            remaining.extend((arg, argv[i]))
            i += 1
        elif arg == "--version":
            print(f"clawusecase-cli {config.VERSION}")
            sys.exit(0)
        elif arg in ("--quiet", "-q"):
            quiet = True
        elif arg in ("--verbose", "-v"):
            verbose = True
        elif arg in ("--help", "-h"):
            show_help = True
        else:
            remaining.append(arg)
    if quiet and verbose:
        raise CliError("[ERROR] --quiet and --verbose are mutually exclusive.")
    return quiet, verbose, show_help, remaining


def _split_command(argv):
    """Return (command, rest). Bare flags mean ``submit``."""
    if not argv:
        return None, []
    if argv[0].startswith("--"):
        return "submit", argv
    return argv[0], argv[1:]


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------


def _emit_cli_error(err, command=None):
    print(str(err), file=sys.stderr)
    if isinstance(err, TransportError) and command in _HINTED_COMMANDS:
        for line in failure_hints(err.classification):
            print(line, file=sys.stderr)


def main(argv=None):
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")

    argv = sys.argv[1:] if argv is None else list(argv)
    command = None
    try:
        quiet, verbose, show_help, remaining = _extract_global_flags(argv)
        config.RUNTIME_QUIET = quiet
        if verbose:
            config.HTTP_LOG_ENABLED = True

        command, rest = _split_command(remaining)
        if show_help or command in (None, "help"):
            print(HELP_TEXT)
            return
        if command == "version":
            print(f"clawusecase-cli {config.VERSION}")
            return

        handler = COMMANDS.get(command)
        if handler is None:
            raise CliError(f"[ERROR] Unknown command: {command}\n  Run: clawusecase --help")
        handler(normalize_args(rest), UsecaseClient())

    except CliError as e:
        _emit_cli_error(e, command)
        sys.exit(e.exit_code)


if __name__ == "__main__":
    main()
