"""Console output helpers. stdout carries only successful JSON results."""

import json
import sys

from clawusecase_cli import config
from clawusecase_cli.models import RATE_LIMITED, VALIDATION_REJECTED

FAILURE_HINTS = {
    RATE_LIMITED: ("Rate limit reached (10 submissions per day)", "Try again tomorrow!"),
    VALIDATION_REJECTED: ("Validation error - check your inputs",),
}


def pretty_print(data):
    print(json.dumps(data, indent=2, ensure_ascii=False))


def output(data):
    """Write a successful result to stdout as indented JSON."""
    pretty_print(data)


def info(message):
    """Progress line on stderr, silenced by --quiet."""
    if not config.RUNTIME_QUIET:
        print(message, file=sys.stderr)


def warn(message):
    if not config.RUNTIME_QUIET:
        print(f"[WARN] {message}", file=sys.stderr)


def failure_hints(classification):
    return FAILURE_HINTS.get(classification, ())
