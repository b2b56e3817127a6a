"""
Submission composition: merge CLI fields with stored preferences and
derive the slug and implementation prompt.
"""

import re

from clawusecase_cli import config
from clawusecase_cli._utils import _text

_WHITESPACE_RE = re.compile(r"\s+")
_SLUG_STRIP_RE = re.compile(r"[^A-Za-z0-9_-]")
_HYPHENS_RE = re.compile(r"-+")

REQUIREMENTS_PLACEHOLDER = "None specified"

PROMPT_TEMPLATE = """\
Implement the following use case: "{title}".

Problem:
{problem}

Solution:
{solution}

Requirements: {requirements}
Skills/tools: {skills}

Reproduce this setup step by step, asking for any credentials or accounts \
listed in the requirements before you start."""

AUTHOR_FIELDS = ("author_username", "author_handle", "author_platform", "author_link")

# Fields computed from the others; never accepted from the command line.
DERIVED_FIELDS = ("slug", "implementation_prompt")


def slugify(title):
    """Turn free text into a lowercase, hyphen-delimited URL slug."""
    slug = (title or "").lower().strip()
    slug = _WHITESPACE_RE.sub("-", slug)
    slug = _SLUG_STRIP_RE.sub("", slug)
    slug = _HYPHENS_RE.sub("-", slug)
    return slug.strip("-")


def parse_skills(raw):
    """Split a comma-separated skills string into trimmed, non-empty names."""
    if not isinstance(raw, str):
        return ()
    return tuple(s.strip() for s in raw.split(",") if s.strip())


def build_implementation_prompt(title, problem, solution, requirements, skills):
    return PROMPT_TEMPLATE.format(
        title=title,
        problem=problem,
        solution=solution,
        requirements=requirements or REQUIREMENTS_PLACEHOLDER,
        skills=", ".join(skills),
    )


def resolve_author(args, prefs):
    """Pick author fields: CLI value > stored preference > default.

    Returns a dict keyed by AUTHOR_FIELDS. ``--anonymous`` ignores both the
    CLI author flags and the stored preferences.
    """
    if args.get("anonymous") is True:
        author = dict.fromkeys(AUTHOR_FIELDS)
        author.update(config.ANONYMOUS_AUTHOR)
        return author
    author = {}
    for name in AUTHOR_FIELDS:
        value = _text(args.get(name))
        if value is None:
            value = _text(getattr(prefs, name))
        author[name] = value
    if author["author_platform"] is None:
        author["author_platform"] = config.DEFAULT_AUTHOR_PLATFORM
    return author


def ignored_fields(args):
    """Return derived-field names the caller tried to supply directly."""
    return [name for name in DERIVED_FIELDS if name in args]


def compose_submission(args, prefs):
    """Build a SubmissionRecord from normalized CLI args and a PreferenceRecord."""
    from clawusecase_cli.models import SubmissionRecord

    return SubmissionRecord(
        title=_text(args.get("title")),
        hook=_text(args.get("hook")),
        problem=_text(args.get("problem")),
        solution=_text(args.get("solution")),
        category=_text(args.get("category")),
        skills=parse_skills(args.get("skills")),
        requirements=_text(args.get("requirements")),
        **resolve_author(args, prefs),
    )
