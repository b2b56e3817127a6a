"""
Typed models for submissions, API targets, and transport outcomes.
"""

from dataclasses import dataclass, field

from clawusecase_cli.compose import build_implementation_prompt, slugify

# ---------------------------------------------------------------------------
# Transport outcome classifications
# ---------------------------------------------------------------------------

RATE_LIMITED = "rate_limited"
VALIDATION_REJECTED = "validation_rejected"
OTHER = "other"


def classify_status(status):
    """Map an HTTP status code to a failure classification."""
    if status == 429:
        return RATE_LIMITED
    if status == 400:
        return VALIDATION_REJECTED
    return OTHER


@dataclass(frozen=True)
class Success:
    body: object

    ok = True


@dataclass(frozen=True)
class Failure:
    classification: str
    message: str
    status: int | None = None

    ok = False


@dataclass(frozen=True)
class ApiTarget:
    """Resolved connection details for one endpoint."""

    scheme: str
    hostname: str
    port: int
    path: str

    @property
    def url(self) -> str:
        host = self.hostname
        if ":" in host and not host.startswith("["):
            host = f"[{host}]"
        return f"{self.scheme}://{host}:{self.port}{self.path}"


# ---------------------------------------------------------------------------
# Submission record
# ---------------------------------------------------------------------------


_WIRE_KEYS = (
    ("title", "title"),
    ("hook", "hook"),
    ("problem", "problem"),
    ("solution", "solution"),
    ("category", "category"),
    ("skills", "skills"),
    ("requirements", "requirements"),
    ("author_username", "authorUsername"),
    ("author_handle", "authorHandle"),
    ("author_platform", "authorPlatform"),
    ("author_link", "authorLink"),
)


@dataclass(frozen=True)
class SubmissionRecord:
    """A composed use-case submission.

    ``slug`` and ``implementation_prompt`` are derived from the other fields
    and are not constructor arguments, so they can never be set directly.
    """

    title: str | None = None
    hook: str | None = None
    problem: str | None = None
    solution: str | None = None
    category: str | None = None
    skills: tuple[str, ...] = field(default_factory=tuple)
    requirements: str | None = None
    author_username: str | None = None
    author_handle: str | None = None
    author_platform: str | None = None
    author_link: str | None = None

    @property
    def slug(self) -> str:
        return slugify(self.title or "")

    @property
    def implementation_prompt(self) -> str:
        return build_implementation_prompt(
            title=self.title or "",
            problem=self.problem or "",
            solution=self.solution or "",
            requirements=self.requirements,
            skills=self.skills,
        )

    def to_payload(self) -> dict:
        """Serialize to the wire JSON object. None-valued keys are omitted."""
        payload = {}
        for attr, key in _WIRE_KEYS:
            value = getattr(self, attr)
            if value is None:
                continue
            payload[key] = list(value) if attr == "skills" else value
        payload["slug"] = self.slug
        payload["implementationPrompt"] = self.implementation_prompt
        return payload
