"""MCP server exposing UsecaseClient methods as tools.

Package structure:
  __init__.py : FastMCP init, tool definitions
  __main__.py : ``python -m clawusecase_cli.mcp_server`` entry point
  _core.py    : Client caching, _call dispatcher, error envelope

Run: python -m clawusecase_cli.mcp_server
Requires: pip install .[mcp]
"""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from clawusecase_cli.mcp_server._core import _call, _contract_error

mcp = FastMCP(
    "clawusecase",
    instructions=(
        "Submit real-world assistant use cases to clawusecase.com. "
        "Minimum lengths: title 20, hook 50, problem 100, solution 200 characters. "
        "Author identity is remembered after the first successful submission; "
        "pass anonymous=True to submit without one. "
        "Rate limit: 10 submissions per day."
    ),
)


@mcp.tool()
def submit_use_case(
    title: str,
    hook: str,
    problem: str,
    solution: str,
    category: str,
    skills: list[str] | str,
    requirements: str | None = None,
    author_username: str | None = None,
    author_handle: str | None = None,
    author_platform: str | None = None,
    author_link: str | None = None,
    anonymous: bool = False,
) -> dict:
    """Submit a use case. Validation runs locally before anything is sent.

    Args:
        title: Short title (min 20 chars).
        hook: One-line teaser (min 50 chars).
        problem: What was broken or missing (min 100 chars).
        solution: What was built and how (min 200 chars).
        category: Category such as "Business/SaaS".
        skills: Tools used, as a list or a comma-separated string.
        requirements: Accounts or setup a reader needs.
        author_username: Author username; falls back to stored preferences.
        author_handle: Display handle.
        author_platform: Platform for the handle (default twitter).
        author_link: Profile URL.
        anonymous: True to submit without author identity.

    Returns:
        Dict with ok and the API response under ``result``, or ok=False and error.
    """
    if isinstance(skills, list):
        skills = ",".join(str(s) for s in skills)
    fields = {
        "title": title,
        "hook": hook,
        "problem": problem,
        "solution": solution,
        "category": category,
        "skills": skills,
        "requirements": requirements,
        "author_username": author_username,
        "author_handle": author_handle,
        "author_platform": author_platform,
        "author_link": author_link,
    }
    fields = {k: v for k, v in fields.items() if v is not None}
    if anonymous:
        fields["anonymous"] = True
    return _call("submit", fields)


@mcp.tool()
def get_credential(token: str) -> dict:
    """Fetch the OAuth credential issued for *token* once the user has signed in.

    Args:
        token: Token embedded in the OAuth link given to the user.
    """
    if not token or not token.strip():
        return _contract_error("[ERROR] Missing token")
    return _call("get_credential", token.strip())


def main():
    """Run the MCP server (stdio transport)."""
    mcp.run()
