"""Run lint, format, type and test checks for clawusecase-cli and report JSON.

Usage:
    python scripts/quality_gate.py              # run everything
    python scripts/quality_gate.py --skip-tests # lint + types only
    python scripts/quality_gate.py --fix        # let ruff fix what it can first
"""

from __future__ import annotations

import argparse
import json
import re
import subprocess
import sys
import time
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent

MYPY_TARGETS = [
    "clawusecase_cli/_utils.py",
    "clawusecase_cli/api.py",
    "clawusecase_cli/client.py",
    "clawusecase_cli/compose.py",
    "clawusecase_cli/exceptions.py",
    "clawusecase_cli/models.py",
    "clawusecase_cli/prefs.py",
    "clawusecase_cli/validation.py",
]


def _run(cmd: list[str]) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, "-m", *cmd],
        capture_output=True,
        text=True,
        cwd=str(ROOT),
        timeout=300,
    )


def _count(pattern: str, text: str) -> int:
    return sum(1 for line in text.splitlines() if re.search(pattern, line))


def _result(r: subprocess.CompletedProcess, started: float, **extra: object) -> dict:
    out: dict = {
        "status": "pass" if r.returncode == 0 else "fail",
        "duration_s": round(time.monotonic() - started, 1),
    }
    out.update(extra)
    if r.returncode != 0:
        out["output"] = (r.stdout + r.stderr).strip()[-2000:]
    return out


def check_ruff_lint(fix: bool = False) -> dict:
    t0 = time.monotonic()
    if fix:
        _run(["ruff", "check", "--fix", "."])
    r = _run(["ruff", "check", "."])
    return _result(r, t0, errors=_count(r"^\S+:\d+:\d+:", r.stdout))


def check_ruff_format() -> dict:
    t0 = time.monotonic()
    r = _run(["ruff", "format", "--check", "."])
    return _result(r, t0, files_to_reformat=_count(r"^Would reformat", r.stdout + r.stderr))


def check_mypy() -> dict:
    t0 = time.monotonic()
    r = _run(["mypy", *MYPY_TARGETS])
    return _result(r, t0, errors=_count(r": error:", r.stdout))


def check_pytest() -> dict:
    t0 = time.monotonic()
    r = _run(["pytest", "tests/", "-q", "--no-header", "--tb=short"])
    summary = r.stdout.strip().splitlines()[-1:] or [""]
    passed = re.search(r"(\d+)\s+passed", summary[0])
    failed = re.search(r"(\d+)\s+failed", summary[0])
    return _result(
        r,
        t0,
        passed=int(passed.group(1)) if passed else 0,
        failed=int(failed.group(1)) if failed else 0,
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Run all quality checks")
    parser.add_argument("--skip-tests", action="store_true", help="Skip pytest")
    parser.add_argument("--fix", action="store_true", help="Auto-fix ruff issues first")
    args = parser.parse_args()

    t0 = time.monotonic()
    checks: dict[str, dict] = {}
    print("Running ruff lint...", file=sys.stderr)
    checks["ruff_lint"] = check_ruff_lint(fix=args.fix)
    print("Running ruff format...", file=sys.stderr)
    checks["ruff_format"] = check_ruff_format()
    print("Running mypy...", file=sys.stderr)
    checks["mypy"] = check_mypy()
    if args.skip_tests:
        checks["pytest"] = {"status": "skip", "reason": "--skip-tests"}
    else:
        print("Running pytest...", file=sys.stderr)
        checks["pytest"] = check_pytest()

    ok = all(c["status"] in ("pass", "skip") for c in checks.values())
    result = {
        "overall": "pass" if ok else "fail",
        "checks": checks,
        "total_duration_s": round(time.monotonic() - t0, 1),
    }
    print(json.dumps(result, indent=2))
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
