# smoke_runner/readiness.py
# Purpose: Pre-deployment checklist. Inspects the repository root and environment
#          variables, prints one line per check, and never changes anything.
#
# Env Vars:
#   - READINESS_REQUIRED_ENV : comma-separated variables to check (default DATABASE_URL,JWT_SECRET)
#
# Dependencies: the requirements declared by the installed project distribution are
# looked up with importlib.metadata; missing ones are reported, never installed.
#
# Usage:
#   python -m smoke_runner.readiness            # checks the current directory
#   python -m smoke_runner.readiness /path/to/repo
#
# Exit code: 1 if any check FAILs (missing packaging file), else 0.

import argparse
import os
import re
import sys
from importlib import metadata
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Mapping, Optional, Sequence

from .config import settings

PACKAGING_FILE = "pyproject.toml"
PROJECT_DIST = "status-smoke-platform"

_REQ_NAME_RE = re.compile(r"^\s*([A-Za-z0-9][A-Za-z0-9._-]*)")


class CheckLevel(str, Enum):
    OK = "ok"
    WARN = "warn"
    FAIL = "fail"


@dataclass(frozen=True)
class CheckItem:
    name: str
    level: CheckLevel
    detail: str

    def line(self) -> str:
        return f"[{self.level.value}] {self.name}: {self.detail}"


def _check_git(root: Path) -> CheckItem:
    if (root / ".git").is_dir():
        return CheckItem("git", CheckLevel.OK, "git repository found")
    return CheckItem("git", CheckLevel.WARN, "git repository not found; initialize and push before deploying")


def _check_packaging(root: Path) -> CheckItem:
    if (root / PACKAGING_FILE).is_file():
        return CheckItem("packaging", CheckLevel.OK, f"{PACKAGING_FILE} found")
    return CheckItem("packaging", CheckLevel.FAIL, f"{PACKAGING_FILE} not found in {root}")


def declared_requirements(dist: str = PROJECT_DIST) -> Optional[List[str]]:
    """Return the runtime requirement names of an installed distribution, or None if it is not installed."""
    try:
        requires = metadata.requires(dist) or []
    except metadata.PackageNotFoundError:
        return None
    names = []
    for req in requires:
        # optional extras (e.g. test) are not needed at runtime
        if "extra" in req.partition(";")[2]:
            continue
        m = _REQ_NAME_RE.match(req)
        if m:
            names.append(m.group(1))
    return names


def _check_dependencies(required_dists: Optional[Sequence[str]]) -> CheckItem:
    if required_dists is None:
        return CheckItem(
            "dependencies", CheckLevel.WARN,
            f"{PROJECT_DIST} is not installed; install it with: pip install -e .",
        )
    missing = []
    for name in required_dists:
        try:
            metadata.version(name)
        except metadata.PackageNotFoundError:
            missing.append(name)
    if missing:
        return CheckItem(
            "dependencies", CheckLevel.WARN,
            f"missing: {', '.join(missing)}; install with: pip install {' '.join(missing)}",
        )
    return CheckItem("dependencies", CheckLevel.OK, f"{len(required_dists)} declared requirements installed")


def _check_env(name: str, env: Mapping[str, str]) -> CheckItem:
    if (env.get(name) or "").strip():
        return CheckItem(name, CheckLevel.OK, "configured")
    return CheckItem(name, CheckLevel.WARN, "not set; set it in your deployment platform")


def run_checklist(
    root: Path,
    env: Optional[Mapping[str, str]] = None,
    required_env: Optional[Sequence[str]] = None,
    required_dists: Optional[Sequence[str]] = None,
) -> List[CheckItem]:
    """Return one CheckItem per check, in a fixed order.

    required_dists defaults to the requirements declared by the installed project.
    """
    env = os.environ if env is None else env
    required = settings.required_env if required_env is None else list(required_env)
    dists = declared_requirements() if required_dists is None else list(required_dists)
    items = [_check_git(root), _check_packaging(root), _check_dependencies(dists)]
    items.extend(_check_env(name, env) for name in required)
    return items


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Deployment readiness checklist (read-only).")
    ap.add_argument("root", nargs="?", default=".", help="Repository root to inspect")
    args = ap.parse_args(argv)

    root = Path(args.root).resolve()
    print(f"[run] Preparing for deployment: {root}")
    items = run_checklist(root)
    for item in items:
        print(item.line())

    failed = [i for i in items if i.level is CheckLevel.FAIL]
    warned = [i for i in items if i.level is CheckLevel.WARN]
    print(f"[done] checks={len(items)} warnings={len(warned)} failures={len(failed)}")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
