"""Project name and git root detection."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)

_GIT_TIMEOUT = 10


def _git(args: list[str], cwd: Path) -> str | None:
    """Run a git command and return stripped stdout, or None on any failure."""
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=_GIT_TIMEOUT,
        )
    except (FileNotFoundError, subprocess.TimeoutExpired, OSError) as e:
        logger.debug("git %s failed: %s", " ".join(args), e)
        return None

    if result.returncode != 0:
        logger.debug("git %s exited %d", " ".join(args), result.returncode)
        return None
    return result.stdout.strip()


def name_from_remote_url(url: str) -> str | None:
    """Last path segment of a remote URL with its .git suffix removed.

    Only URLs ending in .git yield a name.
    """
    last = url.strip().split("/")[-1]
    if last.endswith(".git") and len(last) > len(".git"):
        return last[: -len(".git")]
    return None


def detect_project_name(cwd: Path | None = None) -> str:
    """Name the project after its origin remote, else its directory."""
    cwd = cwd or Path.cwd()

    url = _git(["remote", "get-url", "origin"], cwd)
    if url:
        name = name_from_remote_url(url)
        if name:
            return name

    name = cwd.resolve().name
    if name == "flowmates":
        return "flowmates"
    return name or "project"


def find_git_root(start: Path | None = None) -> Path | None:
    """Top-level directory of the git work tree containing start."""
    out = _git(["rev-parse", "--show-toplevel"], start or Path.cwd())
    return Path(out) if out else None
