"""Install scripts/pre-commit-hook as .git/hooks/pre-commit."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from flowmates.sync.models import HookAction, SyncReport

logger = logging.getLogger(__name__)

HOOK_TEMPLATE = Path("scripts/pre-commit-hook")
GIT_HOOKS_DIR = Path(".git/hooks")
HOOK_MODE = 0o755


def install_pre_commit_hook(root: Path, force: bool, report: SyncReport) -> HookAction | None:
    """Copy the hook template into .git/hooks and make it executable.

    Sets and returns report.hook_action. A copy failure is recorded as an
    error and leaves hook_action unset; a chmod failure is only a warning.
    """
    template = root / HOOK_TEMPLATE
    hooks_dir = root / GIT_HOOKS_DIR
    dest = hooks_dir / "pre-commit"

    if not template.exists():
        report.hook_action = "not_found"
        return report.hook_action

    if not hooks_dir.is_dir():
        report.hook_action = "not_git"
        return report.hook_action

    existed = dest.exists()
    if existed and not force:
        report.hook_action = "skipped"
        return report.hook_action

    try:
        shutil.copyfile(template, dest)
    except OSError as e:
        report.errors.append(f"Failed to copy git hook: {e}")
        return None

    try:
        dest.chmod(HOOK_MODE)
    except OSError as e:
        report.warnings.append(f"Failed to make hook executable: {e}")

    report.hook_action = "updated" if existed else "installed"
    logger.info("git pre-commit hook %s", report.hook_action)
    return report.hook_action
