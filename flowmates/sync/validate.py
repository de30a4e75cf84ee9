"""Read-only check of the final on-disk layout after init."""

from __future__ import annotations

from pathlib import Path

from flowmates.sync.models import SyncReport
from flowmates.sync.sources import RULE_EXTENSION
from flowmates.sync.workflow import SHARED_TEMPLATES_DIR, workflow_dirs

RULES_DEST = Path(".cursor/rules")
TEMPLATE_EXTENSION = ".md"


def _count_suffix(directory: Path, suffix: str) -> int:
    try:
        return sum(1 for p in directory.iterdir() if p.suffix == suffix)
    except OSError:
        return 0


def validate_setup(root: Path, project_name: str, report: SyncReport) -> None:
    """Re-check what is actually on disk, independent of what was recorded.

    Appends errors and warnings to the report; never touches the filesystem.
    """
    rules_dir = root / RULES_DEST
    if not rules_dir.exists():
        report.errors.append(f"Rules directory not found: {RULES_DEST}/")
    elif _count_suffix(rules_dir, RULE_EXTENSION) == 0:
        report.warnings.append(f"No {RULE_EXTENSION} rule files found in {RULES_DEST}/")

    for rel in workflow_dirs(project_name):
        if not (root / rel).exists():
            report.errors.append(f"Required directory missing: {rel}")

    templates_dir = root / SHARED_TEMPLATES_DIR
    if templates_dir.exists() and _count_suffix(templates_dir, TEMPLATE_EXTENSION) == 0:
        report.warnings.append(f"No template files found in {SHARED_TEMPLATES_DIR}/")
