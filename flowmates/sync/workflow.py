"""Issue workflow directory layout."""

from __future__ import annotations

import logging
from pathlib import Path

from flowmates.sync.models import SyncError

logger = logging.getLogger(__name__)

STAGES = ("proposal", "todo", "in_progress", "done")
SHARED_TEMPLATES_DIR = "issues/shared/templates"


def workflow_dirs(project_name: str) -> list[str]:
    """The five directories every project needs, relative to the repo root."""
    return [f"issues/{project_name}/{stage}" for stage in STAGES] + [SHARED_TEMPLATES_DIR]


def ensure_workflow_dirs(root: Path, project_name: str) -> list[str]:
    """Create missing workflow directories. Returns only the ones created."""
    created: list[str] = []
    for rel in workflow_dirs(project_name):
        path = root / rel
        if path.exists():
            continue
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise SyncError("create directory", rel, e) from e
        logger.debug("created %s", path)
        created.append(rel)
    return created
