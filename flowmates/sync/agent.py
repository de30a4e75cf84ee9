"""Render AGENT.md from the source's template."""

from __future__ import annotations

import logging
from pathlib import Path

from flowmates.sync.models import SourceInfo, SyncError

logger = logging.getLogger(__name__)

AGENT_FILE = "AGENT.md"
AGENT_TEMPLATE = Path("templates/AGENT_REPO.template.md")
PROJECT_PLACEHOLDER = "{{PROJECT_NAME}}"


def agent_template_path(source: SourceInfo, home: Path) -> Path:
    if source.is_flowmates:
        return source.base_path / AGENT_TEMPLATE
    return home / ".cursor" / AGENT_TEMPLATE


def render_agent_template(content: str, project_name: str) -> str:
    return content.replace(PROJECT_PLACEHOLDER, project_name)


def create_agent_md(root: Path, template: Path, project_name: str, force: bool) -> bool:
    """Write AGENT.md from template. Returns True if the file was written.

    An existing AGENT.md is kept unless force is set.
    """
    dest = root / AGENT_FILE
    if dest.exists() and not force:
        return False

    try:
        content = template.read_text(encoding="utf-8")
    except OSError as e:
        raise SyncError("read template", template, e) from e

    try:
        dest.write_text(render_agent_template(content, project_name), encoding="utf-8")
    except OSError as e:
        raise SyncError("write", dest, e) from e

    logger.debug("wrote %s from %s", dest, template)
    return True
