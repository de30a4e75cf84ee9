"""Keep .cursor/ out of version control."""

from __future__ import annotations

import logging
from pathlib import Path

from flowmates.sync.models import GitignoreAction, SyncError

logger = logging.getLogger(__name__)

GITIGNORE_HEADER = "# Cursor agent state and cache"
CURSOR_ENTRY = ".cursor"


def has_entry(content: str, entry: str = CURSOR_ENTRY) -> bool:
    """True if any non-comment, non-blank line covers entry.

    Case-insensitive: equal to entry, entry + "/", or starting with entry.
    """
    needle = entry.lower()
    for line in content.splitlines():
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("#"):
            continue
        lowered = trimmed.lower()
        if lowered in (needle, needle + "/") or lowered.startswith(needle):
            return True
    return False


def ensure_gitignore_entry(root: Path, entry: str = CURSOR_ENTRY) -> GitignoreAction:
    """Ensure root/.gitignore ignores the entry directory."""
    path = root / ".gitignore"
    block = f"{GITIGNORE_HEADER}\n{entry}/\n"

    try:
        if not path.exists():
            path.write_text(block, encoding="utf-8")
            logger.debug("created %s", path)
            return "created"

        if has_entry(path.read_text(encoding="utf-8"), entry):
            return "skipped"

        with open(path, "a", encoding="utf-8") as f:
            f.write("\n" + block)
    except OSError as e:
        raise SyncError("update .gitignore", path, e) from e

    logger.debug("appended %s/ to %s", entry, path)
    return "added"
