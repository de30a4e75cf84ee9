"""Idempotent file copying: skip existing files unless forced."""

from __future__ import annotations

import logging
import shutil
from collections.abc import Iterable
from pathlib import Path

from flowmates.sync.models import CopyResult, SyncError

logger = logging.getLogger(__name__)

SCRIPT_NAMES = (
    "pre-commit-hook",
    "validate-workflow-state.py",
    "pre-work-hook",
)


def _ensure_dest(dest: Path, step: str) -> None:
    try:
        dest.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise SyncError(step, dest, e) from e


def _copy_one(src: Path, dest_dir: Path, force: bool, result: CopyResult) -> None:
    """Apply the skip-unless-forced policy to a single file."""
    name = src.name
    dest = dest_dir / name
    existed = dest.exists()

    if existed and not force:
        logger.debug("skip %s (exists)", dest)
        result.skipped.append(name)
        return

    try:
        shutil.copy2(src, dest)
    except shutil.SameFileError:
        logger.debug("skip %s (same file as source)", dest)
        result.skipped.append(name)
        return
    except OSError as e:
        logger.warning("failed to copy %s: %s", src, e)
        result.failed.append((name, str(e)))
        return

    logger.debug("%s %s", "updated" if existed else "copied", dest)
    result.copied.append(f"{name} (updated)" if existed else name)


def sync_by_extension(
    source: Path, dest: Path, extensions: Iterable[str], force: bool = False
) -> CopyResult:
    """Copy every file in source whose suffix is in extensions into dest.

    Directories and other suffixes are ignored. Failing to create dest or
    list source raises SyncError; a failing file is recorded and the rest
    are still attempted.
    """
    allowed = set(extensions)
    _ensure_dest(dest, "create directory")

    try:
        entries = sorted(source.iterdir())
    except OSError as e:
        raise SyncError("read directory", source, e) from e

    result = CopyResult()
    for path in entries:
        if path.suffix not in allowed or not path.is_file():
            continue
        _copy_one(path, dest, force, result)
    return result


def sync_named(
    source: Path, dest: Path, names: Iterable[str] = SCRIPT_NAMES, force: bool = False
) -> CopyResult:
    """Copy only the named files that exist in source into dest."""
    _ensure_dest(dest, "create directory")

    result = CopyResult()
    for name in names:
        path = source / name
        if not path.is_file():
            continue
        _copy_one(path, dest, force, result)
    return result
