"""Tests for the idempotent file syncer."""

from __future__ import annotations

import os
import shutil
import stat
from pathlib import Path
from unittest.mock import patch

import pytest

from flowmates.sync.copier import SCRIPT_NAMES, sync_by_extension, sync_named
from flowmates.sync.models import SyncError, SyncReport


@pytest.fixture
def src(tmp_path: Path) -> Path:
    d = tmp_path / "src"
    d.mkdir()
    (d / "a.mdc").write_text("A")
    (d / "b.mdc").write_text("B")
    (d / "notes.txt").write_text("ignored")
    (d / "nested.mdc").mkdir()
    return d


class TestSyncByExtension:
    def test_fresh_copy(self, src, tmp_path):
        dest = tmp_path / "dest" / "rules"
        result = sync_by_extension(src, dest, {".mdc"})

        assert result.copied == ["a.mdc", "b.mdc"]
        assert result.skipped == []
        assert (dest / "a.mdc").read_text() == "A"
        assert not (dest / "notes.txt").exists()
        assert not (dest / "nested.mdc").exists()

    def test_existing_skipped_and_untouched(self, src, tmp_path):
        dest = tmp_path / "dest"
        dest.mkdir()
        existing = dest / "a.mdc"
        existing.write_text("local edits")
        os.utime(existing, (1_000_000, 1_000_000))

        result = sync_by_extension(src, dest, {".mdc"})

        assert result.copied == ["b.mdc"]
        assert result.skipped == ["a.mdc"]
        assert existing.read_text() == "local edits"
        assert existing.stat().st_mtime == 1_000_000

    def test_force_overwrites_and_annotates(self, src, tmp_path):
        dest = tmp_path / "dest"
        dest.mkdir()
        (dest / "a.mdc").write_text("local edits")

        result = sync_by_extension(src, dest, {".mdc"}, force=True)

        assert result.copied == ["a.mdc (updated)", "b.mdc"]
        assert result.skipped == []
        assert (dest / "a.mdc").read_text() == "A"

    def test_second_run_skips_everything(self, src, tmp_path):
        dest = tmp_path / "dest"
        sync_by_extension(src, dest, {".mdc"})
        result = sync_by_extension(src, dest, {".mdc"})
        assert result.copied == []
        assert result.skipped == ["a.mdc", "b.mdc"]

    def test_missing_source_raises(self, tmp_path):
        with pytest.raises(SyncError) as exc_info:
            sync_by_extension(tmp_path / "missing", tmp_path / "dest", {".mdc"})
        assert exc_info.value.step == "read directory"
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_dest_creation_failure_raises(self, src, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("a file where a directory should be")
        with pytest.raises(SyncError) as exc_info:
            sync_by_extension(src, blocker / "rules", {".mdc"})
        assert exc_info.value.step == "create directory"

    def test_single_file_failure_does_not_abort(self, src, tmp_path):
        dest = tmp_path / "dest"
        real_copy = shutil.copy2

        def _flaky(a, b, *args, **kwargs):
            if Path(a).name == "a.mdc":
                raise PermissionError("denied")
            return real_copy(a, b, *args, **kwargs)

        with patch("flowmates.sync.copier.shutil.copy2", side_effect=_flaky):
            result = sync_by_extension(src, dest, {".mdc"})

        assert result.copied == ["b.mdc"]
        assert result.failed == [("a.mdc", "denied")]
        assert not (dest / "a.mdc").exists()
        assert (dest / "b.mdc").exists()

    def test_failures_become_report_errors(self, src, tmp_path):
        report = SyncReport()
        with patch("flowmates.sync.copier.shutil.copy2", side_effect=OSError("disk full")):
            result = sync_by_extension(src, tmp_path / "dest", {".mdc"})
        report.merge_copy("rules", result)

        assert report.copied_rules == []
        assert len(report.errors) == 2
        assert "rule a.mdc" in report.errors[0]

    def test_force_onto_source_dir_skips(self, src):
        result = sync_by_extension(src, src, {".mdc"}, force=True)

        assert result.copied == []
        assert result.skipped == ["a.mdc", "b.mdc"]
        assert result.failed == []
        assert (src / "a.mdc").read_text() == "A"


class TestSyncNamed:
    def test_only_named_files_copied(self, tmp_path):
        scripts = tmp_path / "scripts"
        scripts.mkdir()
        (scripts / "pre-commit-hook").write_text("#!/bin/sh\n")
        (scripts / "validate-workflow-state.py").write_text("print()")
        (scripts / "unrelated.sh").write_text("echo")

        result = sync_named(scripts, tmp_path / "out", SCRIPT_NAMES)

        assert result.copied == ["pre-commit-hook", "validate-workflow-state.py"]
        assert not (tmp_path / "out" / "unrelated.sh").exists()
        assert not (tmp_path / "out" / "pre-work-hook").exists()

    def test_skip_and_force(self, tmp_path):
        scripts = tmp_path / "scripts"
        scripts.mkdir()
        (scripts / "pre-work-hook").write_text("new")
        out = tmp_path / "out"
        out.mkdir()
        (out / "pre-work-hook").write_text("old")

        assert sync_named(scripts, out).skipped == ["pre-work-hook"]
        assert (out / "pre-work-hook").read_text() == "old"

        assert sync_named(scripts, out, force=True).copied == ["pre-work-hook (updated)"]
        assert (out / "pre-work-hook").read_text() == "new"

    def test_executable_bit_preserved(self, tmp_path):
        scripts = tmp_path / "scripts"
        scripts.mkdir()
        hook = scripts / "pre-work-hook"
        hook.write_text("#!/bin/sh\n")
        hook.chmod(0o755)

        sync_named(scripts, tmp_path / "out")

        copied = tmp_path / "out" / "pre-work-hook"
        assert os.stat(copied).st_mode & stat.S_IXUSR


def test_merge_copy_keeps_categories_apart():
    from flowmates.sync.models import CopyResult

    report = SyncReport()
    report.merge_copy("templates", CopyResult(copied=["bug.md"], skipped=["feature.md"]))
    report.merge_copy("scripts", CopyResult(copied=["pre-commit-hook"]))

    assert report.copied_templates == ["bug.md"]
    assert report.skipped_templates == ["feature.md"]
    assert report.copied_scripts == ["pre-commit-hook"]
    assert report.copied_rules == []
    assert report.ok
