"""Shared test fixtures for flowmates."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from flowmates.sync.models import SyncReport


@pytest.fixture
def home(tmp_path: Path, monkeypatch) -> Path:
    """An empty home directory that Path.home() resolves to."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    return home_dir


@pytest.fixture
def repo(tmp_path: Path, monkeypatch) -> Path:
    """A target repository with .git/hooks/, used as the working directory."""
    repo_dir = tmp_path / "widget"
    (repo_dir / ".git" / "hooks").mkdir(parents=True)
    monkeypatch.chdir(repo_dir)
    return repo_dir


@pytest.fixture
def make_flowmates_repo(tmp_path: Path):
    """Factory for a flowmates content repository on disk."""

    def _make(
        rules: dict[str, str] | None = None,
        templates: dict[str, str] | None = None,
        scripts: dict[str, str] | None = None,
        name: str = "flowmates-src",
    ) -> Path:
        base = tmp_path / name
        rules_dir = base / "rules"
        rules_dir.mkdir(parents=True)
        for fname, content in (rules if rules is not None else {"a.mdc": "rule a", "b.mdc": "rule b"}).items():
            (rules_dir / fname).write_text(content)
        if templates is not None:
            tdir = base / "issues" / "shared" / "templates"
            tdir.mkdir(parents=True)
            for fname, content in templates.items():
                (tdir / fname).write_text(content)
        if scripts is not None:
            sdir = base / "scripts"
            sdir.mkdir()
            for fname, content in scripts.items():
                (sdir / fname).write_text(content)
        return base

    return _make


@pytest.fixture
def write_config():
    """Write ~/.flowmates/config.json pointing at a repo path."""

    def _write(home: Path, repo_path: Path | str) -> Path:
        cfg = home / ".flowmates" / "config.json"
        cfg.parent.mkdir(parents=True, exist_ok=True)
        cfg.write_text(json.dumps({"repo_path": str(repo_path)}))
        return cfg

    return _write


@pytest.fixture
def report() -> SyncReport:
    return SyncReport()
