"""Pydantic models and exceptions for the init pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

SourceKind = Literal["flowmates", "cursor"]
GitignoreAction = Literal["created", "added", "skipped"]
HookAction = Literal["installed", "updated", "skipped", "not_found", "not_git"]
CopyCategory = Literal["rules", "templates", "scripts"]


class SyncError(Exception):
    """Wraps a filesystem failure with the step and path it happened on."""

    def __init__(self, step: str, path: Path | str, cause: Exception) -> None:
        self.step = step
        self.path = path
        super().__init__(f"{step}: {path}: {cause}")
        self.__cause__ = cause


class SourceNotFoundError(Exception):
    """No flowmates repository and no ~/.cursor/ content to sync from."""

    def __init__(self) -> None:
        super().__init__(
            "Both flowmates repo and ~/.cursor/ unavailable. "
            "Please run 'init-flowmates-config' or 'sync-cursor' first."
        )


class SourceInfo(BaseModel):
    """Where content comes from for a single run."""

    model_config = ConfigDict(frozen=True)

    base_path: Path
    rules_path: Path
    templates_path: Path | None = None
    scripts_path: Path | None = None
    kind: SourceKind

    @property
    def is_flowmates(self) -> bool:
        return self.kind == "flowmates"


class CopyResult(BaseModel):
    """Outcome of syncing one category of files."""

    copied: list[str] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)
    failed: list[tuple[str, str]] = Field(
        default_factory=list, description="(filename, error message) pairs"
    )


class InitOptions(BaseModel):
    """Flags accepted by `flowmates init`."""

    force: bool = False
    skip_agent: bool = False
    with_agent: bool = False
    skip_hooks: bool = False
    install_hooks: bool = False


class SyncReport(BaseModel):
    """Accumulates the outcome of every init step for one run."""

    copied_rules: list[str] = Field(default_factory=list)
    skipped_rules: list[str] = Field(default_factory=list)
    copied_templates: list[str] = Field(default_factory=list)
    skipped_templates: list[str] = Field(default_factory=list)
    created_dirs: list[str] = Field(default_factory=list)
    copied_scripts: list[str] = Field(default_factory=list)
    skipped_scripts: list[str] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    agent_created: bool = False
    gitignore_action: GitignoreAction | None = None
    hook_action: HookAction | None = None
    source_used: SourceKind | None = None

    @property
    def ok(self) -> bool:
        return not self.errors

    def merge_copy(self, category: CopyCategory, result: CopyResult) -> None:
        """Fold a CopyResult into the per-category lists.

        Per-file copy failures become errors.
        """
        getattr(self, f"copied_{category}").extend(result.copied)
        getattr(self, f"skipped_{category}").extend(result.skipped)
        for name, message in result.failed:
            self.errors.append(f"Failed to copy {category[:-1]} {name}: {message}")
