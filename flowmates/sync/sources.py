"""Content source discovery: flowmates repository first, ~/.cursor/ second."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from flowmates.config import ConfigError, config_path, load_flowmates_config
from flowmates.sync.models import SourceInfo, SyncReport

logger = logging.getLogger(__name__)

RULE_EXTENSION = ".mdc"

# Template directories, relative to a source base, in priority order.
TEMPLATE_DIRS = (
    Path("issues/shared/templates"),
    Path("docs/issues/templates"),
)


def resolve_templates(base: Path) -> Path | None:
    """Return the first existing template directory under base, if any."""
    for rel in TEMPLATE_DIRS:
        candidate = base / rel
        if candidate.exists():
            return candidate
    return None


def has_rule_files(rules_dir: Path) -> bool:
    try:
        return any(
            p.suffix == RULE_EXTENSION for p in rules_dir.iterdir() if p.is_file()
        )
    except OSError:
        return False


def validate_flowmates_repo(repo_path: Path) -> bool:
    """A usable repo exists and has at least one .mdc file under rules/."""
    if not repo_path.exists():
        return False
    rules_dir = repo_path / "rules"
    if not rules_dir.is_dir():
        return False
    return has_rule_files(rules_dir)


class SourceProvider(ABC):
    """A place rules, templates and scripts can be read from."""

    name: str

    @abstractmethod
    def locate(self, home: Path, report: SyncReport) -> SourceInfo | None:
        """Return a SourceInfo if this provider is usable, else None.

        Problems are recorded as warnings on the report, never raised.
        """
        ...


class FlowmatesRepoSource(SourceProvider):
    """Repository configured through ~/.flowmates/config.json."""

    name = "flowmates"

    def locate(self, home: Path, report: SyncReport) -> SourceInfo | None:
        cfg_path = config_path(home)
        try:
            config = load_flowmates_config(cfg_path)
        except FileNotFoundError:
            report.warnings.append(
                "Flowmates repository not configured. Using ~/.cursor/ as fallback."
            )
            return None
        except ConfigError as e:
            logger.warning("ignoring flowmates config: %s", e)
            report.warnings.append(
                f"Flowmates config unusable ({e}). Using ~/.cursor/ as fallback."
            )
            return None

        repo_path = Path(config.repo_path).expanduser()
        if not validate_flowmates_repo(repo_path):
            report.warnings.append(
                f"Flowmates repository path invalid: {repo_path}. "
                "Using ~/.cursor/ as fallback."
            )
            return None

        scripts_path = repo_path / "scripts"
        return SourceInfo(
            base_path=repo_path,
            rules_path=repo_path / "rules",
            templates_path=resolve_templates(repo_path),
            scripts_path=scripts_path if scripts_path.exists() else None,
            kind="flowmates",
        )


class CursorHomeSource(SourceProvider):
    """Per-user ~/.cursor/ directory. Never provides scripts."""

    name = "cursor"

    def locate(self, home: Path, report: SyncReport) -> SourceInfo | None:
        base = home / ".cursor"
        rules_path = base / "rules"
        if not rules_path.exists():
            return None
        return SourceInfo(
            base_path=base,
            rules_path=rules_path,
            templates_path=resolve_templates(base),
            scripts_path=None,
            kind="cursor",
        )


DEFAULT_PROVIDERS: tuple[SourceProvider, ...] = (
    FlowmatesRepoSource(),
    CursorHomeSource(),
)


def discover_source(
    home: Path,
    report: SyncReport,
    providers: tuple[SourceProvider, ...] | list[SourceProvider] | None = None,
) -> SourceInfo | None:
    """Try providers in priority order and return the first usable source.

    Sets report.source_used on success. Returns None when nothing is usable.
    """
    for provider in providers if providers is not None else DEFAULT_PROVIDERS:
        info = provider.locate(home, report)
        if info is not None:
            logger.info("using %s source at %s", provider.name, info.base_path)
            report.source_used = info.kind
            return info
        logger.debug("source %s unavailable", provider.name)
    return None
