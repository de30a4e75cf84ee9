"""The `init` pipeline: discover a source and sync it into a repository."""

from __future__ import annotations

import logging
from pathlib import Path

from flowmates.sync.agent import AGENT_FILE, agent_template_path, create_agent_md
from flowmates.sync.copier import SCRIPT_NAMES, sync_by_extension, sync_named
from flowmates.sync.gitignore import ensure_gitignore_entry
from flowmates.sync.hooks import install_pre_commit_hook
from flowmates.sync.models import (
    InitOptions,
    SourceInfo,
    SourceNotFoundError,
    SyncError,
    SyncReport,
)
from flowmates.sync.project import detect_project_name
from flowmates.sync.sources import RULE_EXTENSION, SourceProvider, discover_source
from flowmates.sync.validate import RULES_DEST, TEMPLATE_EXTENSION, validate_setup
from flowmates.sync.workflow import SHARED_TEMPLATES_DIR, ensure_workflow_dirs

logger = logging.getLogger(__name__)

SCRIPTS_DEST = Path("scripts")


def _copy_rules(root: Path, source: SourceInfo, force: bool, report: SyncReport) -> None:
    try:
        result = sync_by_extension(source.rules_path, root / RULES_DEST, {RULE_EXTENSION}, force)
    except SyncError as e:
        report.errors.append(f"Error copying rules: {e}")
        return
    report.merge_copy("rules", result)


def _copy_templates(root: Path, source: SourceInfo, force: bool, report: SyncReport) -> None:
    if source.templates_path is None:
        return
    try:
        result = sync_by_extension(
            source.templates_path, root / SHARED_TEMPLATES_DIR, {TEMPLATE_EXTENSION}, force
        )
    except SyncError as e:
        report.warnings.append(f"Error copying templates: {e}")
        return
    report.merge_copy("templates", result)


def _copy_scripts(root: Path, source: SourceInfo, force: bool, report: SyncReport) -> None:
    if source.scripts_path is None:
        return
    try:
        result = sync_named(source.scripts_path, root / SCRIPTS_DEST, SCRIPT_NAMES, force)
    except SyncError as e:
        report.warnings.append(f"Error copying scripts: {e}")
        return
    report.merge_copy("scripts", result)


def _create_agent(
    root: Path,
    home: Path,
    source: SourceInfo,
    project_name: str,
    options: InitOptions,
    report: SyncReport,
) -> None:
    if options.skip_agent:
        return
    if not options.with_agent and (root / AGENT_FILE).exists():
        return

    template = agent_template_path(source, home)
    if not template.exists():
        if options.with_agent:
            report.warnings.append(f"AGENT template not found at: {template}")
        return

    try:
        report.agent_created = create_agent_md(
            root, template, project_name, force=options.force or options.with_agent
        )
    except SyncError as e:
        report.warnings.append(f"Error creating AGENT.md: {e}")


def run_init(
    root: Path,
    home: Path,
    options: InitOptions | None = None,
    *,
    project_name: str | None = None,
    providers: list[SourceProvider] | None = None,
) -> tuple[SyncReport, str]:
    """Run every init step against root and return (report, project_name).

    Raises SourceNotFoundError before touching anything if no source is
    usable. A failure creating workflow directories or updating .gitignore
    stops the run early; the returned report carries the error.
    """
    options = options or InitOptions()
    report = SyncReport()

    source = discover_source(home, report, providers)
    if source is None:
        raise SourceNotFoundError()

    project_name = project_name or detect_project_name(root)
    logger.info("initializing %s from %s source", project_name, source.kind)

    _copy_rules(root, source, options.force, report)

    try:
        report.created_dirs.extend(ensure_workflow_dirs(root, project_name))
    except SyncError as e:
        report.errors.append(str(e))
        return report, project_name

    _copy_templates(root, source, options.force, report)
    _copy_scripts(root, source, options.force, report)

    try:
        report.gitignore_action = ensure_gitignore_entry(root)
    except SyncError as e:
        report.errors.append(str(e))
        return report, project_name

    if options.skip_hooks:
        report.hook_action = "skipped"
    else:
        install_pre_commit_hook(root, options.force, report)

    _create_agent(root, home, source, project_name, options, report)

    validate_setup(root, project_name, report)
    return report, project_name
