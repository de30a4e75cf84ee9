"""Render a SyncReport as a human-readable summary."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from flowmates.sync.models import SyncReport

_SOURCE_LABELS = {
    "flowmates": "Flowmates repository",
    "cursor": "~/.cursor/ repository",
}

_GITIGNORE_MESSAGES = {
    "created": "[green]✓[/green] Created .gitignore with .cursor entry",
    "added": "[green]✓[/green] Added .cursor entry to .gitignore",
    "skipped": "[dim]⊘ .cursor already in .gitignore (skipped)[/dim]",
}

_HOOK_MESSAGES = {
    "installed": "[green]✓[/green] Git pre-commit hook installed",
    "updated": "[green]✓[/green] Git pre-commit hook updated",
    "skipped": "[yellow]⚠[/yellow]  Git pre-commit hook already exists (skipped)",
    "not_found": (
        "[yellow]⚠[/yellow]  scripts/pre-commit-hook not found. Run init from the "
        "flowmates repo or ensure scripts/ directory is available."
    ),
    "not_git": "[yellow]⚠[/yellow]  Not a git repository, skipping hook installation",
}


def _section(console: Console, title: str, items: list[str], mark: str) -> None:
    if not items:
        return
    console.print(f"[bold]{title}[/bold]")
    for item in items:
        console.print(f"  {mark} {escape(item)}")
    console.print()


def render_summary(report: SyncReport, project_name: str, console: Console | None = None) -> None:
    """Print every non-empty category of the report, then the verdict."""
    console = console or Console()
    console.print("\n[bold]=== Initialization Summary ===[/bold]\n")

    if report.source_used:
        console.print(f"Source: {_SOURCE_LABELS[report.source_used]}\n")

    _section(console, "Created directories:", report.created_dirs, "[green]✓[/green]")
    _section(console, "Copied/Updated rules:", report.copied_rules, "[green]✓[/green]")
    _section(console, "Skipped rules (already exist):", report.skipped_rules, "[dim]⊘[/dim]")
    _section(console, "Copied/Updated templates:", report.copied_templates, "[green]✓[/green]")
    _section(
        console, "Skipped templates (already exist):", report.skipped_templates, "[dim]⊘[/dim]"
    )
    _section(console, "Copied/Updated scripts:", report.copied_scripts, "[green]✓[/green]")
    _section(console, "Skipped scripts (already exist):", report.skipped_scripts, "[dim]⊘[/dim]")

    if report.gitignore_action:
        console.print(_GITIGNORE_MESSAGES[report.gitignore_action] + "\n")
    if report.hook_action:
        console.print(_HOOK_MESSAGES[report.hook_action] + "\n")
    if report.agent_created:
        console.print("[green]✓[/green] Created AGENT.md from template\n")

    _section(console, "Warnings:", report.warnings, "[yellow]⚠[/yellow]")
    _section(console, "Errors:", report.errors, "[red]✗[/red]")

    console.print(f"Project name detected: [cyan]{escape(project_name)}[/cyan]\n")

    if report.ok:
        console.print(
            Panel(
                "Next steps:\n  - Run `load-context` to bootstrap repository context",
                title="[green]✓ Initialization completed successfully![/green]",
                border_style="green",
            )
        )
    else:
        console.print(
            "[red]⚠ Initialization completed with errors. Please review above.[/red]"
        )
