"""CLI entry point for flowmates."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich import print as rprint
from rich.console import Console
from rich.syntax import Syntax

from flowmates.config import ConfigError, config_path, write_flowmates_config
from flowmates.config.loader import DEFAULT_CONFIG_FILE
from flowmates.output import render_summary
from flowmates.sync import InitOptions, SourceNotFoundError, run_init
from flowmates.sync.project import find_git_root

app = typer.Typer(
    name="flowmates",
    help="Cursor Multi-Agent Rules System CLI.",
)


@app.callback()
def main(
    log_level: Annotated[
        str, typer.Option("--log-level", help="debug | info | warning | error")
    ] = "warning",
) -> None:
    """Global options."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def init(
    force: Annotated[
        bool, typer.Option("--force", help="Overwrite existing files")
    ] = False,
    skip_agent: Annotated[
        bool, typer.Option("--skip-agent", help="Skip creating AGENT.md even if it's missing")
    ] = False,
    with_agent: Annotated[
        bool,
        typer.Option(
            "--with-agent", help="Always create AGENT.md from template (overwrites existing)"
        ),
    ] = False,
    skip_hooks: Annotated[
        bool,
        typer.Option(
            "--skip-hooks", help="Skip installing git hooks (hooks are installed by default)"
        ),
    ] = False,
    install_hooks: Annotated[
        bool, typer.Option("--install-hooks", help="Explicitly install git hooks (the default)")
    ] = False,
) -> None:
    """Initialize the current repository with rules, issue workflow and hooks."""
    options = InitOptions(
        force=force,
        skip_agent=skip_agent,
        with_agent=with_agent,
        skip_hooks=skip_hooks,
        install_hooks=install_hooks,
    )

    try:
        report, project_name = run_init(Path.cwd(), Path.home(), options)
    except SourceNotFoundError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    render_summary(report, project_name, Console())

    if not report.ok:
        raise typer.Exit(1)


@app.command("init-flowmates-config")
def init_flowmates_config(
    path: Annotated[
        str | None,
        typer.Option("--path", help="Repository path (default: auto-detect from git root)"),
    ] = None,
    file: Annotated[
        str, typer.Option("--file", help="Config filename")
    ] = DEFAULT_CONFIG_FILE,
    force: Annotated[
        bool,
        typer.Option(
            "--force", help="Overwrite existing config file even if it already exists"
        ),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be created without making changes"),
    ] = False,
    no_validate: Annotated[
        bool,
        typer.Option(
            "--no-validate", help="Skip git repository validation (allow non-git directories)"
        ),
    ] = False,
) -> None:
    """Point ~/.flowmates/<file> at a flowmates content repository."""
    if path:
        repo_path = Path(path).expanduser().resolve()
    else:
        repo_path = find_git_root()
        if repo_path is None:
            if not no_validate:
                rprint("[red]Error:[/red] Not inside a git repository. Pass --path or --no-validate.")
                raise typer.Exit(1)
            repo_path = Path.cwd()

    if not repo_path.is_dir():
        rprint(f"[red]Error:[/red] Not a directory: {repo_path}")
        raise typer.Exit(1)

    if not no_validate and not (repo_path / ".git").exists():
        rprint(f"[red]Error:[/red] Not a git repository: {repo_path}")
        raise typer.Exit(1)

    target = config_path(Path.home(), file)
    try:
        payload = write_flowmates_config(target, repo_path, force=force, dry_run=dry_run)
    except ConfigError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if dry_run:
        rprint(f"[yellow](dry run: would write {target})[/yellow]")
        rprint(Syntax(payload, "json"))
    else:
        rprint(f"[green]Created[/green] {target}")


if __name__ == "__main__":
    app()
