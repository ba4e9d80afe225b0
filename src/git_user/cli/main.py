"""Core CLI commands: log, config, version."""

from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from . import console
from .. import __version__
from ..config.loader import default_config_paths, load_config, write_config
from ..config.schema import GitUserConfig


def log(
    ctx: typer.Context,
    limit: int = typer.Option(
        20, "--limit", "-n", help="Maximum number of entries to show"
    ),
    event_type: Optional[str] = typer.Option(
        None, "--type", "-t", help="Filter by event type (e.g. profile_added)"
    ),
) -> None:
    """Show the most recent profile changes."""
    audit = ctx.obj.audit

    if not ctx.obj.config.audit.enabled:
        console.print("[yellow]Audit logging is disabled[/yellow]")

    entries = audit.read_entries(limit=limit, event_type=event_type)
    if not entries:
        console.print("[yellow]No changes recorded[/yellow]")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Time", style="dim", no_wrap=True)
    table.add_column("Event")
    table.add_column("Profile", style="cyan")
    table.add_column("Details")

    for entry in entries:
        details = {
            key: value
            for key, value in entry.items()
            if key not in ("timestamp", "event_type", "profile")
        }
        table.add_row(
            entry.get("timestamp", "")[:19].replace("T", " "),
            entry.get("event_type", ""),
            escape(str(entry.get("profile", ""))),
            escape(", ".join(f"{k}={v}" for k, v in details.items())),
        )

    console.print(table)
    console.print(f"[dim]Audit log: {escape(str(audit.log_file))}[/dim]")


def config(
    ctx: typer.Context,
    show: bool = typer.Option(False, "--show", help="Show current config"),
    init: bool = typer.Option(False, "--init", help="Initialize a new config file"),
) -> None:
    """Manage git-user configuration."""
    config_file = ctx.obj.config_path

    if init:
        # Create a default config file
        default_config = GitUserConfig()

        if config_file is None:
            config_file = default_config_paths()[0]

        if config_file.exists():
            overwrite = typer.confirm(
                f"Config file already exists at {config_file}. Overwrite?"
            )
            if not overwrite:
                raise typer.Exit(0)

        config_file = write_config(default_config, config_file)
        console.print(
            f"[green]✓[/green] Created config file at: {escape(str(config_file))}",
            soft_wrap=True,
        )
        return

    if show:
        try:
            cfg = load_config(config_file)
        except Exception as e:
            console.print(f"[red]Error loading config:[/red] {escape(str(e))}")
            raise typer.Exit(1)

        console.print("[yellow]Current Configuration:[/yellow]\n")
        console.print(f"[cyan]Data Dir:[/cyan] {escape(str(cfg.app_dir))}", soft_wrap=True)
        console.print(
            f"[cyan]Profiles File:[/cyan] {escape(str(cfg.profiles_path))}",
            soft_wrap=True,
        )
        console.print(f"[cyan]git Executable:[/cyan] {escape(cfg.git_executable)}")
        console.print(f"[cyan]Audit Enabled:[/cyan] {cfg.audit.enabled}")
        return

    # Default: show help
    console.print("[yellow]Config Management[/yellow]\n")
    console.print("Use --init to create a new config file")
    console.print("Use --show to view current configuration")


def version() -> None:
    """Show version information."""
    console.print(f"[cyan]git-user[/cyan] version [green]{__version__}[/green]")
