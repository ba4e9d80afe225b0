"""CLI entry point for git-user."""

import signal
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from ..errors import GitUserError, PromptCancelled

# Shared console instances
console = Console()
err_console = Console(stderr=True)

# Subcommands that never touch the profiles file
NO_STORE_COMMANDS = {"config", "version"}


def _fail(error: Exception, exit_code: int) -> None:
    err_console.print(f"[red]Error:[/red] {escape(str(error))}", soft_wrap=True)
    raise typer.Exit(exit_code)


def run_operation(ctx: typer.Context, operation) -> None:
    """Execute one operation and map failures to exit codes.

    Args:
        ctx: Typer context holding the AppContext
        operation: Operation to dispatch
    """
    dispatcher = ctx.obj.dispatcher
    try:
        dispatcher.execute(operation)
    except PromptCancelled:
        raise typer.Exit(PromptCancelled.exit_code)
    except GitUserError as e:
        _fail(e, e.exit_code)


def _handle_interrupt(signum, frame) -> None:
    # Cursor may still be hidden by a prompt
    Console(stderr=True).show_cursor(True)
    sys.exit(PromptCancelled.exit_code)


# Create main app
app = typer.Typer(
    name="git-user",
    help="Switch between git identities per repository",
    add_completion=False,
)


@app.callback(invoke_without_command=True)
def root(
    ctx: typer.Context,
    config_file: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to config file"
    ),
) -> None:
    """Switch between git identities per repository.

    Without a command, select a profile and apply it to the current repository.
    """
    from ..config.loader import load_config
    from .context import AppContext, Collaborators, bootstrap

    collaborators = ctx.obj if isinstance(ctx.obj, Collaborators) else None

    if ctx.invoked_subcommand in NO_STORE_COMMANDS:
        ctx.obj = AppContext(config_path=config_file)
        return

    try:
        cfg = load_config(config_file)
    except Exception as e:
        err_console.print(
            f"[red]Error loading config:[/red] {escape(str(e))}", soft_wrap=True
        )
        raise typer.Exit(2)

    try:
        ctx.obj = bootstrap(
            cfg,
            console,
            err_console,
            collaborators=collaborators,
            config_path=config_file,
        )
    except GitUserError as e:
        _fail(e, e.exit_code)

    if ctx.invoked_subcommand is None:
        from ..dispatcher import Apply

        run_operation(ctx, Apply())


# Import and register command modules
from . import main as main_commands, profiles

# Register profile commands
app.command("apply")(profiles.apply)
app.command("add")(profiles.add)
app.command("remove")(profiles.remove)
app.command("rename")(profiles.rename)
app.command("set-name")(profiles.set_name)
app.command("set-email")(profiles.set_email)
app.command("set")(profiles.edit)
app.command("list")(profiles.list_profiles)
app.command("show-raw")(profiles.show_raw)
app.command("current")(profiles.current)
app.command("reset")(profiles.reset)

# Register main commands
app.command("log")(main_commands.log)
app.command("config")(main_commands.config)
app.command("version")(main_commands.version)


def cli_main() -> None:
    """Main entry point."""
    signal.signal(signal.SIGINT, _handle_interrupt)
    app()


if __name__ == "__main__":
    cli_main()
