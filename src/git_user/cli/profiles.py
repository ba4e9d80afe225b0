"""Profile commands: apply, add, remove, rename, set, list and friends."""

from typing import Optional

import typer

from . import run_operation
from ..dispatcher import (
    Add,
    Apply,
    Current,
    Edit,
    ListProfiles,
    Remove,
    Rename,
    Reset,
    SetEmail,
    SetName,
    ShowRaw,
)


def apply(
    ctx: typer.Context,
    profile: Optional[str] = typer.Argument(
        None, help="Profile to apply (prompted when omitted)"
    ),
) -> None:
    """Apply a profile to set the user for the local git repository."""
    run_operation(ctx, Apply(profile=profile))


def add(
    ctx: typer.Context,
    profile: Optional[str] = typer.Argument(
        None, help="Name of the new profile (prompted when omitted)"
    ),
    name: Optional[str] = typer.Argument(
        None, help="git user.name (defaults to the profile name)"
    ),
    email: Optional[str] = typer.Argument(
        None, help="git user.email (defaults to a GitHub noreply address)"
    ),
) -> None:
    """Add a new user profile."""
    run_operation(ctx, Add(profile=profile, name=name, email=email))


def remove(
    ctx: typer.Context,
    profile: Optional[str] = typer.Argument(
        None, help="Profile to remove (prompted when omitted)"
    ),
) -> None:
    """Remove a user profile."""
    run_operation(ctx, Remove(profile=profile))


def rename(
    ctx: typer.Context,
    old: str = typer.Argument(..., help="Current profile name"),
    new: str = typer.Argument(..., help="New profile name"),
) -> None:
    """Rename a profile."""
    run_operation(ctx, Rename(old=old, new=new))


def set_name(
    ctx: typer.Context,
    profile: str = typer.Argument(..., help="Profile to change"),
    name: str = typer.Argument(..., help="New git user.name"),
) -> None:
    """Change the name stored in a profile."""
    run_operation(ctx, SetName(profile=profile, value=name))


def set_email(
    ctx: typer.Context,
    profile: str = typer.Argument(..., help="Profile to change"),
    email: str = typer.Argument(..., help="New git user.email"),
) -> None:
    """Change the email stored in a profile."""
    run_operation(ctx, SetEmail(profile=profile, value=email))


def edit(
    ctx: typer.Context,
    profile: Optional[str] = typer.Argument(
        None, help="Profile to change (prompted when omitted)"
    ),
) -> None:
    """Interactively set a new value in a profile (e.g. to change the email)."""
    run_operation(ctx, Edit(profile=profile))


def list_profiles(ctx: typer.Context) -> None:
    """List all profiles."""
    run_operation(ctx, ListProfiles())


def show_raw(ctx: typer.Context) -> None:
    """Print the file path where the profiles are stored and its contents."""
    run_operation(ctx, ShowRaw())


def current(ctx: typer.Context) -> None:
    """Show the current user of the local git repository."""
    run_operation(ctx, Current())


def reset(ctx: typer.Context) -> None:
    """Remove all directories and files ever created by git-user."""
    run_operation(ctx, Reset())
