"""Operations and the dispatcher that runs them against the profile store."""

import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol, Sequence, Union

from rich.console import Console
from rich.markup import escape

from .audit import AuditLogger
from .errors import (
    GitNotInstalledError,
    InvalidProfileNameError,
    NoProfilesError,
    NotARepositoryError,
    ProfileExistsError,
    ProfileNotFoundError,
    StorageError,
)
from .git import ATTR_EMAIL, ATTR_NAME, Git
from .profiles import Profile, ProfileStore

NOREPLY_DOMAIN = "users.noreply.github.com"


def default_email(name: str) -> str:
    return f"{name}@{NOREPLY_DOMAIN}"


class Prompter(Protocol):
    def select(self, title: str, items: Sequence[str], default_index: int = 0) -> int:
        ...

    def text(self, title: str, default: Optional[str] = None) -> str:
        ...


# Operations


@dataclass(frozen=True)
class Apply:
    profile: Optional[str] = None


@dataclass(frozen=True)
class Add:
    profile: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None


@dataclass(frozen=True)
class Remove:
    profile: Optional[str] = None


@dataclass(frozen=True)
class Rename:
    old: str
    new: str


@dataclass(frozen=True)
class SetName:
    profile: str
    value: str


@dataclass(frozen=True)
class SetEmail:
    profile: str
    value: str


@dataclass(frozen=True)
class Edit:
    profile: Optional[str] = None


@dataclass(frozen=True)
class ListProfiles:
    pass


@dataclass(frozen=True)
class ShowRaw:
    pass


@dataclass(frozen=True)
class Current:
    pass


@dataclass(frozen=True)
class Reset:
    pass


Operation = Union[
    Apply,
    Add,
    Remove,
    Rename,
    SetName,
    SetEmail,
    Edit,
    ListProfiles,
    ShowRaw,
    Current,
    Reset,
]

# Choices offered by the interactive edit, in display order
EDIT_CHOICES = ("Profile", "Name", "Email")


class Dispatcher:
    """Runs one operation against a loaded store.

    Every check happens before the store is touched, and a mutating
    operation ends with exactly one save of the whole file.
    """

    def __init__(
        self,
        store: ProfileStore,
        store_path: Path,
        raw_text: str,
        git: Git,
        prompter: Prompter,
        console: Console,
        err_console: Console,
        audit: Optional[AuditLogger] = None,
    ):
        self.store = store
        self.store_path = store_path
        self.raw_text = raw_text
        self.git = git
        self.prompter = prompter
        self.console = console
        self.err_console = err_console
        self.audit = audit

    def execute(self, operation: Operation) -> None:
        if isinstance(operation, Apply):
            self._apply(operation)
        elif isinstance(operation, Add):
            self._add(operation)
        elif isinstance(operation, Remove):
            self._remove(operation)
        elif isinstance(operation, Rename):
            self._rename(operation.old, operation.new)
        elif isinstance(operation, SetName):
            self._set_field(operation.profile, "name", operation.value)
        elif isinstance(operation, SetEmail):
            self._set_field(operation.profile, "email", operation.value)
        elif isinstance(operation, Edit):
            self._edit(operation)
        elif isinstance(operation, ListProfiles):
            self._list()
        elif isinstance(operation, ShowRaw):
            self._show_raw()
        elif isinstance(operation, Current):
            self._current()
        elif isinstance(operation, Reset):
            self._reset()
        else:
            raise TypeError(f"Unknown operation: {operation!r}")

    # Checks

    def require_repository(self) -> None:
        """Fail unless git is installed and the cwd is inside a repository."""
        code = self.git.version_check()
        if code != 0:
            raise GitNotInstalledError(code)
        if not self.git.is_repository():
            raise NotARepositoryError()

    def _require_existing(self, profile: str) -> None:
        if not self.store.contains(profile):
            raise ProfileNotFoundError(profile)

    def _require_new(self, profile: str) -> None:
        if not profile:
            raise InvalidProfileNameError()
        if self.store.contains(profile):
            raise ProfileExistsError(profile)

    # Interaction

    def _select_profile(self, default_current: bool) -> str:
        """Let the user pick a profile.

        With ``default_current`` the profile matching the repository's
        current identity is preselected.
        """
        if len(self.store) == 0:
            raise NoProfilesError()

        current_name = current_email = None
        if default_current:
            current_name = self.git.get_config(ATTR_NAME).value
            current_email = self.git.get_config(ATTR_EMAIL).value

        names = []
        display = []
        default_index = 0
        for index, (key, profile) in enumerate(self.store):
            names.append(key)
            display.append(f"{profile.name} : {profile.email}")
            if (
                default_current
                and profile.name == current_name
                and profile.email == current_email
            ):
                default_index = index

        index = self.prompter.select("Select a git user", display, default_index)
        return names[index]

    # Output

    def _echo(self, text: str = "") -> None:
        """Print stored text exactly, bypassing rich's emoji and control-code handling."""
        self.console.file.write(text + "\n")
        self.console.file.flush()

    def _success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}", soft_wrap=True)

    def _warn(self, message: str) -> None:
        self.err_console.print(
            f"[yellow]Warning:[/yellow] {escape(message)}", soft_wrap=True
        )

    def _commit(self, event_type: str, data: dict) -> None:
        self.store.save(self.store_path)
        if self.audit is not None:
            self.audit.log_event(event_type, data)

    # Handlers

    def _apply(self, op: Apply) -> None:
        self.require_repository()

        profile = op.profile
        if profile is None:
            profile = self._select_profile(default_current=True)
        self._require_existing(profile)

        value = self.store.get(profile)
        applied = True
        for attr, attr_value in ((ATTR_NAME, value.name), (ATTR_EMAIL, value.email)):
            if not self.git.set_config(attr, attr_value):
                self._warn(f"Failed to set {attr}")
                applied = False

        if applied:
            self._success(
                f"Applied profile [cyan]{escape(profile)}[/cyan]: "
                f"{escape(value.name)} <{escape(value.email)}>"
            )

    def _add(self, op: Add) -> None:
        if op.profile is not None:
            profile = op.profile
            self._require_new(profile)
            name = op.name if op.name is not None else profile
            email = op.email if op.email is not None else default_email(name)
        else:
            profile = self.prompter.text("Profile")
            self._require_new(profile)
            name = self.prompter.text("Name", default=profile)
            email = self.prompter.text("Email", default=default_email(name))

        self.store.insert(profile, Profile(name=name, email=email))
        self._commit(
            "profile_added", {"profile": profile, "name": name, "email": email}
        )
        self._success(f"Added profile [cyan]{escape(profile)}[/cyan]")

    def _remove(self, op: Remove) -> None:
        profile = op.profile
        if profile is None:
            profile = self._select_profile(default_current=False)
        self._require_existing(profile)

        self.store.remove(profile)
        self._commit("profile_removed", {"profile": profile})
        self._success(f"Removed profile [cyan]{escape(profile)}[/cyan]")

    def _rename(self, old: str, new: str) -> None:
        self._require_existing(old)
        self._require_new(new)

        self.store.rename(old, new)
        self._commit("profile_renamed", {"profile": old, "new_profile": new})
        self._success(
            f"Renamed profile [cyan]{escape(old)}[/cyan] to [cyan]{escape(new)}[/cyan]"
        )

    def _set_field(self, profile: str, field: str, value: str) -> None:
        self._require_existing(profile)

        self.store.set_field(profile, field, value)
        self._commit(
            f"profile_{field}_set", {"profile": profile, field: value}
        )
        self._success(f"Set {field} of [cyan]{escape(profile)}[/cyan] to {escape(value)}")

    def _edit(self, op: Edit) -> None:
        profile = op.profile
        if profile is None:
            profile = self._select_profile(default_current=False)
        self._require_existing(profile)

        choice = EDIT_CHOICES[
            self.prompter.select("Set new value for", EDIT_CHOICES, 0)
        ]
        if choice == "Profile":
            new_value = self.prompter.text("New profile name")
            self._rename(profile, new_value)
        elif choice == "Name":
            new_value = self.prompter.text("New name")
            self._set_field(profile, "name", new_value)
        else:
            new_value = self.prompter.text("New email")
            self._set_field(profile, "email", new_value)

    def _list(self) -> None:
        for index, (key, profile) in enumerate(self.store):
            if index != 0:
                self._echo()
            self._echo(f"Profile: {key}")
            self._echo(f"Name: {profile.name}")
            self._echo(f"Email: {profile.email}")

    def _show_raw(self) -> None:
        self._echo(f">>> {self.store_path}")
        self._echo(self.raw_text)

    def _current(self) -> None:
        self.require_repository()

        for index, attr in enumerate((ATTR_NAME, ATTR_EMAIL)):
            if index != 0:
                self._echo()
            self._echo(f"> git config {attr}")
            result = self.git.get_config(attr)
            if result.is_set:
                self._echo(result.value)
            else:
                self._warn(f"{attr} not set")

    def _reset(self) -> None:
        app_dir = self.store_path.parent
        try:
            if app_dir.exists():
                shutil.rmtree(app_dir)
        except OSError as e:
            raise StorageError(f"Could not remove {app_dir}: {e}") from e
        self._success(f"Removed {escape(str(app_dir))}")
