"""Exceptions raised by the profile store, dispatcher and git collaborator.

Every exception carries the process exit status the CLI should use.
"""

from pathlib import Path


class GitUserError(Exception):
    """Base class for all git-user failures."""

    exit_code = 1


# User input errors


class ProfileNotFoundError(GitUserError, ValueError):
    def __init__(self, profile: str):
        self.profile = profile
        super().__init__(f"Profile '{profile}' could not be found")


class ProfileExistsError(GitUserError, ValueError):
    def __init__(self, profile: str):
        self.profile = profile
        super().__init__(f"Profile '{profile}' already exists")


class NoProfilesError(GitUserError, ValueError):
    def __init__(self):
        super().__init__("You have to create a profile first. Use: git-user add")


class InvalidProfileNameError(GitUserError, ValueError):
    def __init__(self):
        super().__init__("Profile name cannot be empty")


# Environment errors


class DataDirectoryError(GitUserError):
    exit_code = 2


class NotARepositoryError(GitUserError):
    exit_code = 2

    def __init__(self):
        super().__init__("Not inside a git directory")


class CorruptedStoreError(GitUserError):
    """Raised when the profiles file fails structural validation."""

    exit_code = 2

    def __init__(self, reason: str, path: Path | None = None):
        self.reason = reason
        self.path = path
        if path is not None:
            message = f"Data file ({path}) corrupted: {reason}"
        else:
            message = f"Data file corrupted: {reason}"
        super().__init__(message)


class StorageError(GitUserError):
    exit_code = 2


class GitNotInstalledError(GitUserError):
    """Raised when the git probe fails; the probe's exit code is propagated."""

    def __init__(self, exit_code: int):
        self.exit_code = exit_code or 1
        super().__init__("git not installed")


class PromptCancelled(GitUserError):
    """Raised when the user interrupts an interactive prompt."""

    exit_code = 130

    def __init__(self):
        super().__init__("Cancelled")
