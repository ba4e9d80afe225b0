"""git subprocess wrapper used to read and write the repository identity."""

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

ATTR_NAME = "user.name"
ATTR_EMAIL = "user.email"

# Shell convention for "command not found"
COMMAND_NOT_FOUND = 127


@dataclass(frozen=True)
class ConfigValue:
    """Result of reading one git config attribute."""

    value: str
    is_set: bool


class Git:
    """Runs git commands in the current (or given) working directory."""

    def __init__(self, executable: str = "git", cwd: Optional[Path] = None):
        self.executable = executable
        self.cwd = cwd

    def _run(self, *args: str, quiet: bool = False) -> subprocess.CompletedProcess:
        if quiet:
            return subprocess.run(
                [self.executable, *args],
                cwd=self.cwd,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                check=False,
            )
        return subprocess.run(
            [self.executable, *args],
            cwd=self.cwd,
            capture_output=True,
            text=True,
            check=False,
        )

    def version_check(self) -> int:
        """Run ``git --version``.

        Returns:
            The probe's exit code, or 127 if git could not be launched
        """
        try:
            return self._run("--version", quiet=True).returncode
        except FileNotFoundError:
            return COMMAND_NOT_FOUND

    def is_repository(self) -> bool:
        """Check whether the working directory is inside a git repository."""
        try:
            return self._run("status", quiet=True).returncode == 0
        except FileNotFoundError:
            return False

    def get_config(self, attr: str) -> ConfigValue:
        """Read the effective value of a config attribute.

        An unset attribute is reported with ``is_set=False``, not raised.
        """
        result = self._run("config", attr)
        lines = result.stdout.splitlines()
        value = lines[0] if lines else ""
        return ConfigValue(value=value, is_set=result.returncode == 0)

    def set_config(self, attr: str, value: str) -> bool:
        """Write a config attribute to the local repository configuration.

        Returns:
            True if git accepted the value
        """
        result = self._run("config", "--local", attr, value)
        return result.returncode == 0
