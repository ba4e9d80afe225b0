"""Locate, read and write the git-user config file."""

from pathlib import Path

import yaml

from .schema import GitUserConfig


def default_config_paths() -> list[Path]:
    """Config file locations searched in order when none is given."""
    return [
        Path.home() / ".config" / "git-user" / "config.yaml",
        Path.cwd() / ".git-user" / "config.yaml",
    ]


def find_config_file() -> Path | None:
    for path in default_config_paths():
        if path.exists():
            return path
    return None


def load_config(config_path: str | Path | None = None) -> GitUserConfig:
    """Build the configuration from a YAML file plus ``GIT_USER_*`` variables.

    Without an explicit path the first existing default location is used;
    with none present only defaults and the environment apply.

    Raises:
        FileNotFoundError: If an explicit config path does not exist
        ValueError: If the file does not hold a mapping
    """
    if config_path is None:
        config_path = find_config_file()
        if config_path is None:
            return GitUserConfig()
    else:
        config_path = Path(config_path).expanduser()
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

    data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")

    return GitUserConfig(**data)


def write_config(config: GitUserConfig, config_path: str | Path) -> Path:
    """Write ``config`` as YAML, creating missing parent directories.

    Returns:
        The expanded path that was written
    """
    path = Path(config_path).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        yaml.safe_dump(config.model_dump(mode="json"), sort_keys=False),
        encoding="utf-8",
    )
    return path
