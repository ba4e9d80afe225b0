"""Process startup: resolve paths, read the store and wire the dispatcher."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from rich.console import Console

from ..audit import AuditLogger
from ..config.schema import GitUserConfig
from ..dispatcher import Dispatcher, Prompter
from ..errors import DataDirectoryError
from ..git import Git
from ..profiles import ProfileStore
from ..prompts import RichPrompter


@dataclass
class Collaborators:
    """External collaborators; tests pass fakes through ``ctx.obj``."""

    git: Optional[Git] = None
    prompter: Optional[Prompter] = None


@dataclass
class AppContext:
    config: Optional[GitUserConfig] = None
    config_path: Optional[Path] = None
    dispatcher: Optional[Dispatcher] = None
    audit: Optional[AuditLogger] = None


def bootstrap(
    config: GitUserConfig,
    console: Console,
    err_console: Console,
    collaborators: Optional[Collaborators] = None,
    config_path: Optional[Path] = None,
) -> AppContext:
    """Create the data directory, load the store and build the dispatcher.

    Raises:
        DataDirectoryError: If the application directory cannot be created
        CorruptedStoreError: If the profiles file fails validation
        StorageError: If the profiles file cannot be read
    """
    collaborators = collaborators or Collaborators()

    app_dir = config.app_dir
    try:
        app_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DataDirectoryError(f"Could not create data directory {app_dir}: {e}") from e

    store_path = config.profiles_path
    store, raw_text = ProfileStore.read(store_path)

    audit = AuditLogger(config.audit, config.audit_path)
    dispatcher = Dispatcher(
        store=store,
        store_path=store_path,
        raw_text=raw_text,
        git=collaborators.git or Git(config.git_executable),
        prompter=collaborators.prompter or RichPrompter(console),
        console=console,
        err_console=err_console,
        audit=audit,
    )
    return AppContext(
        config=config, config_path=config_path, dispatcher=dispatcher, audit=audit
    )
