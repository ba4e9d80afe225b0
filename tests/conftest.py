"""Shared test fixtures."""

from pathlib import Path

import pytest
from typer.testing import CliRunner


@pytest.fixture
def data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME, the data dir and the cwd at a temporary location."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    data = tmp_path / "data"
    monkeypatch.setenv("GIT_USER_DATA_DIR", str(data))
    for name in ("GIT_USER_APP_NAME", "GIT_USER_PROFILES_FILE", "GIT_USER_GIT_EXECUTABLE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.delenv("GIT_USER_AUDIT__ENABLED", raising=False)
    monkeypatch.chdir(tmp_path)
    return data


@pytest.fixture
def app_dir(data_dir: Path) -> Path:
    return data_dir / "git-user"


@pytest.fixture
def profiles_path(app_dir: Path) -> Path:
    return app_dir / "profiles"


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()
