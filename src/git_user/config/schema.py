"""Configuration schema for git-user."""

from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class AuditConfig(BaseModel):
    """Audit logging configuration."""

    enabled: bool = Field(default=True, description="Record profile changes")
    file_name: str = Field(
        default="audit.jsonl",
        description="Audit log file name inside the application directory",
    )


class GitUserConfig(BaseSettings):
    """Main git-user configuration."""

    data_dir: str = Field(
        default="~/.local/share",
        description="User data directory holding the application directory",
    )
    app_name: str = Field(
        default="git-user", description="Application directory name"
    )
    profiles_file: str = Field(
        default="profiles", description="Profiles file name"
    )
    git_executable: str = Field(default="git", description="git command to run")
    audit: AuditConfig = Field(default_factory=AuditConfig)

    class Config:
        env_prefix = "GIT_USER_"
        env_nested_delimiter = "__"

    @property
    def app_dir(self) -> Path:
        return Path(self.data_dir).expanduser() / self.app_name

    @property
    def profiles_path(self) -> Path:
        return self.app_dir / self.profiles_file

    @property
    def audit_path(self) -> Path:
        return self.app_dir / self.audit.file_name
