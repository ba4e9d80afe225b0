"""Configuration loading."""

from .loader import find_config_file, load_config, write_config
from .schema import AuditConfig, GitUserConfig

__all__ = [
    "AuditConfig",
    "GitUserConfig",
    "find_config_file",
    "load_config",
    "write_config",
]
