"""git collaborator."""

from .collaborator import ATTR_EMAIL, ATTR_NAME, COMMAND_NOT_FOUND, ConfigValue, Git

__all__ = ["ATTR_EMAIL", "ATTR_NAME", "COMMAND_NOT_FOUND", "ConfigValue", "Git"]
