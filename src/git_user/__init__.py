"""Manage named git identities and apply them to local repositories."""

__version__ = "0.2.0"
