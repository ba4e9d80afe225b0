"""Profile storage."""

from .store import EDITABLE_FIELDS, Profile, ProfileStore

__all__ = ["EDITABLE_FIELDS", "Profile", "ProfileStore"]
