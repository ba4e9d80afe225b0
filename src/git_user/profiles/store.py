"""Profile store backed by a single YAML file."""

import os
import tempfile
from pathlib import Path
from typing import Dict, Iterator, List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, StrictStr, ValidationError

from ..errors import CorruptedStoreError, StorageError

# Profile fields that can be edited from the command line
EDITABLE_FIELDS = ("name", "email")


class Profile(BaseModel):
    """A git identity: display name plus email.

    Unknown keys found in the file are kept and written back untouched.
    """

    model_config = ConfigDict(extra="allow")

    name: StrictStr
    email: StrictStr


class DuplicateKeyError(yaml.constructor.ConstructorError):
    def __init__(self, reason: str, mark):
        self.reason = reason
        super().__init__(None, None, reason, mark)


class UniqueKeyLoader(yaml.SafeLoader):
    """SafeLoader that rejects a key repeated within one mapping."""

    def construct_document(self, node):
        self._root = node
        return super().construct_document(node)

    def construct_mapping(self, node, deep=False):
        if isinstance(node, yaml.MappingNode):
            self.flatten_mapping(node)
            seen = set()
            for key_node, _ in node.value:
                key = self.construct_object(key_node, deep=deep)
                try:
                    duplicate = key in seen
                    seen.add(key)
                except TypeError:
                    # unhashable keys are reported by the base constructor
                    continue
                if duplicate:
                    if node is getattr(self, "_root", None):
                        reason = f"duplicate profile '{key}'"
                    else:
                        reason = f"duplicate field '{key}'"
                    raise DuplicateKeyError(reason, key_node.start_mark)
        return super().construct_mapping(node, deep=deep)


class ProfileStore:
    """Ordered mapping of profile name to Profile."""

    def __init__(self, profiles: Optional[Dict[str, Profile]] = None):
        self._profiles: Dict[str, Profile] = dict(profiles or {})

    @classmethod
    def load(cls, raw_text: str, path: Path | None = None) -> "ProfileStore":
        """Parse and validate the raw contents of a profiles file.

        Args:
            raw_text: File contents
            path: Where the contents came from, used in error messages

        Returns:
            ProfileStore instance

        Raises:
            CorruptedStoreError: If the text is not a mapping of profile
                mappings each holding string ``name`` and ``email`` values,
                or if a profile or field is repeated
        """
        try:
            data = yaml.load(raw_text, Loader=UniqueKeyLoader)
        except DuplicateKeyError as e:
            raise CorruptedStoreError(e.reason, path) from e
        except yaml.YAMLError as e:
            raise CorruptedStoreError(f"invalid YAML ({e})", path) from e

        if data is None:
            return cls()

        if not isinstance(data, dict):
            raise CorruptedStoreError("top level is not a mapping", path)

        profiles = {}
        for key, value in data.items():
            if not isinstance(key, str) or not key:
                raise CorruptedStoreError(f"invalid profile name {key!r}", path)
            if not isinstance(value, dict):
                raise CorruptedStoreError(f"profile '{key}' is not a mapping", path)
            try:
                profiles[key] = Profile.model_validate(value)
            except ValidationError as e:
                fields = ", ".join(
                    ".".join(str(part) for part in err["loc"]) for err in e.errors()
                )
                raise CorruptedStoreError(
                    f"profile '{key}' has a missing or non-string field ({fields})",
                    path,
                ) from e

        return cls(profiles)

    @classmethod
    def read(cls, path: Path) -> tuple["ProfileStore", str]:
        """Read a profiles file, creating it empty when absent.

        Returns:
            Tuple of (store, raw file text)
        """
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.touch(exist_ok=True)
            raw_text = path.read_bytes().decode("utf-8")
        except UnicodeDecodeError as e:
            raise CorruptedStoreError("not valid UTF-8", path) from e
        except OSError as e:
            raise StorageError(f"Could not read {path}: {e}") from e

        return cls.load(raw_text, path), raw_text

    def contains(self, profile: str) -> bool:
        return profile in self._profiles

    def get(self, profile: str) -> Profile:
        return self._profiles[profile]

    def insert(self, profile: str, value: Profile) -> None:
        self._profiles[profile] = value

    def remove(self, profile: str) -> None:
        del self._profiles[profile]

    def rename(self, old: str, new: str) -> None:
        """Move a profile to a new name, keeping its values.

        The caller checks that ``old`` exists and ``new`` does not.
        """
        value = self._profiles.pop(old)
        self._profiles[new] = value

    def set_field(self, profile: str, field: str, value: str) -> None:
        if field not in EDITABLE_FIELDS:
            raise ValueError(f"Unknown profile field '{field}'")
        current = self._profiles[profile]
        self._profiles[profile] = current.model_copy(update={field: value})

    def names(self) -> List[str]:
        return list(self._profiles)

    def serialize(self) -> str:
        """Render the whole store as YAML text, keeping insertion order."""
        data = {key: value.model_dump() for key, value in self._profiles.items()}
        return yaml.safe_dump(
            data, default_flow_style=False, sort_keys=False, allow_unicode=True
        )

    def save(self, path: Path) -> None:
        """Atomically replace ``path`` with the serialized store.

        Raises:
            StorageError: If the file could not be written
        """
        content = self.serialize()
        try:
            fd, tmp_path = tempfile.mkstemp(
                prefix=f".{path.name}_", suffix=".tmp", dir=path.parent
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(content)
                os.replace(tmp_path, path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        except OSError as e:
            raise StorageError(f"Could not write {path}: {e}") from e

    def __len__(self) -> int:
        return len(self._profiles)

    def __iter__(self) -> Iterator[tuple[str, Profile]]:
        return iter(list(self._profiles.items()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProfileStore):
            return NotImplemented
        return self._profiles == other._profiles
