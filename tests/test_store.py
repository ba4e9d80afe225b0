"""Tests for the profile store."""

from pathlib import Path

import pytest

from git_user.errors import CorruptedStoreError, StorageError
from git_user.profiles import Profile, ProfileStore


@pytest.fixture
def store() -> ProfileStore:
    return ProfileStore(
        {
            "work": Profile(name="Work Name", email="work@example.com"),
            "personal": Profile(name="Me", email="me@example.org"),
        }
    )


class TestLoad:
    def test_empty_text_is_empty_store(self):
        assert len(ProfileStore.load("")) == 0

    def test_loads_profiles_in_file_order(self):
        raw = (
            "zeta:\n  name: Zeta\n  email: z@example.com\n"
            "alpha:\n  name: Alpha\n  email: a@example.com\n"
        )
        store = ProfileStore.load(raw)
        assert store.names() == ["zeta", "alpha"]
        assert store.get("alpha") == Profile(name="Alpha", email="a@example.com")

    def test_unknown_fields_are_kept(self):
        raw = "work:\n  name: W\n  email: w@example.com\n  signingkey: ABC123\n"
        store = ProfileStore.load(raw)
        assert "signingkey: ABC123" in store.serialize()

    @pytest.mark.parametrize(
        "raw",
        [
            "- work\n- personal\n",
            "just a string\n",
            "42\n",
            "work: not-a-mapping\n",
            "work:\n  - name\n  - email\n",
            "work:\n  email: w@example.com\n",
            "work:\n  name: W\n",
            "work: {}\n",
            "work:\n  name: 5\n  email: w@example.com\n",
            "work:\n  name: W\n  email: true\n",
            "work:\n  name: W\n  email: null\n",
            "work:\n  name: [W]\n  email: w@example.com\n",
            "1:\n  name: W\n  email: w@example.com\n",
            "work: {name: W, email: [unclosed\n",
            "work:\n  name: A\n  email: a@example.com\n"
            "work:\n  name: B\n  email: b@example.com\n",
            "work:\n  name: A\n  name: B\n  email: a@example.com\n",
        ],
    )
    def test_rejects_malformed_files(self, raw):
        with pytest.raises(CorruptedStoreError):
            ProfileStore.load(raw)

    def test_duplicate_profile_is_named(self):
        raw = (
            "work:\n  name: A\n  email: a@example.com\n"
            "home:\n  name: H\n  email: h@example.com\n"
            "work:\n  name: B\n  email: b@example.com\n"
        )
        with pytest.raises(CorruptedStoreError) as exc_info:
            ProfileStore.load(raw, Path("/tmp/profiles"))
        assert exc_info.value.reason == "duplicate profile 'work'"
        assert exc_info.value.path == Path("/tmp/profiles")

    def test_duplicate_field_is_named(self):
        raw = "work:\n  name: A\n  email: a@example.com\n  email: b@example.com\n"
        with pytest.raises(CorruptedStoreError) as exc_info:
            ProfileStore.load(raw)
        assert exc_info.value.reason == "duplicate field 'email'"

    def test_same_field_in_different_profiles_is_fine(self):
        raw = (
            "work:\n  name: Same\n  email: same@example.com\n"
            "home:\n  name: Same\n  email: same@example.com\n"
        )
        assert ProfileStore.load(raw).names() == ["work", "home"]

    def test_corruption_names_the_path(self):
        path = Path("/tmp/git-user/profiles")
        with pytest.raises(CorruptedStoreError) as exc_info:
            ProfileStore.load("- nope\n", path)
        assert exc_info.value.path == path
        assert str(path) in str(exc_info.value)
        assert exc_info.value.exit_code == 2


class TestRoundTrip:
    def test_serialize_then_load_is_identity(self, store):
        assert ProfileStore.load(store.serialize()) == store

    def test_empty_store_round_trips(self):
        empty = ProfileStore()
        assert ProfileStore.load(empty.serialize()) == empty

    def test_awkward_values_round_trip(self):
        store = ProfileStore(
            {
                "yes": Profile(name="null", email="a: b@example.com"),
                "123": Profile(name="Zoë Ünïcode", email="'quoted'@example.com"),
                "with space": Profile(name="  padded  ", email="#hash@example.com"),
            }
        )
        loaded = ProfileStore.load(store.serialize())
        assert loaded == store
        assert loaded.names() == ["yes", "123", "with space"]

    def test_serialize_is_deterministic(self, store):
        assert store.serialize() == store.serialize()


class TestMutation:
    def test_insert_and_contains(self, store):
        store.insert("oss", Profile(name="OSS", email="oss@example.com"))
        assert store.contains("oss")
        assert len(store) == 3
        assert store.names()[-1] == "oss"

    def test_insert_overwrites(self, store):
        store.insert("work", Profile(name="Other", email="o@example.com"))
        assert store.get("work").name == "Other"
        assert len(store) == 2

    def test_remove(self, store):
        store.remove("work")
        assert not store.contains("work")
        assert store.names() == ["personal"]

    def test_get_missing_is_key_error(self, store):
        with pytest.raises(KeyError):
            store.get("missing")

    def test_rename_keeps_values(self, store):
        before = store.get("work")
        store.rename("work", "job")
        assert not store.contains("work")
        assert store.get("job") == before

    def test_set_field(self, store):
        store.set_field("work", "email", "new@example.com")
        assert store.get("work") == Profile(name="Work Name", email="new@example.com")

    def test_set_unknown_field_rejected(self, store):
        with pytest.raises(ValueError):
            store.set_field("work", "signingkey", "ABC")


class TestFile:
    def test_read_creates_missing_file(self, tmp_path):
        path = tmp_path / "app" / "profiles"
        store, raw = ProfileStore.read(path)
        assert path.exists()
        assert raw == ""
        assert len(store) == 0

    def test_save_then_read(self, tmp_path, store):
        path = tmp_path / "profiles"
        store.save(path)
        loaded, raw = ProfileStore.read(path)
        assert loaded == store
        assert raw == store.serialize()

    def test_save_leaves_no_temp_files(self, tmp_path, store):
        path = tmp_path / "profiles"
        store.save(path)
        store.save(path)
        assert [p.name for p in tmp_path.iterdir()] == ["profiles"]

    def test_save_into_missing_directory_is_storage_error(self, tmp_path, store):
        with pytest.raises(StorageError):
            store.save(tmp_path / "missing" / "profiles")

    def test_read_non_utf8_is_corruption(self, tmp_path):
        path = tmp_path / "profiles"
        path.write_bytes(b"\xff\xfe\x00bad")
        with pytest.raises(CorruptedStoreError):
            ProfileStore.read(path)
