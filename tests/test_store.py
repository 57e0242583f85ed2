"""
Tests for the Key-Value Store

These tests verify the KvStore operations:
- set(): Insert or overwrite key-value pairs
- get(): Retrieve values by key, None when absent
- remove(): Delete keys, KeyNotFoundError when absent
- exists(), size(), clear(): inspection helpers

Run with: python -m pytest tests/test_store.py -v
"""

import pytest

from kvs.engine.errors import KeyNotFoundError, KvsError, StoreFailureError
from kvs.engine.store import KvsEngine, KvStore


class TestKvStoreSet:
    """Test set() method."""

    def test_set_new_key(self, store: KvStore):
        """Test inserting a new key-value pair."""
        assert store.set("key1", "value1") is None
        assert store.size() == 1

    def test_set_then_get(self, store: KvStore):
        """Test that get returns what set stored."""
        store.set("foo", "bar")
        assert store.get("foo") == "bar"

    def test_set_overwrites_existing_key(self, store: KvStore):
        """Test updating an existing key's value."""
        store.set("a", "1")
        store.set("a", "2")

        assert store.get("a") == "2"
        assert store.size() == 1  # No duplicate entry

    def test_set_multiple_keys(self, store: KvStore):
        """Test inserting multiple different keys."""
        store.set("key1", "value1")
        store.set("key2", "value2")
        store.set("key3", "value3")

        assert store.size() == 3
        assert store.get("key1") == "value1"
        assert store.get("key2") == "value2"
        assert store.get("key3") == "value3"

    def test_set_overwrite_multiple_times(self, store: KvStore):
        """Test overwriting the same key multiple times."""
        for i in range(10):
            store.set("key", f"value{i}")

        assert store.get("key") == "value9"
        assert store.size() == 1


class TestKvStoreGet:
    """Test get() method."""

    def test_get_nonexistent_key(self, store: KvStore):
        """Test retrieving a key that was never set returns None."""
        assert store.get("missing") is None

    def test_get_does_not_create_key(self, store: KvStore):
        """Test a lookup miss leaves the store unchanged."""
        store.get("missing")
        assert store.size() == 0
        assert store.exists("missing") is False

    def test_get_empty_value_is_not_absent(self, store: KvStore):
        """Test a key set to "" is distinguishable from an absent key."""
        store.set("key", "")
        assert store.get("key") == ""
        assert store.get("key") is not None


class TestKvStoreRemove:
    """Test remove() method."""

    def test_remove_existing_key(self, store: KvStore):
        """Test removing a present key makes it absent."""
        store.set("key1", "value1")
        store.remove("key1")

        assert store.get("key1") is None
        assert store.size() == 0

    def test_remove_nonexistent_key(self, store: KvStore):
        """Test removing an absent key raises KeyNotFoundError."""
        with pytest.raises(KeyNotFoundError) as exc_info:
            store.remove("missing")

        assert str(exc_info.value) == "Key not found"
        assert exc_info.value.key == "missing"

    def test_remove_twice(self, store: KvStore):
        """Test the second remove of the same key fails."""
        store.set("key", "value")
        store.remove("key")

        with pytest.raises(KeyNotFoundError):
            store.remove("key")

    def test_remove_one_of_many(self, populated_store: KvStore):
        """Test removing one key doesn't affect others."""
        populated_store.remove("foo")

        assert populated_store.get("foo") is None
        assert populated_store.get("user:1") == "alice"
        assert populated_store.get("empty") == ""
        assert populated_store.size() == 2

    def test_failed_remove_leaves_store_unchanged(self, populated_store: KvStore):
        """Test a failing remove has no effect on existing keys."""
        with pytest.raises(KeyNotFoundError):
            populated_store.remove("missing")

        assert populated_store.size() == 3
        assert populated_store.get("foo") == "bar"

    def test_set_remove_set(self, store: KvStore):
        """Test a removed key can be set again like a fresh key."""
        store.set("key", "value")
        store.remove("key")
        store.set("key", "value")

        assert store.get("key") == "value"
        assert store.size() == 1


class TestKvStoreInspection:
    """Test exists(), size(), clear() and the container protocol."""

    def test_exists(self, populated_store: KvStore):
        assert populated_store.exists("foo") is True
        assert populated_store.exists("empty") is True
        assert populated_store.exists("missing") is False

    def test_exists_after_remove(self, store: KvStore):
        store.set("key", "value")
        store.remove("key")
        assert store.exists("key") is False

    def test_size_empty_store(self, store: KvStore):
        assert store.size() == 0
        assert len(store) == 0

    def test_len_and_contains(self, populated_store: KvStore):
        assert len(populated_store) == 3
        assert "user:1" in populated_store
        assert "nobody" not in populated_store

    def test_clear(self, populated_store: KvStore):
        """Test clear removes all keys."""
        populated_store.clear()

        assert populated_store.size() == 0
        assert populated_store.get("foo") is None

    def test_stores_are_independent(self):
        """Test two instances never share state."""
        first = KvStore()
        second = KvStore()
        first.set("key", "value")

        assert second.get("key") is None


class TestKvStoreEdgeCases:
    """Test edge cases."""

    def test_empty_key(self, store: KvStore):
        """Test empty string as key."""
        store.set("", "value")
        assert store.get("") == "value"

    def test_whitespace_and_unicode(self, store: KvStore):
        """Test keys and values are stored verbatim."""
        store.set("key with spaces", "value\nwith newline")
        store.set("ключ", "значение")

        assert store.get("key with spaces") == "value\nwith newline"
        assert store.get("ключ") == "значение"

    def test_case_sensitive_keys(self, store: KvStore):
        """Test that keys are case-sensitive."""
        store.set("Key", "value1")
        store.set("KEY", "value2")
        store.set("key", "value3")

        assert store.get("Key") == "value1"
        assert store.get("KEY") == "value2"
        assert store.get("key") == "value3"
        assert store.size() == 3

    def test_large_value(self, store: KvStore):
        """Test values have no size limit."""
        value = "v" * 1_000_000
        store.set("big", value)
        assert store.get("big") == value

    def test_many_keys(self, store: KvStore):
        """Test inserting and removing many keys."""
        for i in range(1000):
            store.set(f"key{i}", f"value{i}")

        for i in range(0, 1000, 2):
            store.remove(f"key{i}")

        assert store.size() == 500
        assert store.get("key0") is None
        assert store.get("key999") == "value999"


class TestEngineContract:
    """Test the abstract engine contract and error hierarchy."""

    def test_kvstore_is_engine(self, store: KvStore):
        assert isinstance(store, KvsEngine)

    def test_engine_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            KvsEngine()

    def test_incomplete_engine_cannot_be_instantiated(self):
        class SetOnlyEngine(KvsEngine):
            def set(self, key, value):
                pass

        with pytest.raises(TypeError):
            SetOnlyEngine()

    def test_error_hierarchy(self):
        assert issubclass(KeyNotFoundError, KvsError)
        assert issubclass(StoreFailureError, KvsError)
        assert not issubclass(KeyNotFoundError, KeyError)
