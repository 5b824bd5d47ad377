import time

import pytest

from kvstash.store import DataStore
from kvstash.values import DataType, integer_value, json_value, string_value


@pytest.fixture
def store():
    return DataStore()


def test_set_and_get(store):
    store.set("mykey", string_value("Hello, World!"), 0)
    assert store.get("mykey") == string_value("Hello, World!")


def test_get_missing_is_none(store):
    assert store.get("nothing") is None
    assert store.exists("nothing") is False


def test_overwrite_replaces_value(store):
    store.set("k", integer_value(1), 0)
    store.set("k", integer_value(2), 0)
    assert store.get("k").data == 2
    assert len(store) == 1


def test_delete(store):
    store.set("k", integer_value(1), 0)
    store.delete("k")
    assert store.get("k") is None
    assert len(store) == 0
    store.delete("k")
    assert len(store) == 0


def test_exists_and_contains(store):
    store.set("k", string_value("v"), 0)
    assert store.exists("k") is True
    assert "k" in store
    assert "other" not in store


def test_len_counts_keys(store):
    for name in ("a", "b", "c"):
        store.set(name, string_value(name), 0)
    assert len(store) == 3


def test_ttl_expiry(store):
    store.set("ttl_key", string_value("I will expire"), 1)
    time.sleep(0.02)
    assert store.get("ttl_key") is None
    assert "ttl_key" not in store
    assert len(store) == 0


def test_long_ttl_keeps_value(store):
    store.set("ttl_key", string_value("I will expire"), 60_000)
    assert store.get("ttl_key").data == "I will expire"


def test_reset_without_ttl_clears_expiry(store):
    store.set("k", string_value("a"), 1)
    store.set("k", string_value("b"), 0)
    time.sleep(0.02)
    assert store.get("k").data == "b"


def test_negative_ttl_rejected(store):
    with pytest.raises(ValueError):
        store.set("k", string_value("v"), -1)


def test_list_push_pop_is_last_in_first_out(store):
    assert store.list_push("mylist", string_value("one")) is True
    assert store.list_push("mylist", string_value("two")) is True
    assert store.list_size("mylist") == 2
    assert store.list_peek("mylist").data == "two"
    assert store.list_pop("mylist").data == "two"
    assert store.list_size("mylist") == 1
    assert store.list_pop("mylist").data == "one"
    assert store.list_pop("mylist") is None
    assert store.list_peek("mylist") is None


def test_list_created_on_push(store):
    store.list_push("mylist", integer_value(5))
    assert store.get("mylist").type is DataType.LIST


def test_list_ops_on_wrong_type(store):
    store.set("s", string_value("x"), 0)
    assert store.list_push("s", string_value("y")) is False
    assert store.list_pop("s") is None
    assert store.list_peek("s") is None
    assert store.list_size("s") == 0
    assert store.get("s").data == "x"


def test_list_size_of_missing_key(store):
    assert store.list_size("missing") == 0


def test_hash_set_get(store):
    assert store.hash_set("myhash", "field1", string_value("value1")) is True
    assert store.hash_set("myhash", "field2", integer_value(42)) is True
    assert store.hash_get("myhash", "field1").data == "value1"
    assert store.hash_get("myhash", "field2").data == 42
    assert store.hash_get("myhash", "field3") is None


def test_hash_set_overwrites_field(store):
    store.hash_set("h", "f", integer_value(1))
    store.hash_set("h", "f", integer_value(2))
    assert store.hash_get("h", "f").data == 2


def test_hash_del(store):
    store.hash_set("h", "f", integer_value(1))
    assert store.hash_del("h", "f") is True
    assert store.hash_get("h", "f") is None
    assert store.hash_del("h", "f") is False
    assert store.hash_del("missing", "f") is False


def test_hash_ops_on_wrong_type(store):
    store.set("j", json_value("{}"), 0)
    assert store.hash_set("j", "f", integer_value(1)) is False
    assert store.hash_get("j", "f") is None
    assert store.hash_del("j", "f") is False