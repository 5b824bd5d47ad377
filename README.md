# kvstash

A small in-memory key-value store. Every entry is a typed `Value`: a string,
integer, float, boolean, JSON text, a list (used as a stack) or a hash of
named fields. Keys can be given a time to live in milliseconds; an expired
key is dropped the next time it is read.

## Installation

```
pip install kvstash
```

## Usage

```python
from kvstash.store import DataStore
from kvstash.values import string_value, integer_value, json_value

store = DataStore()

store.set("greeting", string_value("Hello, World!"))       # no expiry
store.set("session", string_value("short-lived"), 2000)    # expires after 2 s
print(store.get("greeting"))
print("session" in store, len(store))

# Lists: push and pop from the top
store.list_push("jobs", string_value("one"))
store.list_push("jobs", string_value("two"))
print(store.list_size("jobs"))   # 2
print(store.list_pop("jobs"))    # the value "two"
print(store.list_peek("jobs"))   # the value "one"

# Hashes: fields inside one key
store.hash_set("user", "name", string_value("Jane"))
store.hash_set("user", "age", integer_value(42))
print(store.hash_get("user", "age"))
store.hash_del("user", "name")

store.set("doc", json_value('{"name": "John Doe", "age": 30}'))
store.delete("doc")
```

### The store

`kvstash.store.DataStore` offers:

- `set(key, value, ttl_ms=0)` — store a value; a positive `ttl_ms` makes it
  expire that many milliseconds later, and a negative one raises `ValueError`.
  Setting an existing key replaces its value and its expiry.
- `get(key)` — the value, or `None` if the key is missing or has expired.
- `delete(key)` — remove a key; a missing key is ignored.
- `exists(key)` and `key in store` — whether the key holds a live value.
- `len(store)` — the number of live keys (expired keys are dropped first).
- `list_push`, `list_pop`, `list_peek`, `list_size` — a stack under one key.
  `list_push` creates the list if the key is missing.
- `hash_set`, `hash_get`, `hash_del` — named fields under one key.
  `hash_set` creates the hash if the key is missing.

Operating on a key as a list or hash when it holds a different type is
refused: `list_push` and `hash_set` return `False`, `list_pop`, `list_peek`
and `hash_get` return `None`, `list_size` returns `0` and `hash_del` returns
`False`. Values are returned as stored, not copied.

### Values

`kvstash.values` has the `DataType` enum (`STRING`, `INTEGER`, `FLOAT`,
`BOOLEAN`, `LIST`, `HASH`, `JSON`), the `Value` dataclass with `type` and
`data`, and the constructors `string_value`, `integer_value`, `float_value`,
`boolean_value`, `list_value`, `hash_value` and `json_value`.
`integer_value` raises `OverflowError` for numbers outside the signed 64-bit
range; `string_value` and `json_value` raise `TypeError` for anything but a
`str`. JSON text is kept as given and is not parsed or checked.

### Helpers

`kvstash.utils` provides `current_time_ms()` (wall-clock milliseconds since
the epoch) and `hash_string()`, a 64-bit FNV-1a style hash of a string
(as UTF-8) or of bytes.

## Demo

A short walkthrough of the store's features, including a key that expires:

```
kvstash-demo
kvstash-demo --ttl-ms 500 --wait 1
```

`--ttl-ms` sets the time to live of the expiring key (default 2000) and
`--wait` the seconds to wait before reading it again (default 3).

## What it does not do

The store lives in the memory of one Python process. It does not save data
to disk, it has no network server or client protocol, and it does no locking
for use from several threads at once.

## Running the tests

```
pip install "kvstash[test]"
pytest
```