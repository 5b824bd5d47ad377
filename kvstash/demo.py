"""Walk through the store's features and print the results."""

from __future__ import annotations

import argparse
import time
from collections.abc import Sequence

from kvstash.store import DataStore
from kvstash.values import (
    DataType,
    Value,
    integer_value,
    json_value,
    string_value,
)


def format_value(value: Value | None) -> str:
    """Render a value the way the demo prints it."""
    if value is None:
        return "(nil)"
    if value.type is DataType.STRING:
        return f'"{value.data}"'
    if value.type is DataType.INTEGER:
        return str(value.data)
    if value.type is DataType.FLOAT:
        return f"{value.data:f}"
    if value.type is DataType.BOOLEAN:
        return "true" if value.data else "false"
    if value.type is DataType.JSON:
        return value.data
    return "Complex type"


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Demonstrate the key-value store.")
    parser.add_argument(
        "--ttl-ms", type=int, default=2000, help="time to live of the expiring key"
    )
    parser.add_argument(
        "--wait", type=float, default=3.0, help="seconds to wait before re-reading it"
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration."""
    args = _parse_args(argv)
    store = DataStore()

    print("--- Basic Types ---")
    store.set("mykey", string_value("Hello, World!"), 0)
    print(f"mykey: {format_value(store.get('mykey'))}")
    store.set("mynumber", integer_value(123), 0)
    print(f"mynumber: {format_value(store.get('mynumber'))}")

    print("\n--- TTL ---")
    store.set("ttl_key", string_value("I will expire"), args.ttl_ms)
    print(f"ttl_key (before expiry): {format_value(store.get('ttl_key'))}")
    time.sleep(args.wait)
    print(f"ttl_key (after expiry): {format_value(store.get('ttl_key'))}")

    print("\n--- List ---")
    store.list_push("mylist", string_value("one"))
    store.list_push("mylist", string_value("two"))
    print(f"mylist size: {store.list_size('mylist')}")
    print(f"Popped: {format_value(store.list_pop('mylist'))}")
    print(f"mylist size after pop: {store.list_size('mylist')}")

    print("\n--- Hash ---")
    store.hash_set("myhash", "field1", string_value("value1"))
    store.hash_set("myhash", "field2", integer_value(42))
    print(f"myhash.field1: {format_value(store.hash_get('myhash', 'field1'))}")
    print(f"myhash.field2: {format_value(store.hash_get('myhash', 'field2'))}")

    print("\n--- JSON ---")
    store.set("myjson", json_value('{"name": "John Doe", "age": 30}'), 0)
    print(f"myjson: {format_value(store.get('myjson'))}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())