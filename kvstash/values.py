"""Typed values held by the store."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class DataType(enum.Enum):
    """Kinds of value the store can hold."""

    STRING = enum.auto()
    INTEGER = enum.auto()
    FLOAT = enum.auto()
    BOOLEAN = enum.auto()
    LIST = enum.auto()
    HASH = enum.auto()
    JSON = enum.auto()


@dataclass
class Value:
    """A value tagged with its type.

    ``data`` is a ``str`` for STRING and JSON, an ``int`` for INTEGER, a
    ``float`` for FLOAT, a ``bool`` for BOOLEAN, a ``list`` of values for
    LIST (top of the stack last) and a ``dict`` of field to value for HASH.
    """

    type: DataType
    data: Any


def _require_str(text: object, what: str) -> str:
    if not isinstance(text, str):
        raise TypeError(f"{what} value must be a str, not {type(text).__name__}")
    return text


def string_value(text: str) -> Value:
    """Create a STRING value."""
    return Value(DataType.STRING, _require_str(text, "string"))


def integer_value(number: int) -> Value:
    """Create an INTEGER value; it must fit in a signed 64-bit integer."""
    number = int(number)
    if not _INT64_MIN <= number <= _INT64_MAX:
        raise OverflowError(f"{number} does not fit in a signed 64-bit integer")
    return Value(DataType.INTEGER, number)


def float_value(number: float) -> Value:
    """Create a FLOAT value."""
    return Value(DataType.FLOAT, float(number))


def boolean_value(flag: bool) -> Value:
    """Create a BOOLEAN value."""
    return Value(DataType.BOOLEAN, bool(flag))


def list_value() -> Value:
    """Create an empty LIST value."""
    return Value(DataType.LIST, [])


def hash_value() -> Value:
    """Create an empty HASH value."""
    return Value(DataType.HASH, {})


def json_value(text: str) -> Value:
    """Create a JSON value holding ``text`` as given."""
    return Value(DataType.JSON, _require_str(text, "json"))