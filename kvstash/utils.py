"""Clock and hashing helpers used by the store."""

from __future__ import annotations

import time

_FNV_OFFSET = 2166136261
_FNV_PRIME = 16777619
_MASK64 = (1 << 64) - 1
_HIGH_BYTES = _MASK64 ^ 0xFF


def current_time_ms() -> int:
    """Return the wall-clock time in whole milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def hash_string(text: str | bytes) -> int:
    """Return the 64-bit FNV-1a style hash of ``text``.

    Text is hashed as UTF-8. Bytes of 0x80 and above are sign-extended
    before mixing, as a signed ``char`` would be.
    """
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    result = _FNV_OFFSET
    for byte in data:
        if byte & 0x80:
            byte |= _HIGH_BYTES
        result = ((result ^ byte) * _FNV_PRIME) & _MASK64
    return result