import time

import pytest

from kvstash.utils import current_time_ms, hash_string


def test_empty_string_hash_is_offset_basis():
    assert hash_string("") == 2166136261


def test_hash_is_deterministic():
    keys = [chr(code) for code in range(1, 128)] + ["mykey", "myhash", "mylist"]
    first = {key: hash_string(key) for key in keys}
    second = {key: hash_string(key) for key in reversed(keys)}
    assert first == second
    assert len(set(first.values())) == len(keys)
    assert 2166136261 not in first.values()


def test_hash_distinguishes_keys():
    assert hash_string("field1") != hash_string("field2")
    assert hash_string("ab") != hash_string("ba")


@pytest.mark.parametrize("text", ["a", "mykey", "Hello, World!", "héllo", "x" * 500])
def test_hash_fits_in_64_bits(text):
    value = hash_string(text)
    assert 0 <= value < 2**64


def test_str_and_utf8_bytes_hash_alike():
    assert hash_string("héllo") == hash_string("héllo".encode("utf-8"))


def test_current_time_tracks_wall_clock():
    before = time.time() * 1000
    now = current_time_ms()
    after = time.time() * 1000
    assert before - 1 <= now <= after + 1


def test_current_time_is_monotone_over_sleep():
    first = current_time_ms()
    time.sleep(0.01)
    second = current_time_ms()
    assert second >= first + 5