"""Tests for hash computation and serialization."""

from codestamp.stamping.constants import PLACEHOLDER_HASH, PLACEHOLDER_STAMP
from codestamp.stamping.hashing import compute_stamp_hash, get_hash, serialize_hash_input


def test_placeholder_is_hash_of_sentinel():
    assert PLACEHOLDER_HASH == "4097889236a2af26c293033feb964c4c"
    assert get_hash("placeholder") == PLACEHOLDER_HASH
    assert PLACEHOLDER_STAMP == "CodeStamp<<4097889236a2af26c293033feb964c4c>>"


def test_hash_is_truncated_lowercase_hex():
    value = get_hash("anything")
    assert len(value) == 32
    assert value == value.lower()
    int(value, 16)


def test_serialization_matches_compact_json():
    assert serialize_hash_input(["a", "b\n", 'q"uote', "é"]) == '["a","b\\n","q\\"uote","é"]'
    assert serialize_hash_input([]) == "[]"


def test_compute_stamp_hash():
    content = f"/* @generated {PLACEHOLDER_STAMP} */\n"
    assert compute_stamp_hash([], content) == "3db23235f1fa40cb21aeb9d2e29c2e28"


def test_get_hash_is_memoized():
    get_hash.cache_clear()
    get_hash("memo")
    get_hash("memo")
    info = get_hash.cache_info()
    assert info.hits == 1
    assert info.misses == 1


def test_lone_surrogates_are_escaped():
    assert serialize_hash_input(["a\ud800b", "\udfff"]) == '["a\\ud800b","\\udfff"]'
    assert len(compute_stamp_hash([], "a\ud800b")) == 32


def test_surrogate_pair_is_joined():
    assert serialize_hash_input(["\ud83d\ude00"]) == '["\U0001f600"]'
