"""Tests for key/value field merging."""

from ctxlog.runtime.observability.logging import INVALID_KEY_PREFIX, MISSING_VALUE, merge_fields


def test_even_pairs_with_string_keys() -> None:
    """Every pair becomes one entry, values untouched."""
    payload = {"nested": [1, 2]}
    fields = merge_fields(("user", 7, "payload", payload, "ok", True))

    assert fields == {"user": 7, "payload": payload, "ok": True}
    assert fields["payload"] is payload


def test_empty_input() -> None:
    assert merge_fields(()) == {}


def test_odd_length_gets_missing_value() -> None:
    """Trailing key without a value is kept with the sentinel."""
    assert merge_fields(("a", 1, "dangling")) == {"a": 1, "dangling": MISSING_VALUE}
    assert merge_fields(("only",)) == {"only": "MISSING_VALUE"}


def test_non_string_key_uses_position() -> None:
    """Non-string key at index i becomes invalid_key_i; its value is kept."""
    fields = merge_fields(("a", 1, 42, "kept", None, "also"))

    assert fields == {"a": 1, "invalid_key_2": "kept", "invalid_key_4": "also"}


def test_non_string_trailing_key() -> None:
    assert merge_fields(("a", 1, 3.5)) == {"a": 1, f"{INVALID_KEY_PREFIX}2": MISSING_VALUE}


def test_later_duplicate_key_wins() -> None:
    assert merge_fields(("k", 1, "k", 2)) == {"k": 2}


def test_accepts_lists() -> None:
    assert merge_fields(["k", "v"]) == {"k": "v"}
