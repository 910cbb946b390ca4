"""Conversion of alternating key/value arguments into log fields."""

from __future__ import annotations

from collections.abc import Sequence

from ctxlog.foundation.errors import Fields

MISSING_VALUE = "MISSING_VALUE"
INVALID_KEY_PREFIX = "invalid_key_"


def merge_fields(pairs: Sequence[object]) -> Fields:
    """Turn ``(k1, v1, k2, v2, ...)`` into ``{k1: v1, k2: v2}``.

    Never raises. A non-string key at index i becomes ``"invalid_key_<i>"``;
    a trailing key without a value gets ``MISSING_VALUE``.

    Example:
        >>> merge_fields(("user", 7, 3, "x", "dangling"))
        {'user': 7, 'invalid_key_2': 'x', 'dangling': 'MISSING_VALUE'}
    """
    fields: Fields = {}
    length = len(pairs)
    for i in range(0, length - 1, 2):
        fields[_key(pairs[i], i)] = pairs[i + 1]
    if length % 2:
        fields[_key(pairs[-1], length - 1)] = MISSING_VALUE
    return fields


def _key(candidate: object, index: int) -> str:
    return candidate if isinstance(candidate, str) else f"{INVALID_KEY_PREFIX}{index}"
