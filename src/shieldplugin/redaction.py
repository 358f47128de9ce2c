"""Masking of secret endpoint values before they reach logs or reprs."""

from __future__ import annotations

import copy
from collections.abc import Iterable
from typing import Any

from shieldplugin.utils.pattern import match_pattern

__all__ = ["redact_endpoint", "REDACTED_VALUE", "DEFAULT_SENSITIVE_KEYS"]

REDACTED_VALUE: str = "***REDACTED***"

DEFAULT_SENSITIVE_KEYS: tuple[str, ...] = (
    "*password*",
    "*secret*",
    "*token*",
    "*key*",
    "*credential*",
)


def redact_endpoint(data: dict[str, Any], patterns: Iterable[str] = DEFAULT_SENSITIVE_KEYS) -> dict[str, Any]:
    """Redact values whose key matches any of the given wildcard patterns.

    Returns a deep copy of data with matching values replaced by
    "***REDACTED***". Nested maps, and maps inside arrays, are walked
    too. A null value is left as is so "not set" stays visible.

    Args:
        data: The decoded endpoint mapping.
        patterns: Case-insensitive '*' wildcard patterns naming secret keys.

    Returns:
        A new dict with secret values replaced. Original data is not modified.
    """
    pattern_list = list(patterns)
    redacted = copy.deepcopy(data)
    _redact_mapping(redacted, pattern_list)
    return redacted


def _redact_mapping(data: dict[str, Any], patterns: list[str]) -> None:
    for key, value in data.items():
        if value is not None and any(match_pattern(p, key) for p in patterns):
            data[key] = REDACTED_VALUE
        else:
            _redact_value(value, patterns)


def _redact_value(value: Any, patterns: list[str]) -> None:
    if isinstance(value, dict):
        _redact_mapping(value, patterns)
    elif isinstance(value, list):
        for item in value:
            _redact_value(item, patterns)
