"""Wildcard pattern matching for endpoint key names."""

from __future__ import annotations

__all__ = ["match_pattern"]


def match_pattern(pattern: str, name: str, *, case_sensitive: bool = False) -> bool:
    """Match a key name against a wildcard pattern.

    '*' matches any run of characters, including an empty one. Matching
    ignores case unless ``case_sensitive`` is set, since plugins spell
    the same setting as ``access_key``, ``AccessKey`` or ``ACCESS_KEY``.

    Args:
        pattern: The pattern to match against. May contain '*' wildcards.
        name: The key name to test.
        case_sensitive: Compare characters exactly.

    Returns:
        True if the name matches the pattern, False otherwise.
    """
    if pattern == "*":
        return True
    if not case_sensitive:
        pattern = pattern.lower()
        name = name.lower()
    if "*" not in pattern:
        return pattern == name

    segments = pattern.split("*")
    pos = 0

    if not pattern.startswith("*"):
        if not name.startswith(segments[0]):
            return False
        pos = len(segments[0])

    for segment in segments[1:-1]:
        if not segment:
            continue
        idx = name.find(segment, pos)
        if idx == -1:
            return False
        pos = idx + len(segment)

    if not pattern.endswith("*"):
        tail = segments[-1]
        return len(name) - len(tail) >= pos and name.endswith(tail)

    return True
