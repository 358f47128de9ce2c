"""Small helpers shared across shieldplugin."""

from shieldplugin.utils.pattern import match_pattern

__all__ = ["match_pattern"]
