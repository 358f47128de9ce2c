"""Tests for wildcard key-name matching."""

from __future__ import annotations

import pytest

from shieldplugin.utils.pattern import match_pattern


class TestMatchPattern:
    def test_star_matches_everything(self) -> None:
        assert match_pattern("*", "anything")
        assert match_pattern("*", "")

    def test_exact(self) -> None:
        assert match_pattern("password", "password")
        assert not match_pattern("password", "password2")

    @pytest.mark.parametrize(
        ("pattern", "name", "expected"),
        [
            ("*key*", "s3_access_key", True),
            ("*key*", "keyring", True),
            ("*key*", "host", False),
            ("secret*", "secret_access_key", True),
            ("secret*", "my_secret", False),
            ("*_key", "access_key", True),
            ("*_key", "access_keys", False),
            ("a*b", "ab", True),
            ("ab*b", "ab", False),
            ("a*b*c", "axxbyyc", True),
            ("a*b*c", "axxcyyb", False),
        ],
    )
    def test_wildcards(self, pattern: str, name: str, expected: bool) -> None:
        assert match_pattern(pattern, name) is expected

    def test_case_insensitive_by_default(self) -> None:
        assert match_pattern("*password*", "DB_PASSWORD")
        assert match_pattern("*Key", "accesskey")

    def test_case_sensitive(self) -> None:
        assert not match_pattern("*password*", "DB_PASSWORD", case_sensitive=True)
        assert match_pattern("*PASSWORD", "DB_PASSWORD", case_sensitive=True)
