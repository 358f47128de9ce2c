"""Tests for redact_endpoint()."""

from __future__ import annotations

import copy

from shieldplugin.redaction import DEFAULT_SENSITIVE_KEYS, REDACTED_VALUE, redact_endpoint


class TestRedactEndpointBasic:
    def test_default_patterns(self) -> None:
        data = {"host": "db", "password": "pw", "AccessKey": "AKIA", "auth_token": "t"}
        result = redact_endpoint(data)
        assert result == {
            "host": "db",
            "password": REDACTED_VALUE,
            "AccessKey": REDACTED_VALUE,
            "auth_token": REDACTED_VALUE,
        }

    def test_custom_patterns(self) -> None:
        result = redact_endpoint({"host": "db", "password": "pw"}, ["host"])
        assert result == {"host": REDACTED_VALUE, "password": "pw"}

    def test_no_patterns(self) -> None:
        data = {"password": "pw"}
        assert redact_endpoint(data, []) == data

    def test_null_secret_left_visible(self) -> None:
        assert redact_endpoint({"password": None}) == {"password": None}

    def test_whole_value_replaced(self) -> None:
        result = redact_endpoint({"credentials": {"user": "u", "pass": "p"}})
        assert result["credentials"] == REDACTED_VALUE

    def test_defaults_cover_common_names(self) -> None:
        assert "*password*" in DEFAULT_SENSITIVE_KEYS
        assert "*secret*" in DEFAULT_SENSITIVE_KEYS


class TestRedactEndpointNested:
    def test_nested_map(self) -> None:
        data = {"opts": {"region": "eu", "secret_key": "s"}}
        result = redact_endpoint(data)
        assert result["opts"] == {"region": "eu", "secret_key": REDACTED_VALUE}

    def test_maps_inside_arrays(self) -> None:
        data = {"targets": [{"host": "a", "password": "x"}, "plain", 3]}
        result = redact_endpoint(data)
        assert result["targets"] == [{"host": "a", "password": REDACTED_VALUE}, "plain", 3]


class TestRedactEndpointImmutability:
    def test_input_not_modified(self) -> None:
        data = {"password": "pw", "opts": {"token": "t"}, "list": [{"secret": "s"}]}
        original = copy.deepcopy(data)
        redact_endpoint(data)
        assert data == original
