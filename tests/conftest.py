"""Shared fixtures for the endpoint test suite."""

from __future__ import annotations

import json
from typing import Any

import pytest

from shieldplugin.endpoint import Endpoint, parse_endpoint


SAMPLE_ENDPOINT: dict[str, Any] = {
    "name": "nightly",
    "count": 3,
    "ratio": 0.5,
    "enabled": True,
    "tags": ["a", "b"],
    "mixed": ["a", 1, True],
    "opts": {"a": 1, "b": True},
    "nothing": None,
    "s3_access_key": "AKIA0000",
    "secret_access_key": "hunter2",
}


@pytest.fixture
def sample_data() -> dict[str, Any]:
    """A fresh copy of the sample endpoint payload."""
    return json.loads(json.dumps(SAMPLE_ENDPOINT))


@pytest.fixture
def endpoint() -> Endpoint:
    """An Endpoint parsed from the sample payload."""
    return parse_endpoint(json.dumps(SAMPLE_ENDPOINT))
