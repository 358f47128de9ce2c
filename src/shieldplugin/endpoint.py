"""Endpoint store: typed access to the JSON object handed to plugin actions.

A storage or target plugin receives its connection parameters as one JSON
object (usually the value of an ``--endpoint`` flag). ``parse_endpoint``
turns that string into an :class:`Endpoint`, and the ``get_*`` accessors
read individual keys with a shallow type check:

    endpoint = parse_endpoint('{"bucket": "nightly", "port": 9000}')
    bucket = endpoint.get_string("bucket")
    port = endpoint.get_number_default("port", 443)

Absent keys raise :class:`MissingKeyError`, wrong kinds raise
:class:`TypeMismatchError`. Only the ``*_default`` variants recover, and
only from absence.
"""

from __future__ import annotations

import copy
import logging
import math
from collections.abc import Iterator, Mapping
from enum import Enum
from typing import Any, Callable, TypeVar

from pydantic import JsonValue
from pydantic_core import from_json

from shieldplugin.config import Config
from shieldplugin.errors import (
    ElementTypeMismatchError,
    MalformedInputError,
    MissingInputError,
    MissingKeyError,
    TypeMismatchError,
)
from shieldplugin.redaction import DEFAULT_SENSITIVE_KEYS, redact_endpoint

__all__ = ["Endpoint", "ValueKind", "kind_of", "parse_endpoint"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ValueKind(str, Enum):
    """Kind tag of a decoded JSON value, as reported in type errors."""

    STRING = "string"
    NUMBER = "numeric"
    BOOLEAN = "boolean"
    ARRAY = "array"
    MAP = "map"
    NULL = "null"


def kind_of(value: Any) -> ValueKind:
    """Classify a decoded JSON value.

    ``bool`` is checked before numbers because it subclasses ``int``.

    Raises:
        TypeError: If the value is not something JSON can produce.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, list):
        return ValueKind.ARRAY
    if isinstance(value, dict):
        return ValueKind.MAP
    raise TypeError(f"Not a JSON value: {type(value).__name__}")


def parse_endpoint(raw: str | None, config: Config | None = None) -> Endpoint:
    """Build an Endpoint from the raw JSON object string.

    Raises:
        MissingInputError: If ``raw`` is empty or None.
        MalformedInputError: If ``raw`` is not valid JSON or its top
            level is not an object.
    """
    return Endpoint.from_json(raw, config=config)


class Endpoint(Mapping[str, JsonValue]):
    """Read-only mapping of endpoint keys to decoded JSON values."""

    def __init__(self, data: Mapping[str, JsonValue] | None = None, *, config: Config | None = None) -> None:
        self._data: dict[str, JsonValue] = {key: _as_float_numbers(key, value) for key, value in (data or {}).items()}
        self._sensitive_keys = tuple(
            (config or Config()).get_str_list("endpoint.sensitive_keys", list(DEFAULT_SENSITIVE_KEYS))
        )

    @classmethod
    def from_json(cls, raw: str | None, *, config: Config | None = None) -> Endpoint:
        """Parse a JSON object string into an Endpoint.

        Every JSON number is stored as a float, at any depth. Non-finite
        literals and numbers outside the float range are malformed input.
        """
        if not raw:
            raise MissingInputError()

        try:
            data = from_json(raw, allow_inf_nan=False)
        except ValueError as e:
            logger.debug("Rejected endpoint value: %s", e)
            raise MalformedInputError(reason=f"Invalid JSON: {e}", cause=e) from e

        if not isinstance(data, dict):
            reason = f"top-level value must be an object, got {kind_of(data).value}"
            logger.debug("Rejected endpoint value: %s", reason)
            raise MalformedInputError(reason=reason)

        try:
            endpoint = cls(data, config=config)
        except MalformedInputError as e:
            logger.debug("Rejected endpoint value: %s", e.reason)
            raise
        logger.debug("Parsed endpoint with %d keys: %s", len(endpoint), sorted(endpoint))
        return endpoint

    # -- Mapping protocol --

    def __getitem__(self, key: str) -> JsonValue:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Endpoint({self.redacted()!r})"

    # -- Views --

    def to_dict(self) -> dict[str, JsonValue]:
        """Return a deep copy of the decoded data, secrets included."""
        return copy.deepcopy(self._data)

    def redacted(self) -> dict[str, Any]:
        """Return a deep copy with secret values masked, safe for logging."""
        return redact_endpoint(self._data, self._sensitive_keys)

    # -- Typed accessors --

    def _lookup(self, key: str, expected: ValueKind) -> Any:
        if key not in self._data:
            raise MissingKeyError(key=key)
        value = self._data[key]
        actual = kind_of(value)
        if actual is not expected:
            raise TypeMismatchError(key=key, expected=expected.value, actual=actual.value)
        return value

    def get_string(self, key: str) -> str:
        """Return the string stored at ``key``."""
        return self._lookup(key, ValueKind.STRING)

    def get_number(self, key: str) -> float:
        """Return the number stored at ``key`` as a float."""
        return self._lookup(key, ValueKind.NUMBER)

    def get_boolean(self, key: str) -> bool:
        """Return the boolean stored at ``key``."""
        return self._lookup(key, ValueKind.BOOLEAN)

    def get_array(self, key: str) -> list[JsonValue]:
        """Return a shallow copy of the array at ``key``; elements are not checked."""
        return list(self._lookup(key, ValueKind.ARRAY))

    def get_string_list(self, key: str) -> list[str]:
        """Return the array at ``key``, requiring every element to be a string.

        Raises:
            ElementTypeMismatchError: If any element is not a string.
        """
        items = self._lookup(key, ValueKind.ARRAY)
        for index, item in enumerate(items):
            actual = kind_of(item)
            if actual is not ValueKind.STRING:
                raise ElementTypeMismatchError(
                    key=key, index=index, expected=ValueKind.STRING.value, actual=actual.value
                )
        return list(items)

    def get_map(self, key: str) -> dict[str, JsonValue]:
        """Return a shallow copy of the object at ``key``; values keep their JSON types."""
        return dict(self._lookup(key, ValueKind.MAP))

    # -- Default variants --

    def _or_default(self, getter: Callable[[str], T], key: str, default: T) -> T:
        try:
            return getter(key)
        except MissingKeyError:
            return default

    def get_string_default(self, key: str, default: str) -> str:
        """Like :meth:`get_string`, but returns ``default`` when ``key`` is absent."""
        return self._or_default(self.get_string, key, default)

    def get_number_default(self, key: str, default: float) -> float:
        """Like :meth:`get_number`, but returns ``default`` when ``key`` is absent."""
        return self._or_default(self.get_number, key, default)

    def get_boolean_default(self, key: str, default: bool) -> bool:
        """Like :meth:`get_boolean`, but returns ``default`` when ``key`` is absent."""
        return self._or_default(self.get_boolean, key, default)

    def get_string_list_default(self, key: str, default: list[str]) -> list[str]:
        """Like :meth:`get_string_list`, but returns ``default`` when ``key`` is absent.

        A present array with a non-string element still raises
        :class:`ElementTypeMismatchError`.
        """
        return self._or_default(self.get_string_list, key, default)


def _as_float_numbers(key: str, value: Any) -> Any:
    """Copy a decoded value with every number, nested ones included, as a finite float.

    Raises:
        MalformedInputError: If a number does not fit a finite float.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            number = math.inf
        if not math.isfinite(number):
            raise MalformedInputError(reason=f"number under key '{key}' is out of range for a float")
        return number
    if isinstance(value, list):
        return [_as_float_numbers(key, item) for item in value]
    if isinstance(value, dict):
        return {k: _as_float_numbers(key, v) for k, v in value.items()}
    return value
