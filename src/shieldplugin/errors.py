"""Error hierarchy for shieldplugin."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "PluginError",
    "ConfigNotFoundError",
    "ConfigError",
    "EndpointParseError",
    "MissingInputError",
    "MalformedInputError",
    "EndpointAccessError",
    "MissingKeyError",
    "TypeMismatchError",
    "ElementTypeMismatchError",
    "ErrorCodes",
]


class PluginError(Exception):
    """Base error for all shieldplugin errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigNotFoundError(PluginError):
    """Raised when a configuration file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigError(PluginError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class EndpointParseError(PluginError):
    """Base for failures while building an endpoint from its raw JSON."""


class MissingInputError(EndpointParseError):
    """Raised when no endpoint JSON was supplied at all."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(
            code="ENDPOINT_MISSING",
            message="Missing required --endpoint value",
            **kwargs,
        )


class MalformedInputError(EndpointParseError):
    """Raised when the endpoint value is not a JSON object."""

    def __init__(self, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="ENDPOINT_MALFORMED",
            message=f"Error trying to parse --endpoint value as JSON: {reason}",
            details={"reason": reason},
            **kwargs,
        )

    @property
    def reason(self) -> str:
        """The underlying parser message."""
        return self.details["reason"]


class EndpointAccessError(PluginError):
    """Base for failures reading a single key from an endpoint."""

    @property
    def key(self) -> str:
        """The endpoint key that was requested."""
        return self.details["key"]


class MissingKeyError(EndpointAccessError):
    """Raised when a requested key is absent from the endpoint."""

    def __init__(self, key: str, **kwargs: Any) -> None:
        super().__init__(
            code="ENDPOINT_KEY_MISSING",
            message=f"Endpoint is missing required key '{key}'",
            details={"key": key},
            **kwargs,
        )


class TypeMismatchError(EndpointAccessError):
    """Raised when a key is present but holds a value of the wrong kind."""

    def __init__(self, key: str, expected: str, actual: str | None = None, **kwargs: Any) -> None:
        kwargs.setdefault("code", "ENDPOINT_TYPE_MISMATCH")
        kwargs.setdefault(
            "message",
            f"Endpoint key '{key}' should be {_article(expected)} {expected} value, got {actual}",
        )
        details = {"key": key, "expected": expected, "actual": actual}
        details.update(kwargs.pop("details", None) or {})
        super().__init__(details=details, **kwargs)

    @property
    def expected(self) -> str:
        """Kind tag the caller asked for."""
        return self.details["expected"]

    @property
    def actual(self) -> str | None:
        """Kind tag actually found in the endpoint."""
        return self.details["actual"]


class ElementTypeMismatchError(TypeMismatchError):
    """Raised when an element of an array key has the wrong kind."""

    def __init__(self, key: str, index: int, expected: str, actual: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            key,
            expected,
            actual,
            code="ENDPOINT_ELEMENT_TYPE_MISMATCH",
            message=(
                f"Element {index} of endpoint key '{key}' should be "
                f"{_article(expected)} {expected} value, got {actual}"
            ),
            details={"index": index},
            **kwargs,
        )

    @property
    def index(self) -> int:
        """Position of the offending element."""
        return self.details["index"]


def _article(word: str) -> str:
    return "an" if word[:1] in "aeiou" else "a"


class ErrorCodes:
    """All shieldplugin error codes as constants.

    Example:
        if error.code == ErrorCodes.ENDPOINT_KEY_MISSING:
            use_fallback()
    """

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    ENDPOINT_MISSING = "ENDPOINT_MISSING"
    ENDPOINT_MALFORMED = "ENDPOINT_MALFORMED"
    ENDPOINT_KEY_MISSING = "ENDPOINT_KEY_MISSING"
    ENDPOINT_TYPE_MISMATCH = "ENDPOINT_TYPE_MISMATCH"
    ENDPOINT_ELEMENT_TYPE_MISMATCH = "ENDPOINT_ELEMENT_TYPE_MISMATCH"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
