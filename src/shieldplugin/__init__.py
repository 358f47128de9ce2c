"""shieldplugin - Typed endpoint access for backup storage and target plugins."""

from __future__ import annotations

# Endpoint
from shieldplugin.endpoint import Endpoint, ValueKind, kind_of, parse_endpoint

# Config
from shieldplugin.config import Config

# Errors
from shieldplugin.errors import (
    ConfigError,
    ConfigNotFoundError,
    ElementTypeMismatchError,
    EndpointAccessError,
    EndpointParseError,
    ErrorCodes,
    MalformedInputError,
    MissingInputError,
    MissingKeyError,
    PluginError,
    TypeMismatchError,
)

# Redaction
from shieldplugin.redaction import DEFAULT_SENSITIVE_KEYS, REDACTED_VALUE, redact_endpoint

__version__ = "0.1.0"

__all__ = [
    # Endpoint
    "Endpoint",
    "ValueKind",
    "kind_of",
    "parse_endpoint",
    # Config
    "Config",
    # Errors
    "ErrorCodes",
    "PluginError",
    "ConfigError",
    "ConfigNotFoundError",
    "EndpointParseError",
    "MissingInputError",
    "MalformedInputError",
    "EndpointAccessError",
    "MissingKeyError",
    "TypeMismatchError",
    "ElementTypeMismatchError",
    # Redaction
    "redact_endpoint",
    "REDACTED_VALUE",
    "DEFAULT_SENSITIVE_KEYS",
]
