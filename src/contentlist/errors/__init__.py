"""Custom exception hierarchy for contentlist."""

from __future__ import annotations


class ContentListError(Exception):
    """Base class for all custom errors raised by contentlist."""


class ConfigurationError(ContentListError):
    """Raised when a controller configuration fails validation."""


class FilterDefinitionError(ConfigurationError):
    """Raised when a declared filter cannot be turned into a predicate."""


__all__ = [
    "ConfigurationError",
    "ContentListError",
    "FilterDefinitionError",
]
