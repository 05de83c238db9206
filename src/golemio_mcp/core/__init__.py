"""Core golemio-mcp modules: upstream client, lookup cache, enrichment and settings."""

from .exceptions import (
    ConfigurationError,
    DeserializationError,
    GolemioError,
    ParameterValidationError,
    UpstreamError,
)
from .lookup_cache import DEFAULT_TTL, CacheEntry, LookupCache
from .result import Failure, Result, Success, to_envelope

__all__ = [
    "DEFAULT_TTL",
    "CacheEntry",
    "ConfigurationError",
    "DeserializationError",
    "Failure",
    "GolemioError",
    "LookupCache",
    "ParameterValidationError",
    "Result",
    "Success",
    "UpstreamError",
    "to_envelope",
]
