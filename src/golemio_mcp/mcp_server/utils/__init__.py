"""Utilities shared by the MCP tool modules."""

from .errors import SENSITIVE_KEYS, failure_envelope, sanitize_parameters
from .execution import run_operation

__all__ = ["SENSITIVE_KEYS", "failure_envelope", "run_operation", "sanitize_parameters"]
