"""Base service layer for Golemio tool operations.

Every public service method runs inside ``operation_boundary``: whatever
goes wrong below it (bad parameters, a missing token, an upstream error, a
payload that does not fit the model) comes back as a ``Failure`` instead of
an exception, so the MCP layer only ever sees results.
"""

import logging
from datetime import timedelta
from functools import wraps
from typing import Any, Callable, TypeVar

from pydantic import TypeAdapter, ValidationError

from golemio_mcp.core.exceptions import DeserializationError, GolemioError
from golemio_mcp.core.lookup_cache import DEFAULT_TTL, LookupCache
from golemio_mcp.core.result import Failure, Result
from golemio_mcp.core.upstream import GolemioClient

T = TypeVar("T")

logger = logging.getLogger(__name__)


class BaseService:
    """Base class for all Golemio services.

    Services hold no per-request state. The client and the lookup cache are
    shared, process-wide collaborators handed in at construction.
    """

    def __init__(self, client: GolemioClient, cache: LookupCache, cache_ttl: timedelta = DEFAULT_TTL) -> None:
        self.client = client
        self.cache = cache
        self.cache_ttl = cache_ttl
        logger.debug(f"Creating {self.__class__.__name__} instance")


def operation_boundary(description: str) -> Callable[[Callable[..., "Result[T]"]], Callable[..., "Result[T]"]]:
    """Decorator that turns exceptions raised by an operation into a ``Failure``.

    ``GolemioError`` messages are already written for the caller and are
    returned as-is. Anything else is logged with its traceback and reported
    as a generic failure mentioning ``description``.
    """

    def decorator(func: Callable[..., "Result[T]"]) -> Callable[..., "Result[T]"]:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> "Result[T]":
            logger.debug(f"Executing {func.__name__}")
            try:
                result = func(*args, **kwargs)
            except GolemioError as e:
                logger.warning(f"{func.__name__} failed: {e}")
                return Failure(str(e))
            except Exception as e:
                logger.error(f"Unexpected error in {func.__name__}: {e}", exc_info=True)
                return Failure(f"Error occurred while fetching {description}: {e}")
            logger.debug(f"Completed {func.__name__} (success={result.success})")
            return result

        return wrapper

    return decorator


def parse_payload(target: Any, payload: Any, what: str) -> Any:
    """Validate a decoded JSON payload against a model or type.

    Raises:
        DeserializationError: If the payload does not fit ``target``
    """
    try:
        return TypeAdapter(target).validate_python(payload)
    except ValidationError as e:
        raise DeserializationError(f"Failed to deserialize {what} response", e) from e
