"""Run blocking service calls from async tools."""

import asyncio
import logging
from typing import Any, Callable

from golemio_mcp.core.result import Result, to_envelope

from .errors import failure_envelope, sanitize_parameters

logger = logging.getLogger(__name__)


async def run_operation(
    tool_name: str,
    operation: Callable[..., Result[Any]],
    timeout: float,
    **params: Any,
) -> dict[str, Any]:
    """Run ``operation`` in a worker thread and return its envelope.

    The service call blocks on HTTP, so it goes through ``asyncio.to_thread``.
    Exceeding ``timeout`` or being cancelled yields a failure envelope
    instead of an exception.
    """
    logger.debug(f"{tool_name} called with {sanitize_parameters(params)}")

    try:
        result = await asyncio.wait_for(asyncio.to_thread(operation, **params), timeout=timeout)
    except asyncio.TimeoutError:
        logger.error(f"{tool_name} timed out after {timeout} seconds")
        return failure_envelope(f"Request timed out after {timeout} seconds while calling the Golemio API.")
    except asyncio.CancelledError:
        logger.warning(f"{tool_name} was cancelled before the Golemio API answered")
        return failure_envelope("Request was cancelled before the Golemio API answered.")

    envelope = to_envelope(result)
    if envelope["success"]:
        logger.info(f"{tool_name} completed")
    else:
        logger.info(f"{tool_name} failed: {envelope['errorMessage']}")
    return envelope
