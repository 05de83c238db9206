"""HTTP client for the Golemio open-data API.

Sends authenticated GET requests and turns every transport problem into a
``GolemioError`` subclass, so callers deal with one exception family.
"""

import json
import logging
from typing import Any, Callable, Optional

import requests

from .exceptions import ConfigurationError, DeserializationError, UpstreamError
from .settings import TOKEN_ENV_VAR

logger = logging.getLogger(__name__)

ACCEPT_HEADER = "application/json; charset=utf-8"

# Upstream resource paths, relative to the base URL
AIR_QUALITY_STATIONS_PATH = "/airqualitystations"
AIR_QUALITY_HISTORY_PATH = "/airqualitystations/history"
COMPONENT_TYPES_PATH = "/airqualitystations/componenttypes"
INDEX_TYPES_PATH = "/airqualitystations/indextypes"
BICYCLE_COUNTERS_PATH = "/bicyclecounters"
BICYCLE_DETECTIONS_PATH = "/bicyclecounters/detections"
CITY_DISTRICTS_PATH = "/citydistricts"


class GolemioClient:
    """Issue GET requests against the Golemio API.

    The token is resolved on every request, so a missing token fails each
    call with ``ConfigurationError`` instead of preventing startup.
    """

    def __init__(
        self,
        base_url: str,
        token_provider: Callable[[], Optional[str]],
        timeout: float = 30.0,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._token_provider = token_provider
        self._session = session or requests.Session()

    def get_text(self, path: str, params: Optional[dict[str, str]] = None) -> str:
        """GET ``path`` and return the response body.

        Raises:
            ConfigurationError: If no API token is configured
            UpstreamError: On timeouts, connection problems and non-2xx statuses
        """
        token = self._token_provider()
        if not token:
            logger.error(f"{TOKEN_ENV_VAR} environment variable or api_token setting is not configured")
            raise ConfigurationError(f"{TOKEN_ENV_VAR} environment variable is not configured")

        url = f"{self.base_url}{path}"
        headers = {"accept": ACCEPT_HEADER, "x-access-token": token}
        logger.debug(f"Starting API request to {url} with params {params or {}}")

        try:
            response = self._session.get(url, headers=headers, params=params, timeout=self.timeout)
        except requests.Timeout:
            logger.error(f"Request to {url} timed out after {self.timeout} seconds")
            raise UpstreamError(f"Request to {url} timed out after {self.timeout} seconds.") from None
        except requests.ConnectionError as e:
            logger.error(f"Could not connect to {url}: {e}")
            raise UpstreamError(f"Could not connect to {url}. Check that the Golemio API is reachable.") from e
        except requests.RequestException as e:
            logger.error(f"HTTP request to {url} failed: {e}")
            raise UpstreamError(f"HTTP request failed: {e}") from e

        if not 200 <= response.status_code < 300:
            logger.error(f"API request failed with status code {response.status_code}: {response.reason}")
            raise UpstreamError(
                f"API request failed: {response.status_code} - {response.reason}",
                status_code=response.status_code,
                reason=response.reason,
            )

        body = response.text
        logger.debug(f"Received response with {len(body)} characters")
        return body

    def get_json(self, path: str, params: Optional[dict[str, str]] = None) -> Any:
        """GET ``path`` and decode the JSON body.

        Raises:
            DeserializationError: If the body is not valid JSON
        """
        body = self.get_text(path, params)
        try:
            return json.loads(body)
        except json.JSONDecodeError as e:
            raise DeserializationError("Failed to parse API response", e) from e

    def close(self) -> None:
        self._session.close()
