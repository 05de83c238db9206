"""Process-wide collaborators shared by every MCP tool.

Built once at startup. Tools receive the services through the server
factory, so one lookup cache serves every session, including every
streamable HTTP session.
"""

import logging
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Optional

from golemio_mcp.core.lookup_cache import LookupCache
from golemio_mcp.core.settings import GolemioSettings, SettingsManager
from golemio_mcp.core.upstream import GolemioClient

from .services import AirQualityService, BicycleCounterService, CityDistrictService

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Shared client, cache and services for one server process."""

    client: GolemioClient
    cache: LookupCache = field(default_factory=LookupCache)
    cache_ttl: timedelta = timedelta(hours=24)
    tool_timeout: float = 60.0
    air_quality: AirQualityService = field(init=False)
    bicycle_counters: BicycleCounterService = field(init=False)
    city_districts: CityDistrictService = field(init=False)

    def __post_init__(self) -> None:
        self.air_quality = AirQualityService(self.client, self.cache, self.cache_ttl)
        self.bicycle_counters = BicycleCounterService(self.client, self.cache, self.cache_ttl)
        self.city_districts = CityDistrictService(self.client, self.cache, self.cache_ttl)

    def close(self) -> None:
        self.client.close()


def build_context(
    settings_manager: Optional[SettingsManager] = None,
    settings: Optional[GolemioSettings] = None,
) -> AppContext:
    """Create the application context from settings.

    The API token is resolved per request through ``settings_manager``, so a
    missing token never prevents startup.
    """
    manager = settings_manager or SettingsManager()
    settings = settings or manager.load()

    client = GolemioClient(
        base_url=settings.base_url,
        token_provider=manager.resolve_api_token,
        timeout=settings.request_timeout_seconds,
    )
    if not manager.resolve_api_token():
        logger.warning("No Golemio API token configured; every tool call will fail until one is set")

    logger.debug(f"Using Golemio API at {settings.base_url}")
    return AppContext(
        client=client,
        cache_ttl=timedelta(hours=settings.cache_ttl_hours),
        tool_timeout=settings.tool_timeout_seconds,
    )
