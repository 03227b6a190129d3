# pokedex/catalog.py
"""
Client for the external catalog service (PokeAPI by default).

``CatalogClient.fetch_page`` issues one GET per call and relays the decoded JSON
body unchanged.  Every failure mode (transport error, timeout, non-2xx,
undecodable body) collapses into ``UpstreamError``; the cause is only
logged.  No caching, no retries.
"""
import logging
from typing import Any, Optional

import httpx

from .errors import UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_URL = "https://pokeapi.co/api/v2/pokemon/"
DEFAULT_TIMEOUT = 5.0


class CatalogClient:
    def __init__(self, base_url: str = DEFAULT_CATALOG_URL, timeout: float = DEFAULT_TIMEOUT,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport

    async def fetch_page(self, offset: int, limit: int) -> Any:
        params = {"offset": offset, "limit": limit}
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                r = await client.get(self.base_url, params=params)
                r.raise_for_status()
                return r.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Catalog request %s failed: %r", params, e)
            raise UpstreamError() from e
