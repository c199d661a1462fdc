"""HTTP transport used by the StormGlass client."""

import logging
from typing import Any, Protocol

import httpx

logger = logging.getLogger(__name__)


class ForecastTransport(Protocol):
    async def get_json(
        self, url: str, params: dict[str, Any], headers: dict[str, str]
    ) -> Any:
        """Perform a GET and return the parsed JSON body, or raise.

        A non-success status must raise an error whose `response` carries
        `status_code` (httpx.HTTPStatusError does), or that has `status_code`
        itself. Any other exception is treated as a request failure.
        """
        ...


class HttpxTransport:
    """httpx-backed transport.

    Reuses an injected AsyncClient when given, otherwise opens one per call.
    Non-2xx responses raise httpx.HTTPStatusError.
    """

    def __init__(self, client: httpx.AsyncClient | None = None, timeout: float = 30.0):
        self.client = client
        self.timeout = timeout

    async def get_json(
        self, url: str, params: dict[str, Any], headers: dict[str, str]
    ) -> Any:
        if self.client is not None:
            return await self._get(self.client, url, params, headers)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await self._get(client, url, params, headers)

    async def _get(
        self,
        client: httpx.AsyncClient,
        url: str,
        params: dict[str, Any],
        headers: dict[str, str],
    ) -> Any:
        resp = await client.get(
            url, params=params, headers=headers, follow_redirects=True
        )
        logger.debug("GET %s -> %d", resp.request.url, resp.status_code)
        resp.raise_for_status()
        return resp.json()
