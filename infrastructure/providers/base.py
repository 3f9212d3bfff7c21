import logging
from abc import ABC, abstractmethod
from typing import Any

import httpx

from domain.exceptions.exchange import (
    MalformedResponseError,
    NotFoundError,
    UpstreamUnavailableError,
)

logger = logging.getLogger(__name__)


class BaseAPIClient(ABC):
    """A base class for the upstream JSON APIs, handling common HTTP logic."""

    HEALTH_PATH = ''

    def __init__(
        self, base_url: str, client: httpx.AsyncClient | None = None, timeout: int = 10
    ):
        self.base_url = base_url.rstrip('/')
        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout), follow_redirects=True
        )

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    async def _request(self, endpoint: str, params: dict | None = None) -> Any:
        """GET an endpoint and decode its JSON body, mapping failures to domain errors."""
        url = f'{self.base_url}/{endpoint}'
        try:
            response = await self._client.get(
                url, params=params, headers={'Accept': 'application/json'}
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            # Any non-success status means the upstream did not recognize the identifier
            logger.warning(f'{self.name} returned HTTP {e.response.status_code} for {endpoint}')
            raise NotFoundError(
                f'{self.name} HTTP error {e.response.status_code}: {e.response.text[:200]}'
            ) from e
        except httpx.RequestError as e:
            logger.error(f'{self.name} request to {endpoint} failed: {e!r}')
            raise UpstreamUnavailableError(
                f'{self.name} request failed: {e.__class__.__name__}'
            ) from e

        try:
            return response.json()
        except ValueError as e:
            raise MalformedResponseError(f'{self.name} response parsing error: {str(e)}') from e

    async def probe(self) -> int:
        """Issue a HEAD request against the health path and return the status code."""
        url = f'{self.base_url}/{self.HEALTH_PATH}'
        try:
            response = await self._client.head(url)
        except httpx.RequestError as e:
            raise UpstreamUnavailableError(
                f'{self.name} request failed: {e.__class__.__name__}'
            ) from e
        return response.status_code

    async def close(self) -> None:
        """Cleanly close the HTTP client."""
        await self._client.aclose()
