"""NewsAPI.org client with in-memory response caching."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from news_feed.config import NewsFeedConfig
from news_feed.news.cache import ResponseCache

logger = logging.getLogger(__name__)

TOP_HEADLINES = "top-headlines"
EVERYTHING = "everything"
SOURCES = "sources"


class NewsAPIError(Exception):
    """Error from NewsAPI."""

    pass


class TransportError(NewsAPIError):
    """The HTTP layer failed or returned a non-success status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ProviderError(NewsAPIError):
    """NewsAPI answered but reported a failure in its status field."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.code = code


def clean_params(params: dict[str, Any] | None) -> dict[str, Any]:
    """Drop parameters whose value is falsy so they are never sent."""
    return {key: value for key, value in (params or {}).items() if value}


class NewsAPIClient:
    """Client for NewsAPI.org that caches identical queries for a TTL window.

    Each instance owns its cache, so independent clients never share state.
    Only one fetch per query shape happens inside a TTL window once a result
    is stored; two identical queries racing before that may both hit the
    network, and the later store wins.
    """

    def __init__(
        self,
        config: NewsFeedConfig | None = None,
        cache: ResponseCache | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or NewsFeedConfig.from_env()
        # An empty cache is falsy (it defines __len__), so test for None explicitly.
        if cache is None:
            cache = ResponseCache(ttl_seconds=self._config.cache_ttl_seconds)
        self._cache = cache
        self._owns_client = http_client is None
        if http_client is None:
            http_client = httpx.AsyncClient(timeout=None)
        self._client = http_client

    @property
    def config(self) -> NewsFeedConfig:
        return self._config

    @property
    def cache(self) -> ResponseCache:
        return self._cache

    def _build_url(self, endpoint: str) -> str:
        if endpoint.startswith(("http://", "https://")):
            return endpoint
        return f"{self._config.base_url}/{endpoint.lstrip('/')}"

    async def request(self, endpoint: str, params: dict[str, Any] | None = None) -> dict:
        """Make a cached GET request to NewsAPI.

        Args:
            endpoint: Endpoint name (e.g. ``"top-headlines"``) or absolute URL.
            params: Query parameters; falsy values are omitted.

        Returns:
            The decoded JSON payload.

        Raises:
            TransportError: If the request fails or returns a non-2xx status.
            ProviderError: If the payload's status is not ``"ok"``.
        """
        query = clean_params(params)
        key = self._cache.make_key(endpoint, query)

        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("Cache hit for %s", key)
            return cached

        url = self._build_url(endpoint)
        logger.debug("Requesting %s with %s", url, query)

        try:
            resp = await self._client.get(url, params={"apiKey": self._config.api_key, **query})
        except httpx.HTTPError as e:
            logger.error("NewsAPI request to %s failed: %s", endpoint, e)
            raise TransportError(f"Request to {endpoint} failed: {e}") from e

        if not resp.is_success:
            error = TransportError(f"HTTP error! status: {resp.status_code}", resp.status_code)
            logger.error("NewsAPI request to %s failed: %s", endpoint, error)
            raise error

        try:
            data = resp.json()
        except ValueError as e:
            logger.error("NewsAPI returned invalid JSON for %s: %s", endpoint, e)
            raise TransportError(f"Invalid JSON from {endpoint}", resp.status_code) from e

        if not isinstance(data, dict) or data.get("status") != "ok":
            body = data if isinstance(data, dict) else {}
            error = ProviderError(
                body.get("message") or "API request failed", code=body.get("code")
            )
            logger.error("NewsAPI request to %s failed: %s", endpoint, error)
            raise error

        self._cache.set(key, data)
        return data

    def clear_cache(self) -> None:
        """Forget every cached response."""
        self._cache.clear()

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> NewsAPIClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()
