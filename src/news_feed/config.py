"""Configuration for the NewsAPI client and article aggregator."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://newsapi.org/v2"
DEFAULT_COUNTRY = "us"
DEFAULT_CATEGORY = "technology"
DEFAULT_PAGE_SIZE = 20
DEFAULT_CACHE_TTL_SECONDS = 10 * 60


@dataclass(frozen=True)
class NewsFeedConfig:
    """Static settings loaded once at startup.

    Attributes:
        api_key: NewsAPI credential appended to every request.
        base_url: Provider base URL the endpoint names are resolved under.
        default_country: Country used for top headlines when none is given.
        default_category: Category offered first by front ends.
        default_page_size: Page size used when a caller omits one.
        cache_ttl_seconds: How long a cached response stays live.
    """

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    default_country: str = DEFAULT_COUNTRY
    default_category: str = DEFAULT_CATEGORY
    default_page_size: int = DEFAULT_PAGE_SIZE
    cache_ttl_seconds: float = DEFAULT_CACHE_TTL_SECONDS

    def __post_init__(self) -> None:
        if not self.api_key:
            raise ValueError("NEWSAPI_KEY environment variable or api_key parameter required")
        if self.default_page_size <= 0:
            raise ValueError("default_page_size must be positive")
        if self.cache_ttl_seconds < 0:
            raise ValueError("cache_ttl_seconds must not be negative")

    @classmethod
    def from_env(cls, api_key: str | None = None) -> NewsFeedConfig:
        """Build settings from environment variables.

        Args:
            api_key: Explicit key; falls back to ``NEWSAPI_KEY``.

        Raises:
            ValueError: If no API key is available or a numeric value is invalid.
        """
        return cls(
            api_key=api_key or os.environ.get("NEWSAPI_KEY", ""),
            base_url=os.environ.get("NEWSAPI_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
            default_country=os.environ.get("NEWS_FEED_COUNTRY", DEFAULT_COUNTRY),
            default_category=os.environ.get("NEWS_FEED_CATEGORY", DEFAULT_CATEGORY),
            default_page_size=int(
                os.environ.get("NEWS_FEED_PAGE_SIZE", DEFAULT_PAGE_SIZE)
            ),
            cache_ttl_seconds=float(
                os.environ.get("NEWS_FEED_CACHE_TTL", DEFAULT_CACHE_TTL_SECONDS)
            ),
        )
