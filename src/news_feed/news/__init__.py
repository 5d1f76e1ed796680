"""News fetching, caching and filtering components."""

from news_feed.news.cache import ResponseCache
from news_feed.news.filters import filter_articles
from news_feed.news.newsapi_client import (
    NewsAPIClient,
    NewsAPIError,
    ProviderError,
    TransportError,
)

__all__ = [
    "NewsAPIClient",
    "NewsAPIError",
    "ProviderError",
    "ResponseCache",
    "TransportError",
    "filter_articles",
]
