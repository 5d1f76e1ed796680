"""Article aggregator composing NewsAPI queries for display."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from news_feed.config import NewsFeedConfig
from news_feed.formatting import format_article
from news_feed.models import ArticleResult, FormattedArticle
from news_feed.news.filters import filter_articles
from news_feed.news.newsapi_client import (
    EVERYTHING,
    SOURCES,
    TOP_HEADLINES,
    NewsAPIClient,
    NewsAPIError,
)

logger = logging.getLogger(__name__)

FEATURED_HEADLINES_PAGE_SIZE = 5
FEATURED_SEARCH_PAGE_SIZE = 10
FEATURED_SEARCH_QUERY = "technology OR programming OR web development"
FEATURED_LIMIT = 6
DEFAULT_SEARCH_QUERY = "technology"
DEFAULT_LANGUAGE = "en"
DEFAULT_SORT_BY = "publishedAt"
SEARCH_SORT_BY = "relevancy"
DEFAULT_RESULT_LIMIT = 10

CATEGORIES = ["general", "technology", "business", "health", "science", "sports"]
FEATURED_SLOTS = 3
RECENT_SLOTS = 3


def split_for_page(
    articles: list[dict[str, Any]],
) -> tuple[list[dict[str, Any]], list[dict[str, Any]]]:
    """Split articles into the featured grid and the recent list."""
    featured = articles[:FEATURED_SLOTS]
    recent = articles[FEATURED_SLOTS : FEATURED_SLOTS + RECENT_SLOTS]
    return featured, recent


class ArticleAggregator:
    """Turns page-level intents into NewsAPI queries and shapes the results.

    The thin wrappers (``get_top_headlines``, ``search_everything`` and
    ``get_sources``) return raw payloads and let client errors propagate. The
    composed queries are the recovery boundary: they log failures and return
    an empty ``ArticleResult`` flagged as an error.

    Attributes:
        client: The caching NewsAPI client all requests go through.
        config: Settings providing the default country and page size.
    """

    def __init__(
        self,
        client: NewsAPIClient,
        config: NewsFeedConfig | None = None,
    ) -> None:
        self.client = client
        self.config = config or client.config

    # -- Thin request wrappers ---------------------------------------------

    async def get_top_headlines(
        self,
        country: str | None = None,
        category: str | None = None,
        sources: str | None = None,
        query: str | None = None,
        page_size: int | None = None,
        page: int | None = None,
    ) -> dict:
        """Fetch top headlines, filling in the configured defaults."""
        params = {
            "country": country or self.config.default_country,
            "category": category,
            "sources": sources,
            "q": query,
            "pageSize": page_size or self.config.default_page_size,
            "page": page or 1,
        }
        return await self.client.request(TOP_HEADLINES, params)

    async def search_everything(
        self,
        query: str | None = None,
        sources: str | None = None,
        domains: str | None = None,
        from_date: str | None = None,
        to_date: str | None = None,
        language: str | None = None,
        sort_by: str | None = None,
        page_size: int | None = None,
        page: int | None = None,
    ) -> dict:
        """Run a full-text search across all articles."""
        params = {
            "q": query or DEFAULT_SEARCH_QUERY,
            "sources": sources,
            "domains": domains,
            "from": from_date,
            "to": to_date,
            "language": language or DEFAULT_LANGUAGE,
            "sortBy": sort_by or DEFAULT_SORT_BY,
            "pageSize": page_size or self.config.default_page_size,
            "page": page or 1,
        }
        return await self.client.request(EVERYTHING, params)

    async def get_sources(
        self,
        category: str | None = None,
        language: str | None = None,
        country: str | None = None,
    ) -> dict:
        """List the news sources NewsAPI knows about."""
        params = {
            "category": category,
            "language": language or DEFAULT_LANGUAGE,
            "country": country,
        }
        return await self.client.request(SOURCES, params)

    # -- Composed queries --------------------------------------------------

    async def get_featured_articles(self) -> ArticleResult:
        """Mix top headlines with a broad tech search.

        Both requests run concurrently and must both succeed; if either fails
        the whole result is empty rather than partial.

        Returns:
            Up to six filtered articles, headlines first.
        """
        outcomes = await asyncio.gather(
            self.get_top_headlines(page_size=FEATURED_HEADLINES_PAGE_SIZE),
            self.search_everything(
                query=FEATURED_SEARCH_QUERY,
                page_size=FEATURED_SEARCH_PAGE_SIZE,
            ),
            return_exceptions=True,
        )

        for outcome in outcomes:
            if isinstance(outcome, NewsAPIError):
                logger.error("Error fetching featured articles: %s", outcome)
                return ArticleResult.failed(outcome)
            if isinstance(outcome, BaseException):
                raise outcome

        headlines, tech_news = outcomes
        combined = [*headlines.get("articles", []), *tech_news.get("articles", [])]
        articles = filter_articles(combined)[:FEATURED_LIMIT]
        return ArticleResult.ok(articles)

    async def get_articles_by_category(
        self, category: str, limit: int = DEFAULT_RESULT_LIMIT
    ) -> ArticleResult:
        """Fetch top headlines for one category."""
        try:
            response = await self.get_top_headlines(
                category=category.lower(),
                page_size=limit,
            )
        except NewsAPIError as e:
            logger.error("Error fetching %s articles: %s", category, e)
            return ArticleResult.failed(e)

        return ArticleResult.ok(filter_articles(response.get("articles", [])))

    async def search_articles(
        self,
        query: str,
        sort_by: str | None = None,
        limit: int | None = None,
    ) -> ArticleResult:
        """Search all articles, most relevant first unless ``sort_by`` says otherwise."""
        try:
            response = await self.search_everything(
                query=query,
                sort_by=sort_by or SEARCH_SORT_BY,
                page_size=limit or DEFAULT_RESULT_LIMIT,
                language=DEFAULT_LANGUAGE,
            )
        except NewsAPIError as e:
            logger.error("Error searching articles for %r: %s", query, e)
            return ArticleResult.failed(e)

        return ArticleResult.ok(filter_articles(response.get("articles", [])))

    @staticmethod
    def format_article(article: dict[str, Any]) -> FormattedArticle:
        """Project a raw article into its display form."""
        return format_article(article)
