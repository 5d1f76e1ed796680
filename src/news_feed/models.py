"""Data models for the news feed."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class FormattedArticle:
    """Display-ready projection of a NewsAPI article."""

    title: str
    description: str
    url: str
    url_to_image: str
    published_at: str  # "Mar 5, 2024"
    source: str
    author: str  # Falls back to the source name
    category: str  # "Technology", "Business", "News" or "General"
    read_time: str  # "3 min read"

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict using the provider's key style."""
        return {
            "title": self.title,
            "description": self.description,
            "url": self.url,
            "urlToImage": self.url_to_image,
            "publishedAt": self.published_at,
            "source": self.source,
            "author": self.author,
            "category": self.category,
            "readTime": self.read_time,
        }


class FetchStatus(Enum):
    """Outcome of an aggregator query."""

    SUCCESS = "success"
    ERROR = "error"


@dataclass
class ArticleResult:
    """Articles returned by an aggregator query.

    A failed query still yields an empty article list so front ends can render
    it unchanged; ``status`` tells "no news" apart from "provider unreachable".

    Attributes:
        articles: Raw provider articles that survived filtering.
        total_results: Number of articles in ``articles``.
        status: Whether the underlying requests succeeded.
        error_message: Error description if status is error.
    """

    articles: list[dict[str, Any]] = field(default_factory=list)
    total_results: int = 0
    status: FetchStatus = FetchStatus.SUCCESS
    error_message: str | None = None

    @classmethod
    def ok(cls, articles: list[dict[str, Any]]) -> ArticleResult:
        return cls(articles=articles, total_results=len(articles))

    @classmethod
    def failed(cls, error: Exception) -> ArticleResult:
        return cls(status=FetchStatus.ERROR, error_message=str(error))

    @property
    def is_success(self) -> bool:
        """Check if the query completed without errors."""
        return self.status == FetchStatus.SUCCESS

    @property
    def is_error(self) -> bool:
        """Check if the query degraded because of an error."""
        return self.status == FetchStatus.ERROR

    def to_dict(self) -> dict:
        """Serialize to the ``{articles, totalResults}`` shape front ends expect."""
        return {"articles": self.articles, "totalResults": self.total_results}
