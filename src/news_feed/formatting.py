"""Display formatting for NewsAPI articles."""

from __future__ import annotations

import math
import re
from datetime import datetime, timezone
from typing import Any

from news_feed.models import FormattedArticle

WORDS_PER_MINUTE = 200
FALLBACK_READ_TIME = "2 min read"

# Checked in order; the first list containing a match wins.
_SOURCE_CATEGORIES: list[tuple[str, tuple[str, ...]]] = [
    ("Technology", ("TechCrunch", "Ars Technica", "Wired", "The Verge", "Engadget")),
    ("Business", ("Bloomberg", "Forbes", "Business Insider", "CNBC")),
    ("News", ("BBC News", "CNN", "Reuters", "Associated Press")),
]
GENERAL_CATEGORY = "General"

# fromisoformat before 3.11 only accepts 3 or 6 fractional digits.
_FRACTION = re.compile(r"(?<=:\d\d)\.(\d+)")


def _pad_fraction(match: re.Match) -> str:
    return "." + match.group(1)[:6].ljust(6, "0")


def estimate_read_time(text: str | None) -> str:
    """Estimate reading time at 200 words per minute, rounded up."""
    if not text:
        return FALLBACK_READ_TIME
    words = len(text.split())
    minutes = max(1, math.ceil(words / WORDS_PER_MINUTE))
    return f"{minutes} min read"


def category_from_source(source_name: str | None) -> str:
    """Guess a coarse category from the source name.

    Most sources are not listed and fall through to "General".
    """
    if not source_name:
        return GENERAL_CATEGORY
    for category, sources in _SOURCE_CATEGORIES:
        if any(source in source_name for source in sources):
            return category
    return GENERAL_CATEGORY


def format_published_date(value: str | None) -> str:
    """Render an ISO-8601 timestamp as ``"Mar 5, 2024"``.

    Timestamps are shown in UTC. Values that cannot be parsed are returned as-is.
    """
    if not value:
        return ""
    try:
        normalized = _FRACTION.sub(_pad_fraction, value).replace("Z", "+00:00")
        published = datetime.fromisoformat(normalized)
    except (ValueError, TypeError):
        return value
    if published.tzinfo is not None:
        published = published.astimezone(timezone.utc)
    return f"{published:%b} {published.day}, {published.year}"


def format_article(article: dict[str, Any]) -> FormattedArticle:
    """Project a raw NewsAPI article into its display form."""
    source_name = (article.get("source") or {}).get("name") or ""
    description = article.get("description") or ""
    return FormattedArticle(
        title=article.get("title") or "",
        description=description,
        url=article.get("url") or "",
        url_to_image=article.get("urlToImage") or "",
        published_at=format_published_date(article.get("publishedAt")),
        source=source_name,
        author=article.get("author") or source_name,
        category=category_from_source(source_name),
        read_time=estimate_read_time(description),
    )
