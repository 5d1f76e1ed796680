"""Quality filtering and de-duplication for raw NewsAPI articles."""

from __future__ import annotations

from typing import Any, Iterable

REMOVED_TITLE = "[Removed]"


def is_displayable(article: dict[str, Any]) -> bool:
    """Check that an article has an image, a real title and a description."""
    return bool(
        article.get("urlToImage")
        and article.get("title") != REMOVED_TITLE
        and article.get("description")
    )


def filter_articles(articles: Iterable[dict[str, Any]]) -> list[dict[str, Any]]:
    """
    Keep displayable articles whose title has not been seen earlier in the batch.
    Title comparison is exact and case-sensitive; original order is preserved.
    """
    seen: set[Any] = set()
    out: list[dict[str, Any]] = []
    for article in articles:
        title = article.get("title")
        # A duplicate title is dropped even if the first occurrence was not displayable.
        if title in seen:
            continue
        seen.add(title)
        if is_displayable(article):
            out.append(article)
    return out
