"""Tests for article filtering and de-duplication."""

from __future__ import annotations

from typing import Any

from news_feed.news.filters import REMOVED_TITLE, filter_articles, is_displayable


def _article(
    title: str,
    url: str | None = None,
    image: str | None = "https://img.example.com/x.jpg",
    description: str | None = "A description",
) -> dict[str, Any]:
    return {
        "title": title,
        "url": url or f"https://example.com/{title.replace(' ', '-')}",
        "urlToImage": image,
        "description": description,
        "source": {"name": "Example"},
    }


class TestIsDisplayable:
    def test_complete_article(self) -> None:
        assert is_displayable(_article("Hello"))

    def test_missing_image(self) -> None:
        assert not is_displayable(_article("Hello", image=None))
        assert not is_displayable(_article("Hello", image=""))

    def test_removed_placeholder(self) -> None:
        assert not is_displayable(_article(REMOVED_TITLE))

    def test_missing_description(self) -> None:
        assert not is_displayable(_article("Hello", description=None))
        assert not is_displayable(_article("Hello", description=""))


class TestFilterArticles:
    def test_first_duplicate_title_wins(self) -> None:
        first = _article("Same title", url="https://a.example.com/1")
        second = _article("Same title", url="https://b.example.com/2")

        result = filter_articles([first, second])

        assert result == [first]

    def test_title_comparison_is_case_sensitive(self) -> None:
        articles = [_article("Big News"), _article("big news")]
        assert len(filter_articles(articles)) == 2

    def test_duplicate_of_undisplayable_article_is_dropped(self) -> None:
        no_image = _article("Story", image=None)
        with_image = _article("Story", url="https://other.example.com")

        assert filter_articles([no_image, with_image]) == []

    def test_preserves_order(self) -> None:
        articles = [_article("C"), _article("A"), _article("B")]
        assert [a["title"] for a in filter_articles(articles)] == ["C", "A", "B"]

    def test_drops_low_quality_articles(self) -> None:
        articles = [
            _article("Keep"),
            _article("No image", image=None),
            _article(REMOVED_TITLE),
            _article("No description", description=None),
        ]
        assert [a["title"] for a in filter_articles(articles)] == ["Keep"]

    def test_idempotent(self) -> None:
        articles = [
            _article("One"),
            _article("Two", image=None),
            _article("One", url="https://dup.example.com"),
            _article("Three"),
            _article(REMOVED_TITLE),
        ]

        once = filter_articles(articles)
        twice = filter_articles(once)

        assert once == twice

    def test_empty(self) -> None:
        assert filter_articles([]) == []
