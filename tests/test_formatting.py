"""Tests for article display formatting."""

from __future__ import annotations

import pytest

from news_feed.formatting import (
    category_from_source,
    estimate_read_time,
    format_article,
    format_published_date,
)
from news_feed.models import FormattedArticle


@pytest.fixture
def sample_article() -> dict:
    return {
        "source": {"id": "techcrunch", "name": "TechCrunch"},
        "author": "Jane Doe",
        "title": "Startup raises Series A",
        "description": "A startup raised money today.",
        "url": "https://techcrunch.com/2024/03/05/startup",
        "urlToImage": "https://techcrunch.com/img.jpg",
        "publishedAt": "2024-03-05T14:30:00Z",
        "content": "Full text...",
    }


class TestEstimateReadTime:
    def test_250_words(self) -> None:
        text = " ".join(f"word{i}" for i in range(1, 251))
        assert estimate_read_time(text) == "2 min read"

    def test_missing_text_uses_fallback(self) -> None:
        assert estimate_read_time(None) == "2 min read"
        assert estimate_read_time("") == "2 min read"

    def test_short_text_is_one_minute(self) -> None:
        assert estimate_read_time("just a few words") == "1 min read"

    def test_exact_multiple(self) -> None:
        assert estimate_read_time(" ".join(["w"] * 400)) == "2 min read"
        assert estimate_read_time(" ".join(["w"] * 401)) == "3 min read"


class TestCategoryFromSource:
    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("TechCrunch", "Technology"),
            ("Wired", "Technology"),
            ("Bloomberg", "Business"),
            ("CNBC", "Business"),
            ("BBC News", "News"),
            ("Reuters", "News"),
            ("Some Local Paper", "General"),
        ],
    )
    def test_known_and_unknown_sources(self, source: str, expected: str) -> None:
        assert category_from_source(source) == expected

    def test_substring_match(self) -> None:
        assert category_from_source("Wired UK") == "Technology"

    def test_tech_checked_before_news(self) -> None:
        assert category_from_source("The Verge via Reuters") == "Technology"

    def test_empty_source(self) -> None:
        assert category_from_source(None) == "General"
        assert category_from_source("") == "General"


class TestFormatPublishedDate:
    def test_iso_timestamp(self) -> None:
        assert format_published_date("2024-03-05T14:30:00Z") == "Mar 5, 2024"

    def test_offset_is_converted_to_utc(self) -> None:
        assert format_published_date("2024-12-31T23:30:00-02:00") == "Jan 1, 2025"

    @pytest.mark.parametrize(
        "value",
        [
            "2024-03-05T14:30:00.5Z",
            "2024-03-05T14:30:00.12Z",
            "2024-03-05T14:30:00.1234567Z",
            "2024-03-05T14:30:00.123456+00:00",
        ],
    )
    def test_any_fraction_length(self, value: str) -> None:
        assert format_published_date(value) == "Mar 5, 2024"

    def test_unparsable_value_is_returned(self) -> None:
        assert format_published_date("yesterday") == "yesterday"

    def test_missing_value(self) -> None:
        assert format_published_date(None) == ""


class TestFormatArticle:
    def test_projection(self, sample_article: dict) -> None:
        result = format_article(sample_article)

        assert isinstance(result, FormattedArticle)
        assert result.title == "Startup raises Series A"
        assert result.url_to_image == "https://techcrunch.com/img.jpg"
        assert result.published_at == "Mar 5, 2024"
        assert result.source == "TechCrunch"
        assert result.author == "Jane Doe"
        assert result.category == "Technology"
        assert result.read_time == "1 min read"

    def test_author_defaults_to_source(self, sample_article: dict) -> None:
        sample_article["author"] = None
        assert format_article(sample_article).author == "TechCrunch"

    def test_missing_description(self, sample_article: dict) -> None:
        del sample_article["description"]
        result = format_article(sample_article)
        assert result.description == ""
        assert result.read_time == "2 min read"

    def test_unknown_source(self, sample_article: dict) -> None:
        sample_article["source"] = {"id": None, "name": "Hacker Weekly"}
        assert format_article(sample_article).category == "General"

    def test_deterministic(self, sample_article: dict) -> None:
        assert format_article(sample_article) == format_article(sample_article)

    def test_does_not_mutate_input(self, sample_article: dict) -> None:
        before = dict(sample_article)
        format_article(sample_article)
        assert sample_article == before

    def test_to_dict_uses_provider_keys(self, sample_article: dict) -> None:
        data = format_article(sample_article).to_dict()
        assert data["urlToImage"] == "https://techcrunch.com/img.jpg"
        assert data["publishedAt"] == "Mar 5, 2024"
        assert data["readTime"] == "1 min read"
        assert data["category"] == "Technology"
