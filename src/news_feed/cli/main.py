"""CLI commands for the News Feed."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Awaitable, Callable, TypeVar

import click

from news_feed.aggregator import CATEGORIES, ArticleAggregator, split_for_page
from news_feed.config import NewsFeedConfig
from news_feed.formatting import format_article
from news_feed.models import ArticleResult
from news_feed.news.newsapi_client import NewsAPIClient, NewsAPIError

T = TypeVar("T")


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """News Feed - Browse NewsAPI headlines, categories and searches."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


@cli.command()
@click.option("--json-output", "-j", is_flag=True, help="Output as JSON")
def featured(json_output: bool) -> None:
    """Show featured articles (top headlines mixed with tech news).

    Example: news-feed featured
    """
    result = _run(lambda aggregator: aggregator.get_featured_articles())
    _emit_result(result, json_output, empty_message="No articles found")


@cli.command()
@click.argument(
    "name", type=click.Choice([*CATEGORIES, "all"], case_sensitive=False)
)
@click.option("--limit", "-n", default=6, help="Articles to request (default: 6)")
@click.option("--json-output", "-j", is_flag=True, help="Output as JSON")
def category(name: str, limit: int, json_output: bool) -> None:
    """Show top headlines for a category.

    Example: news-feed category science
    """
    if name.lower() == "all":
        result = _run(lambda aggregator: aggregator.get_featured_articles())
        _emit_result(result, json_output, empty_message="No articles found")
        return

    result = _run(lambda aggregator: aggregator.get_articles_by_category(name, limit))
    _emit_result(result, json_output, empty_message=f"No {name} articles found")


@cli.command()
@click.argument("query")
@click.option("--limit", "-n", default=6, help="Articles to request (default: 6)")
@click.option("--sort-by", "-s", default=None, help="relevancy, popularity or publishedAt")
@click.option("--json-output", "-j", is_flag=True, help="Output as JSON")
def search(query: str, limit: int, sort_by: str | None, json_output: bool) -> None:
    """Search all articles.

    Example: news-feed search "rust compiler"
    """
    if not query.strip():
        result = _run(lambda aggregator: aggregator.get_featured_articles())
        _emit_result(result, json_output, empty_message="No articles found")
        return

    result = _run(
        lambda aggregator: aggregator.search_articles(query, sort_by=sort_by, limit=limit)
    )
    _emit_result(result, json_output, empty_message=f'No articles found for "{query}"')


@cli.command()
@click.option("--category", "-c", default=None, help="Filter by category")
@click.option("--language", "-l", default=None, help="Language (default: en)")
@click.option("--country", default=None, help="Filter by country code")
@click.option("--json-output", "-j", is_flag=True, help="Output as JSON")
def sources(
    category: str | None, language: str | None, country: str | None, json_output: bool
) -> None:
    """List available news sources."""
    try:
        payload = _run(
            lambda aggregator: aggregator.get_sources(
                category=category, language=language, country=country
            )
        )
    except NewsAPIError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    items = payload.get("sources", [])
    if json_output:
        click.echo(json.dumps(items, indent=2))
        return
    if not items:
        click.echo("No sources found")
        return
    for item in items:
        click.echo(f"• {item.get('name', 'Unknown')} ({item.get('id') or 'n/a'})")


def _load_config() -> NewsFeedConfig:
    try:
        return NewsFeedConfig.from_env()
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)


def _run(action: Callable[[ArticleAggregator], Awaitable[T]]) -> T:
    """Run one aggregator call on a fresh client and close it afterwards."""
    config = _load_config()

    async def runner() -> T:
        async with NewsAPIClient(config) as client:
            return await action(ArticleAggregator(client, config))

    return asyncio.run(runner())


def _emit_result(result: ArticleResult, json_output: bool, empty_message: str) -> None:
    if result.is_error:
        click.echo(f"Error: Failed to load articles ({result.error_message})", err=True)
        raise SystemExit(1)

    if not result.articles:
        click.echo(empty_message)
        return

    featured_articles, recent_articles = split_for_page(result.articles)

    if json_output:
        click.echo(
            json.dumps(
                {
                    "featured": [format_article(a).to_dict() for a in featured_articles],
                    "recent": [format_article(a).to_dict() for a in recent_articles],
                    "totalResults": result.total_results,
                },
                indent=2,
            )
        )
        return

    _print_section("FEATURED", featured_articles)
    if recent_articles:
        _print_section("RECENT", recent_articles)


def _print_section(title: str, articles: list[dict[str, Any]]) -> None:
    """Pretty-print a block of articles."""
    click.echo("\n" + "=" * 60)
    click.echo(title)
    click.echo("=" * 60)

    for article in articles:
        formatted = format_article(article)
        click.echo("")
        click.secho(formatted.title, bold=True)
        click.echo(f"[{formatted.category}] {formatted.published_at} · {formatted.read_time}")
        click.echo(formatted.description)
        click.echo(f"Source: {formatted.source} · {formatted.author}")
        click.echo(formatted.url)


if __name__ == "__main__":
    cli()
