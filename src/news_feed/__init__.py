"""News Feed - Cached NewsAPI client and article aggregator for a blog page."""

from news_feed.aggregator import ArticleAggregator
from news_feed.config import NewsFeedConfig
from news_feed.news.newsapi_client import NewsAPIClient

__all__ = ["ArticleAggregator", "NewsAPIClient", "NewsFeedConfig"]
