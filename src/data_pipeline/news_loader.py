"""
News Data Loader
================

Fetches recent Google News headlines about a city through the rss2json
feed converter. A single "stay informed" article stands in when the feed
is unavailable, so callers always get at least one article.

Author: India Travel Info Team
"""

from datetime import datetime, timezone
from typing import Dict, List, Optional
from urllib.parse import quote, urlencode

from config import config
from .base_loader import BaseHTTPLoader
from .data_models import Article
from .source_result import FetchResult
from ..utils.data_utils import clean_text
from ..utils.error_handler import ErrorCategory
from ..utils.performance_monitor import measure_time


DEFAULT_NEWS_SOURCE = "Google News"


class NewsDataLoader(BaseHTTPLoader):
    """Loads city news from an RSS search feed"""

    source_name = "news"

    def __init__(self, session=None, timeout: Optional[float] = None, error_handler=None,
                 api_url: Optional[str] = None, feed_url: Optional[str] = None,
                 max_articles: Optional[int] = None):
        super().__init__(session=session, timeout=timeout, error_handler=error_handler)
        self.api_url = api_url or config.NEWS_API_URL
        self.feed_url = feed_url or config.NEWS_FEED_URL
        self.max_articles = max_articles or config.NEWS_MAX_ARTICLES

    def build_feed_url(self, city_name: str) -> str:
        """Google News RSS search for "<city> India", Indian English edition"""
        query = urlencode({
            "q": f"{city_name} India",
            "hl": "en-IN",
            "gl": "IN",
            "ceid": "IN:en",
        })
        return f"{self.feed_url}?{query}"

    @measure_time(category="news")
    def fetch(self, city_name: str) -> FetchResult[List[Article]]:
        """
        Fetch up to max_articles recent articles about a city

        An empty feed is reported as a failure so the fallback applies.
        """
        result = self._get_json(self.api_url, params={"rss_url": self.build_feed_url(city_name)})
        if not result.ok:
            return result

        try:
            articles = self._parse_feed(result.value)
        except (KeyError, TypeError, AttributeError) as e:
            return self._failure(self.api_url, exception=e, category=ErrorCategory.MALFORMED_PAYLOAD)

        if not articles:
            return self._failure(
                self.api_url,
                message=f"No news articles found for {city_name}",
                category=ErrorCategory.DATA_NOT_FOUND
            )

        self.logger.info(f"Retrieved {len(articles)} news articles for {city_name}")
        return FetchResult.success(articles)

    def fallback(self, city_name: str) -> List[Article]:
        """Single placeholder article pointing at a news search"""
        return [Article(
            title=f"Latest updates from {city_name}",
            description=f"Stay informed about current events and developments in {city_name}",
            url=f"https://news.google.com/search?q={quote(city_name)}",
            published_at=datetime.now(timezone.utc).isoformat(),
            source="Local News"
        )]

    def _parse_feed(self, data: Dict) -> List[Article]:
        """Map rss2json items to articles, skipping entries without a title"""
        if data.get("status") not in (None, "ok"):
            raise KeyError(f"feed status {data.get('status')}: {data.get('message')}")

        articles = []
        for item in (data.get("items") or [])[:self.max_articles]:
            title = clean_text(item.get("title"))
            if not title:
                continue
            articles.append(Article(
                title=title,
                description=clean_text(item.get("description")) or "",
                url=item.get("link") or "",
                published_at=item.get("pubDate") or "",
                source=item.get("author") or DEFAULT_NEWS_SOURCE
            ))
        return articles
