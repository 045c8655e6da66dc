"""
Google Custom Search API integration for news enrichment.
"""
from __future__ import annotations

import logging
import time
from typing import Any, Dict, List, Optional

import requests

from config.settings import Settings, get_settings
from models.profile_record import Article
from sources.registry import register


logger = logging.getLogger(__name__)


class GoogleNewsProvider:
    """Finds recent coverage of a person through Google Custom Search."""

    provider_name = "google_news"
    kind = "news"

    def __init__(self, settings: Optional[Settings] = None, max_results: int = 5):
        self.settings = settings or get_settings()
        self.api_key = self.settings.google_api_key
        self.cse_id = self.settings.google_cse_id
        self.max_results = max_results
        self.api_calls_made = 0

        if not self.api_key or not self.cse_id:
            raise ValueError("Google API key and Custom Search Engine ID must be set in .env file")

    def format_news_query(self, name: str) -> str:
        return f'"{name}" news'

    def search_single_page(self, query: str) -> Optional[Dict[str, Any]]:
        """Execute a single Google Custom Search API request."""
        params = {
            "key": self.api_key,
            "cx": self.cse_id,
            "q": query,
            "num": self.max_results,
        }

        for attempt in range(self.settings.max_retries):
            try:
                response = requests.get(
                    self.settings.google_search_url,
                    params=params,
                    timeout=self.settings.request_timeout_seconds,
                )
                self.api_calls_made += 1

                if response.status_code == 200:
                    return response.json()
                elif response.status_code == 429:
                    logger.warning("API rate limit exceeded", extra={"provider": self.provider_name})
                    return None
                else:
                    logger.error(
                        f"API request failed with status {response.status_code}: {response.text}",
                        extra={"provider": self.provider_name},
                    )
                    return None

            except requests.exceptions.RequestException as e:
                logger.error(f"Request error on attempt {attempt + 1}: {e}", extra={"provider": self.provider_name})
                if attempt < self.settings.max_retries - 1:
                    time.sleep(2 ** attempt)  # Exponential backoff

        return None

    def lookup(self, name: str) -> List[Article]:
        data = self.search_single_page(self.format_news_query(name))
        if not data:
            return []
        articles: List[Article] = []
        for item in data.get("items") or []:
            title = item.get("title")
            if not title:
                continue
            articles.append(
                Article(
                    title=title,
                    url=item.get("link"),
                    source=item.get("displayLink"),
                    date=_published_date(item),
                )
            )
        return articles


def _published_date(item: Dict[str, Any]) -> Optional[str]:
    # CSE exposes article metadata under pagemap.metatags when the site provides it
    for tags in (item.get("pagemap") or {}).get("metatags") or []:
        value = tags.get("article:published_time")
        if value:
            return str(value)[:10]
    return None


def _register():
    register(GoogleNewsProvider.provider_name, GoogleNewsProvider)


_register()
