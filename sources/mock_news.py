from __future__ import annotations

from typing import List

from models.profile_record import Article
from services.mock_data import known_articles
from sources.base import MockProvider
from sources.registry import register


class MockNewsProvider(MockProvider):
    provider_name = "mock_news"
    kind = "news"

    def lookup(self, name: str) -> List[Article]:
        self._simulate_latency()
        return known_articles(name)


def _register():
    register(MockNewsProvider.provider_name, MockNewsProvider)


_register()
