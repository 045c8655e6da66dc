from __future__ import annotations

from typing import List

from models.profile_record import SocialProfile
from services.mock_data import known_social_profiles
from sources.base import MockProvider
from sources.registry import register


class MockSocialProvider(MockProvider):
    provider_name = "mock_social"
    kind = "social"

    def lookup(self, normalized_query: str, name: str) -> List[SocialProfile]:
        self._simulate_latency()
        return known_social_profiles(normalized_query)


def _register():
    register(MockSocialProvider.provider_name, MockSocialProvider)


_register()
