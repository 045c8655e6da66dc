from __future__ import annotations

from typing import Optional

from models.profile_record import ProfileRecord
from services.mock_data import known_profile
from sources.base import MockProvider
from sources.registry import register


class MockPeopleProvider(MockProvider):
    """Stand-in for a people-data API: knows a couple of public figures."""

    provider_name = "mock_people"
    kind = "person"

    def lookup(self, normalized_query: str) -> Optional[ProfileRecord]:
        self._simulate_latency()
        return known_profile(normalized_query)


def _register():
    register(MockPeopleProvider.provider_name, MockPeopleProvider)


_register()
