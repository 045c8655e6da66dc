from __future__ import annotations

import time
from typing import Optional

from config.settings import Settings, get_settings
from ports.lookup import ProviderKind


class MockProvider:
    """Shared plumbing for canned-data providers.

    ``delay_seconds`` simulates the round trip of a real API call.
    """

    provider_name: str = "mock"
    kind: ProviderKind = "person"

    def __init__(self, settings: Optional[Settings] = None, delay_seconds: Optional[float] = None):
        if delay_seconds is None:
            delay_seconds = (settings or get_settings()).mock_delay_seconds
        self.delay_seconds = max(0.0, float(delay_seconds))

    def _simulate_latency(self) -> None:
        if self.delay_seconds:
            time.sleep(self.delay_seconds)
