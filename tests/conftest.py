from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest


def pytest_configure():
    # Ensure project root is on sys.path for absolute imports like 'services.search_service'
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))
    # Set test environment knobs
    os.environ.setdefault("RUN_ENV", "test")
    os.environ.setdefault("MOCK_PROVIDER_DELAY", "0")


@pytest.fixture(autouse=True)
def _fresh_settings():
    from config.settings import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
