from __future__ import annotations

import pytest


def test_builtin_providers_registered():
    # Import package to trigger registration
    import sources  # noqa: F401
    from sources.registry import available_providers, get_provider

    names = available_providers().keys()
    assert {"mock_people", "mock_social", "mock_news", "google_news"} <= set(names)

    assert get_provider("mock_people").kind == "person"
    assert get_provider("mock_social").kind == "social"
    assert get_provider("mock_news").kind == "news"


def test_unknown_provider_raises():
    from sources.registry import get_provider
    with pytest.raises(KeyError):
        get_provider("does_not_exist")


def test_mock_people_returns_none_for_unknown_person():
    from sources.mock_people import MockPeopleProvider
    provider = MockPeopleProvider(delay_seconds=0)
    assert provider.lookup("zzz nonexistent person") is None
    assert provider.lookup("elon musk").name == "Elon Musk"


def test_mock_delay_comes_from_settings(monkeypatch):
    monkeypatch.setenv("MOCK_PROVIDER_DELAY", "0.25")
    from config.settings import get_settings
    get_settings.cache_clear()
    from sources.mock_news import MockNewsProvider
    assert MockNewsProvider().delay_seconds == 0.25


def test_google_news_requires_keys(monkeypatch):
    monkeypatch.setenv("NEWS_PROVIDER", "google_news")
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    monkeypatch.delenv("GOOGLE_CSE_ID", raising=False)
    from config.settings import get_settings
    get_settings.cache_clear()
    with pytest.raises(RuntimeError, match="GOOGLE_API_KEY"):
        get_settings()


def test_build_search_aggregator_uses_configured_providers(monkeypatch):
    monkeypatch.setenv("CACHE_FRESHNESS_HOURS", "6")
    from datetime import timedelta
    from config.settings import get_settings
    get_settings.cache_clear()
    from services.search_service import build_search_aggregator

    agg = build_search_aggregator(None)

    assert agg.person_provider.provider_name == "mock_people"
    assert agg.news_provider.provider_name == "mock_news"
    assert agg.results_repo is None
    assert agg.freshness == timedelta(hours=6)


def test_provider_kind_mismatch_raises():
    import sources  # noqa: F401
    from sources.registry import get_provider

    with pytest.raises(RuntimeError, match="expected person"):
        get_provider("mock_news", kind="person")
    assert get_provider("mock_news", kind="news").kind == "news"


def test_build_search_aggregator_rejects_provider_of_wrong_kind(monkeypatch):
    monkeypatch.setenv("PERSON_PROVIDER", "mock_news")
    from config.settings import get_settings
    get_settings.cache_clear()
    from services.search_service import build_search_aggregator

    with pytest.raises(RuntimeError, match="mock_news is a news provider"):
        build_search_aggregator(None)
