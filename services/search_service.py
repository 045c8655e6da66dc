from __future__ import annotations

import logging
import sqlite3
import time
from datetime import datetime, timedelta
from typing import Callable, List, Optional, Tuple

from config.settings import Settings, get_settings
from db.repos.favorites_repo import FavoritesRepo
from db.repos.search_history_repo import SearchHistoryRepo
from db.repos.search_results_repo import SearchResultsRepo
from models.profile_record import ProfileRecord
from ports.lookup import NewsLookupPort, PersonLookupPort, SocialLookupPort
from ports.repos import FavoritesRepoPort, SearchHistoryRepoPort, SearchResultsRepoPort
from services.mock_data import get_mock_profile, normalize_query
from utils.provider_logger import log_call
from utils.timestamps import as_utc, utcnow


logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

DEFAULT_FRESHNESS = timedelta(hours=24)


class SearchAggregator:
    """Cache-first person search.

    A fresh cached result for (user_id, query) is returned as is. Otherwise the
    person provider is consulted, its record is enriched with social profiles
    and news articles, and the outcome is written back to the cache. Anything
    the person provider cannot answer is served from static mock data.

    Enrichment is best effort: a failing social or news lookup is logged and
    leaves its field unset without affecting the rest of the record. Store
    errors are not handled here and reach the caller.

    Without a ``user_id`` the cache is neither read nor written.
    """

    def __init__(
        self,
        person_provider: PersonLookupPort,
        social_provider: SocialLookupPort,
        news_provider: NewsLookupPort,
        results_repo: Optional[SearchResultsRepoPort] = None,
        freshness: timedelta = DEFAULT_FRESHNESS,
        clock: Optional[Clock] = None,
    ) -> None:
        self.person_provider = person_provider
        self.social_provider = social_provider
        self.news_provider = news_provider
        self.results_repo = results_repo
        self.freshness = freshness
        self.clock = clock or utcnow

    def search(self, query: str, user_id: Optional[str] = None) -> ProfileRecord:
        display_query = (query or "").strip()
        if not display_query:
            raise ValueError("Search query must not be empty")
        normalized = normalize_query(query)
        use_cache = bool(user_id) and self.results_repo is not None
        now = as_utc(self.clock())

        if use_cache:
            entry = self.results_repo.get(user_id, query)
            if entry is not None and entry.is_fresh(now, self.freshness):
                logger.info("Using cached search results", extra={"step": "cache", "status": "hit"})
                return entry.results
            logger.info(
                "Cached search results missing or stale",
                extra={"step": "cache", "status": "stale" if entry is not None else "miss"},
            )

        record = self._aggregate(normalized, display_query)

        if use_cache:
            self.results_repo.put(user_id, query, record, now=now)
        return record

    def _aggregate(self, normalized: str, display_query: str) -> ProfileRecord:
        try:
            record = self._call(self.person_provider, "lookup", normalized)
        except Exception as e:
            logger.warning(
                "Person lookup failed, using static profile",
                extra={"step": "person", "status": "error", "error": str(e)},
            )
            return get_mock_profile(display_query)

        if record is None:
            logger.info("Person lookup found nothing, using static profile", extra={"step": "person", "status": "empty"})
            return get_mock_profile(display_query)

        social = self._enrich(self.social_provider, "social", normalized, record.name)
        if social:
            record = record.model_copy(update={"social_profiles": social})

        articles = self._enrich(self.news_provider, "news", record.name)
        if articles:
            record = record.model_copy(update={"articles": articles})
        return record

    def _enrich(self, provider, step: str, *args) -> Optional[List]:
        try:
            return self._call(provider, "lookup", *args)
        except Exception as e:
            logger.warning(
                f"{step.capitalize()} enrichment failed, continuing without it",
                extra={"step": step, "status": "error", "error": str(e),
                       "provider": getattr(provider, "provider_name", "-")},
            )
            return None

    def _call(self, provider, operation: str, *args):
        name = getattr(provider, "provider_name", type(provider).__name__)
        started = time.monotonic()
        try:
            result = getattr(provider, operation)(*args)
        except Exception as e:
            duration_ms = int((time.monotonic() - started) * 1000)
            logger.debug(
                "Provider call failed",
                extra={"step": operation, "status": "error", "provider": name,
                       "duration_ms": duration_ms, "error": str(e)},
            )
            log_call(
                caller="search_service",
                provider=name,
                operation=operation,
                duration_ms=duration_ms,
                status="error",
                error=str(e),
            )
            raise
        duration_ms = int((time.monotonic() - started) * 1000)
        logger.debug(
            "Provider call finished",
            extra={"step": operation, "status": "ok", "provider": name, "duration_ms": duration_ms},
        )
        log_call(caller="search_service", provider=name, operation=operation, duration_ms=duration_ms)
        return result


class SearchService:
    """Search entry point for signed-in and anonymous users.

    Records every search of a signed-in user in their history, after the
    result has been produced.
    """

    def __init__(
        self,
        aggregator: SearchAggregator,
        history_repo: Optional[SearchHistoryRepoPort] = None,
        favorites_repo: Optional[FavoritesRepoPort] = None,
    ):
        self.aggregator = aggregator
        self.history_repo = history_repo
        self.favorites_repo = favorites_repo

    def search_and_record(self, query: str, user_id: Optional[str] = None) -> ProfileRecord:
        if not (query or "").strip():
            raise ValueError("Please enter a name to search")
        record = self.aggregator.search(query, user_id)
        if user_id and self.history_repo is not None:
            self.history_repo.add(user_id, query)
        return record

    def favorite(self, query: str, user_id: str) -> Tuple[int, ProfileRecord]:
        """Save whatever ``query`` currently resolves to (cached when fresh) as a favorite."""
        if self.favorites_repo is None:
            raise RuntimeError("No favorites store configured")
        if not (query or "").strip():
            raise ValueError("Please enter a name to search")
        record = self.aggregator.search(query, user_id)
        favorite_id = self.favorites_repo.save(user_id, record)
        return favorite_id, record


def build_search_aggregator(conn: Optional[sqlite3.Connection], settings: Optional[Settings] = None) -> SearchAggregator:
    """Wire the configured providers and, when a connection is given, the result cache."""
    import sources  # noqa: F401 ensure registration
    from sources.registry import get_provider

    settings = settings or get_settings()
    return SearchAggregator(
        person_provider=get_provider(settings.person_provider, settings, kind="person"),
        social_provider=get_provider(settings.social_provider, settings, kind="social"),
        news_provider=get_provider(settings.news_provider, settings, kind="news"),
        results_repo=SearchResultsRepo(conn) if conn is not None else None,
        freshness=timedelta(hours=settings.cache_freshness_hours),
    )


def build_search_service(conn: sqlite3.Connection, settings: Optional[Settings] = None) -> SearchService:
    return SearchService(build_search_aggregator(conn, settings), SearchHistoryRepo(conn), FavoritesRepo(conn))
