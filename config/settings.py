from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


def _as_bool(value: str | None) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    # Core/runtime
    db_path: str
    run_env: str
    log_level: str

    # Cache
    cache_freshness_hours: float

    # Lookup providers (registry names)
    person_provider: str
    social_provider: str
    news_provider: str
    mock_delay_seconds: float

    # Google Custom Search (google_news provider)
    google_api_key: str | None
    google_cse_id: str | None
    google_search_url: str
    request_timeout_seconds: int
    max_retries: int

    # Logging/tracing
    provider_trace: bool = False
    provider_log_path: str = "logs/provider_calls.jsonl"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    news_provider = os.getenv("NEWS_PROVIDER", "mock_news")
    google_api_key = os.getenv("GOOGLE_API_KEY")
    google_cse_id = os.getenv("GOOGLE_CSE_ID")

    if news_provider == "google_news" and not (google_api_key and google_cse_id):
        raise RuntimeError(
            "GOOGLE_API_KEY and GOOGLE_CSE_ID required when NEWS_PROVIDER=google_news"
        )
    return Settings(
        db_path=os.getenv("DB_PATH", "personfinder.db"),
        run_env=os.getenv("RUN_ENV", "local"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        cache_freshness_hours=float(os.getenv("CACHE_FRESHNESS_HOURS", "24")),
        person_provider=os.getenv("PERSON_PROVIDER", "mock_people"),
        social_provider=os.getenv("SOCIAL_PROVIDER", "mock_social"),
        news_provider=news_provider,
        mock_delay_seconds=float(os.getenv("MOCK_PROVIDER_DELAY", "0")),
        google_api_key=google_api_key,
        google_cse_id=google_cse_id,
        google_search_url=os.getenv("GOOGLE_SEARCH_URL", "https://www.googleapis.com/customsearch/v1"),
        request_timeout_seconds=int(os.getenv("REQUEST_TIMEOUT", "30")),
        max_retries=int(os.getenv("MAX_RETRIES", "3")),
        provider_trace=_as_bool(os.getenv("PROVIDER_TRACE", "false")),
        provider_log_path=os.getenv("PROVIDER_LOG_PATH", "logs/provider_calls.jsonl"),
    )
