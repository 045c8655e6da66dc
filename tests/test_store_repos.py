from __future__ import annotations

import sqlite3
from datetime import datetime, timedelta, timezone

import pytest

from db import schema
from db.repos.favorites_repo import FavoritesRepo
from db.repos.search_history_repo import SearchHistoryRepo
from db.repos.search_results_repo import SearchResultsRepo
from models.profile_record import ProfileRecord
from services.mock_data import get_mock_profile


T0 = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture()
def conn(tmp_path):
    db = sqlite3.connect(str(tmp_path / "t.db"))
    schema.bootstrap(db)
    try:
        yield db
    finally:
        db.close()


def test_bootstrap_is_idempotent(conn):
    schema.bootstrap(conn)
    cur = conn.cursor()
    cur.execute("SELECT name FROM sqlite_master WHERE type = 'table' AND name NOT LIKE 'sqlite_%' ORDER BY name")
    assert [r[0] for r in cur.fetchall()] == ["favorites", "search_history", "search_results"]


def test_results_upsert_overwrites_in_place(conn):
    repo = SearchResultsRepo(conn)
    assert repo.get("u1", "steve jobs") is None

    first_id = repo.put("u1", "steve jobs", ProfileRecord(name="Old"), now=T0)
    second_id = repo.put("u1", "steve jobs", get_mock_profile("steve jobs"), now=T0 + timedelta(hours=30))

    assert first_id == second_id
    entry = repo.get("u1", "steve jobs")
    assert entry.results.name == "Steve Jobs"
    assert entry.created_at == T0
    assert entry.last_updated == T0 + timedelta(hours=30)
    cur = conn.cursor()
    cur.execute("SELECT COUNT(*) FROM search_results")
    assert cur.fetchone()[0] == 1


def test_results_are_scoped_by_user_and_exact_query(conn):
    repo = SearchResultsRepo(conn)
    repo.put("u1", "Steve Jobs", ProfileRecord(name="A"), now=T0)
    assert repo.get("u2", "Steve Jobs") is None
    assert repo.get("u1", "steve jobs") is None


def test_cache_entry_freshness_boundary(conn):
    repo = SearchResultsRepo(conn)
    repo.put("u1", "q", ProfileRecord(name="Q"), now=T0)
    entry = repo.get("u1", "q")
    window = timedelta(hours=24)
    assert entry.is_fresh(T0 + timedelta(hours=23, minutes=59), window)
    assert not entry.is_fresh(T0 + timedelta(hours=24), window)
    assert not entry.is_fresh(T0 + timedelta(hours=24, minutes=1), window)


def test_history_is_newest_first(conn):
    repo = SearchHistoryRepo(conn)
    repo.add("u1", "first", timestamp=T0)
    repo.add("u1", "second", timestamp=T0 + timedelta(minutes=1))
    repo.add("u2", "other user", timestamp=T0 + timedelta(minutes=5))
    repo.add("u1", "third", timestamp=T0 + timedelta(minutes=2))

    items = repo.list_for_user("u1")

    assert [i.query for i in items] == ["third", "second", "first"]
    stamps = [i.timestamp for i in items]
    assert stamps[0] > stamps[1] > stamps[2]


def test_history_delete(conn):
    repo = SearchHistoryRepo(conn)
    keep = repo.add("u1", "keep", timestamp=T0)
    drop = repo.add("u1", "drop", timestamp=T0 + timedelta(seconds=1))
    assert repo.delete(drop) is True
    assert repo.delete(drop) is False
    assert [i.id for i in repo.list_for_user("u1")] == [keep]


def test_favorite_upsert_replaces_person_data(conn):
    repo = FavoritesRepo(conn)
    first = ProfileRecord(name="Steve Jobs", location="Cupertino", description="old")
    second = ProfileRecord(name="Steve Jobs", location="Palo Alto")

    a = repo.save("u1", first, now=T0)
    b = repo.save("u1", second, now=T0 + timedelta(hours=1))

    assert a == b
    items = repo.list_for_user("u1")
    assert len(items) == 1
    fav = items[0]
    assert fav.person_id == "Steve Jobs"
    assert fav.person_data.location == "Palo Alto"
    # Replaced, not merged
    assert fav.person_data.description is None
    assert fav.created_at == T0
    assert fav.last_updated == T0 + timedelta(hours=1)


def test_favorites_listing_and_delete(conn):
    repo = FavoritesRepo(conn)
    older = repo.save("u1", ProfileRecord(name="Elon Musk"), now=T0)
    newer = repo.save("u1", ProfileRecord(name="Steve Jobs"), now=T0 + timedelta(days=1))
    repo.save("u2", ProfileRecord(name="Steve Jobs"), now=T0)

    assert [f.id for f in repo.list_for_user("u1")] == [newer, older]
    assert repo.delete(older) is True
    assert [f.person_id for f in repo.list_for_user("u1")] == ["Steve Jobs"]
    assert len(repo.list_for_user("u2")) == 1


def test_favorite_is_independent_of_cache(conn):
    results = SearchResultsRepo(conn)
    favorites = FavoritesRepo(conn)
    results.put("u1", "steve jobs", get_mock_profile("steve jobs"), now=T0)
    fav_id = favorites.save("u1", get_mock_profile("steve jobs"), now=T0)
    favorites.delete(fav_id)
    assert results.get("u1", "steve jobs") is not None
