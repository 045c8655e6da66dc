import argparse
import json
import os
import uuid as _uuid
from datetime import datetime, timedelta, timezone

from config.settings import get_settings
from db import schema
from db.connection import get_connection
from db.repos.favorites_repo import FavoritesRepo
from db.repos.search_history_repo import SearchHistoryRepo
from db.repos.search_results_repo import SearchResultsRepo
from services.search_service import build_search_service
from utils.logging_setup import init_logging


def _open_db(args):
    conn = get_connection(args.db)
    schema.bootstrap(conn)
    return conn


def _print_json(data) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False, default=str))


def cmd_bootstrap(args):
    conn = get_connection(args.db)
    schema.bootstrap(conn)
    print("Schema ready")


def cmd_search(args):
    conn = _open_db(args)
    service = build_search_service(conn)
    try:
        record = service.search_and_record(args.query, args.user)
    except ValueError as e:
        print(str(e))
        raise SystemExit(2)
    _print_json(record.to_document())


def cmd_history(args):
    conn = _open_db(args)
    items = SearchHistoryRepo(conn).list_for_user(args.user)
    _print_json([item.model_dump(by_alias=True, mode="json") for item in items])


def cmd_history_delete(args):
    conn = _open_db(args)
    if SearchHistoryRepo(conn).delete(args.id):
        print(f"Deleted history item {args.id}")
    else:
        print(f"No history item {args.id}")


def cmd_favorite_add(args):
    conn = _open_db(args)
    try:
        favorite_id, record = build_search_service(conn).favorite(args.query, args.user)
    except ValueError as e:
        print(str(e))
        raise SystemExit(2)
    print(f"Saved favorite {favorite_id}: {record.name}")


def cmd_favorites(args):
    conn = _open_db(args)
    items = FavoritesRepo(conn).list_for_user(args.user)
    out = []
    for item in items:
        out.append({
            "id": item.id,
            "personId": item.person_id,
            "currentPosition": item.person_data.current_position,
            "location": item.person_data.location,
            "createdAt": item.created_at.isoformat(),
            "lastUpdated": item.last_updated.isoformat(),
        })
    _print_json(out)


def cmd_favorite_remove(args):
    conn = _open_db(args)
    if FavoritesRepo(conn).delete(args.id):
        print(f"Removed favorite {args.id}")
    else:
        print(f"No favorite {args.id}")


def cmd_cached(args):
    conn = _open_db(args)
    settings = get_settings()
    entry = SearchResultsRepo(conn).get(args.user, args.query)
    if entry is None:
        print("No cached results")
        return
    now = datetime.now(timezone.utc)
    _print_json({
        "id": entry.id,
        "query": entry.query,
        "name": entry.results.name,
        "createdAt": entry.created_at.isoformat(),
        "lastUpdated": entry.last_updated.isoformat(),
        "ageHours": round(entry.age(now).total_seconds() / 3600, 2),
        "fresh": entry.is_fresh(now, timedelta(hours=settings.cache_freshness_hours)),
    })


def main():
    settings = get_settings()
    init_logging(settings.log_level)
    if not os.getenv("RUN_ID"):
        os.environ["RUN_ID"] = _uuid.uuid4().hex
    parser = argparse.ArgumentParser(description="PersonFinder CLI")
    parser.add_argument("--db", default=settings.db_path, help="Path to SQLite DB (default from settings)")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_boot = sub.add_parser("bootstrap", help="Create collections and indexes")
    p_boot.set_defaults(func=cmd_bootstrap)

    p_search = sub.add_parser("search", help="Search for a person and print the profile as JSON")
    p_search.add_argument("--query", "-q", required=True, help="Name to search for")
    p_search.add_argument("--user", "-u", default=None, help="User id; enables caching and history")
    p_search.set_defaults(func=cmd_search)

    p_hist = sub.add_parser("history", help="List a user's searches, newest first")
    p_hist.add_argument("--user", "-u", required=True)
    p_hist.set_defaults(func=cmd_history)

    p_hdel = sub.add_parser("history-delete", help="Delete a search history item")
    p_hdel.add_argument("--id", type=int, required=True)
    p_hdel.set_defaults(func=cmd_history_delete)

    p_fadd = sub.add_parser("favorite-add", help="Search for a person and save the result as a favorite")
    p_fadd.add_argument("--user", "-u", required=True)
    p_fadd.add_argument("--query", "-q", required=True)
    p_fadd.set_defaults(func=cmd_favorite_add)

    p_fav = sub.add_parser("favorites", help="List a user's favorites, newest first")
    p_fav.add_argument("--user", "-u", required=True)
    p_fav.set_defaults(func=cmd_favorites)

    p_frm = sub.add_parser("favorite-remove", help="Remove a favorite")
    p_frm.add_argument("--id", type=int, required=True)
    p_frm.set_defaults(func=cmd_favorite_remove)

    p_cache = sub.add_parser("cached", help="Show the cached result for a user and query")
    p_cache.add_argument("--user", "-u", required=True)
    p_cache.add_argument("--query", "-q", required=True)
    p_cache.set_defaults(func=cmd_cached)

    args = parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
