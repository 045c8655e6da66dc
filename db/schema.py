from __future__ import annotations

import sqlite3


def bootstrap(conn: sqlite3.Connection) -> None:
    """Create document collections and their lookup indexes (idempotent)."""
    cur = conn.cursor()

    # Cached search results, one document per (user_id, query)
    cur.execute(
        (
            "CREATE TABLE IF NOT EXISTS search_results (\n"
            "  id INTEGER PRIMARY KEY AUTOINCREMENT,\n"
            "  user_id TEXT NOT NULL,\n"
            "  query TEXT NOT NULL,\n"
            "  results_json TEXT NOT NULL,\n"
            "  created_at TEXT NOT NULL,\n"
            "  last_updated TEXT NOT NULL\n"
            ")"
        )
    )
    cur.execute("CREATE INDEX IF NOT EXISTS idx_search_results_user_query ON search_results(user_id, query);")

    # Append-only search history
    cur.execute(
        (
            "CREATE TABLE IF NOT EXISTS search_history (\n"
            "  id INTEGER PRIMARY KEY AUTOINCREMENT,\n"
            "  user_id TEXT NOT NULL,\n"
            "  query TEXT NOT NULL,\n"
            "  timestamp TEXT NOT NULL\n"
            ")"
        )
    )
    cur.execute("CREATE INDEX IF NOT EXISTS idx_search_history_user_ts ON search_history(user_id, timestamp);")

    # Favorites, one document per (user_id, person_id)
    cur.execute(
        (
            "CREATE TABLE IF NOT EXISTS favorites (\n"
            "  id INTEGER PRIMARY KEY AUTOINCREMENT,\n"
            "  user_id TEXT NOT NULL,\n"
            "  person_id TEXT NOT NULL,\n"
            "  person_data_json TEXT NOT NULL,\n"
            "  created_at TEXT NOT NULL,\n"
            "  last_updated TEXT NOT NULL\n"
            ")"
        )
    )
    cur.execute("CREATE INDEX IF NOT EXISTS idx_favorites_user_person ON favorites(user_id, person_id);")
    cur.execute("CREATE INDEX IF NOT EXISTS idx_favorites_user_created ON favorites(user_id, created_at);")

    conn.commit()
