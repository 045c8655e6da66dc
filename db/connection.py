from __future__ import annotations

import sqlite3
from typing import Optional


def get_connection(db_path: str, timeout: Optional[float] = 30.0) -> sqlite3.Connection:
    """Open a SQLite connection for the document store.

    - WAL journal so concurrent searches do not block readers
    - NORMAL synchronous for performance
    """
    conn = sqlite3.connect(db_path, timeout=timeout or 30.0)
    conn.execute("PRAGMA journal_mode=WAL;")
    conn.execute("PRAGMA synchronous=NORMAL;")
    return conn
