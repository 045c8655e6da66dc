from __future__ import annotations

import json
import sqlite3
from datetime import datetime
from typing import Optional

from utils.timestamps import to_iso
from models.cache_entry import CacheEntry
from models.profile_record import ProfileRecord


class SearchResultsRepo:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def get(self, user_id: str, query: str) -> Optional[CacheEntry]:
        """Return the cached result document for (user_id, query), if any.

        ``query`` is matched exactly as the user typed it.
        """
        cur = self.conn.cursor()
        cur.execute(
            "SELECT id, user_id, query, results_json, created_at, last_updated "
            "FROM search_results WHERE user_id = ? AND query = ? ORDER BY id ASC LIMIT 1",
            (user_id, query),
        )
        row = cur.fetchone()
        if not row:
            return None
        entry_id, uid, q, results_json, created_at, last_updated = row
        return CacheEntry(
            id=int(entry_id),
            user_id=uid,
            query=q,
            results=ProfileRecord.model_validate(json.loads(results_json)),
            created_at=created_at,
            last_updated=last_updated,
        )

    def put(self, user_id: str, query: str, results: ProfileRecord, now: Optional[datetime] = None) -> int:
        """Insert or overwrite the result document for (user_id, query).

        Returns the document id. Prior results are replaced, not versioned.
        """
        # Manual upsert: concurrent writers for the same pair are not serialized
        stamp = to_iso(now)
        payload = json.dumps(results.to_document(), ensure_ascii=False)
        cur = self.conn.cursor()
        cur.execute(
            "SELECT id FROM search_results WHERE user_id = ? AND query = ? ORDER BY id ASC LIMIT 1",
            (user_id, query),
        )
        row = cur.fetchone()
        if row:
            entry_id = int(row[0])
            cur.execute(
                "UPDATE search_results SET results_json = ?, last_updated = ? WHERE id = ?",
                (payload, stamp, entry_id),
            )
            self.conn.commit()
            return entry_id
        cur.execute(
            "INSERT INTO search_results (user_id, query, results_json, created_at, last_updated) VALUES (?, ?, ?, ?, ?)",
            (user_id, query, payload, stamp, stamp),
        )
        self.conn.commit()
        return int(cur.lastrowid)
