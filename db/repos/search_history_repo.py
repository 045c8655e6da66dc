from __future__ import annotations

import sqlite3
from datetime import datetime
from typing import List, Optional

from utils.timestamps import to_iso
from models.history_item import HistoryItem


class SearchHistoryRepo:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def add(self, user_id: str, query: str, timestamp: Optional[datetime] = None) -> int:
        cur = self.conn.cursor()
        cur.execute(
            "INSERT INTO search_history (user_id, query, timestamp) VALUES (?, ?, ?)",
            (user_id, query, to_iso(timestamp)),
        )
        self.conn.commit()
        return int(cur.lastrowid)

    def list_for_user(self, user_id: str) -> List[HistoryItem]:
        """Newest first."""
        cur = self.conn.cursor()
        cur.execute(
            "SELECT id, user_id, query, timestamp FROM search_history "
            "WHERE user_id = ? ORDER BY timestamp DESC, id DESC",
            (user_id,),
        )
        return [
            HistoryItem(id=int(r[0]), user_id=r[1], query=r[2], timestamp=r[3])
            for r in cur.fetchall()
        ]

    def delete(self, history_id: int) -> bool:
        cur = self.conn.cursor()
        cur.execute("DELETE FROM search_history WHERE id = ?", (history_id,))
        self.conn.commit()
        return cur.rowcount > 0
