from __future__ import annotations

import json
import sqlite3
from datetime import datetime
from typing import List, Optional

from utils.timestamps import to_iso
from models.favorite_item import FavoriteItem
from models.profile_record import ProfileRecord


class FavoritesRepo:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def save(self, user_id: str, person: ProfileRecord, now: Optional[datetime] = None) -> int:
        """Favorite a person for a user; re-favoriting replaces the stored data.

        The person is identified by display name. Returns the favorite id.
        """
        stamp = to_iso(now)
        payload = json.dumps(person.to_document(), ensure_ascii=False)
        cur = self.conn.cursor()
        cur.execute(
            "SELECT id FROM favorites WHERE user_id = ? AND person_id = ? ORDER BY id ASC LIMIT 1",
            (user_id, person.name),
        )
        row = cur.fetchone()
        if row:
            favorite_id = int(row[0])
            cur.execute(
                "UPDATE favorites SET person_data_json = ?, last_updated = ? WHERE id = ?",
                (payload, stamp, favorite_id),
            )
            self.conn.commit()
            return favorite_id
        cur.execute(
            "INSERT INTO favorites (user_id, person_id, person_data_json, created_at, last_updated) VALUES (?, ?, ?, ?, ?)",
            (user_id, person.name, payload, stamp, stamp),
        )
        self.conn.commit()
        return int(cur.lastrowid)

    def list_for_user(self, user_id: str) -> List[FavoriteItem]:
        """Most recently created first."""
        cur = self.conn.cursor()
        cur.execute(
            "SELECT id, user_id, person_id, person_data_json, created_at, last_updated FROM favorites "
            "WHERE user_id = ? ORDER BY created_at DESC, id DESC",
            (user_id,),
        )
        out: List[FavoriteItem] = []
        for r in cur.fetchall():
            out.append(
                FavoriteItem(
                    id=int(r[0]),
                    user_id=r[1],
                    person_id=r[2],
                    person_data=ProfileRecord.model_validate(json.loads(r[3])),
                    created_at=r[4],
                    last_updated=r[5],
                )
            )
        return out

    def delete(self, favorite_id: int) -> bool:
        cur = self.conn.cursor()
        cur.execute("DELETE FROM favorites WHERE id = ?", (favorite_id,))
        self.conn.commit()
        return cur.rowcount > 0
