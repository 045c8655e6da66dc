from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Protocol

from models.cache_entry import CacheEntry
from models.favorite_item import FavoriteItem
from models.history_item import HistoryItem
from models.profile_record import ProfileRecord


class SearchResultsRepoPort(Protocol):
    def get(self, user_id: str, query: str) -> Optional[CacheEntry]:
        ...

    def put(
        self,
        user_id: str,
        query: str,
        results: ProfileRecord,
        now: Optional[datetime] = None,
    ) -> int:
        ...


class SearchHistoryRepoPort(Protocol):
    def add(self, user_id: str, query: str, timestamp: Optional[datetime] = None) -> int:
        ...

    def list_for_user(self, user_id: str) -> List[HistoryItem]:
        ...

    def delete(self, history_id: int) -> bool:
        ...


class FavoritesRepoPort(Protocol):
    def save(self, user_id: str, person: ProfileRecord, now: Optional[datetime] = None) -> int:
        ...

    def list_for_user(self, user_id: str) -> List[FavoriteItem]:
        ...

    def delete(self, favorite_id: int) -> bool:
        ...
