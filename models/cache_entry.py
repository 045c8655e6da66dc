from __future__ import annotations

from datetime import datetime, timedelta

from pydantic import BaseModel, ConfigDict, Field

from models.profile_record import ProfileRecord
from utils.timestamps import as_utc


class CacheEntry(BaseModel):
    """Stored search result for one (user, query) pair."""

    id: int | None = None
    user_id: str = Field(alias="userId")
    query: str
    results: ProfileRecord
    created_at: datetime = Field(alias="createdAt")
    last_updated: datetime = Field(alias="lastUpdated")

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    def age(self, now: datetime) -> timedelta:
        return as_utc(now) - as_utc(self.last_updated)

    def is_fresh(self, now: datetime, window: timedelta) -> bool:
        return self.age(now) < window
