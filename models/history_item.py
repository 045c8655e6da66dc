from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class HistoryItem(BaseModel):
    """One recorded search of a signed-in user."""

    id: int
    user_id: str = Field(alias="userId")
    query: str
    timestamp: datetime

    model_config = ConfigDict(extra="ignore", populate_by_name=True)
