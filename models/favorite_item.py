from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from models.profile_record import ProfileRecord


class FavoriteItem(BaseModel):
    """A person a user saved; keyed by (user_id, person_id)."""

    id: int
    user_id: str = Field(alias="userId")
    # Resolved display name, so same-named people share one favorite.
    person_id: str = Field(alias="personId")
    person_data: ProfileRecord = Field(alias="personData")
    created_at: datetime = Field(alias="createdAt")
    last_updated: datetime = Field(alias="lastUpdated")

    model_config = ConfigDict(extra="ignore", populate_by_name=True)
