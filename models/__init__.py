from .profile_record import (
    Activity,
    Article,
    BlogPost,
    CareerEntry,
    Education,
    Photo,
    PopularContentItem,
    PossibleMatch,
    ProfileRecord,
    Project,
    SocialProfile,
    TimelineEvent,
    Video,
)
from .cache_entry import CacheEntry
from .history_item import HistoryItem
from .favorite_item import FavoriteItem

__all__ = [
    "Activity",
    "Article",
    "BlogPost",
    "CareerEntry",
    "Education",
    "Photo",
    "PopularContentItem",
    "PossibleMatch",
    "ProfileRecord",
    "Project",
    "SocialProfile",
    "TimelineEvent",
    "Video",
    "CacheEntry",
    "HistoryItem",
    "FavoriteItem",
]
