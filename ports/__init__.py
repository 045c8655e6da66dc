from .lookup import NewsLookupPort, PersonLookupPort, SocialLookupPort
from .repos import FavoritesRepoPort, SearchHistoryRepoPort, SearchResultsRepoPort

__all__ = [
    "PersonLookupPort",
    "SocialLookupPort",
    "NewsLookupPort",
    "SearchResultsRepoPort",
    "SearchHistoryRepoPort",
    "FavoritesRepoPort",
]
