from __future__ import annotations

from typing import List, Literal, Optional, Protocol

from models.profile_record import Article, ProfileRecord, SocialProfile


ProviderKind = Literal["person", "social", "news"]


class PersonLookupPort(Protocol):
    provider_name: str
    kind: ProviderKind

    def lookup(self, normalized_query: str) -> Optional[ProfileRecord]:
        ...


class SocialLookupPort(Protocol):
    provider_name: str
    kind: ProviderKind

    def lookup(self, normalized_query: str, name: str) -> List[SocialProfile]:
        ...


class NewsLookupPort(Protocol):
    provider_name: str
    kind: ProviderKind

    def lookup(self, name: str) -> List[Article]:
        ...
