from __future__ import annotations

from typing import Any, Dict, List, Optional

from models.profile_record import Article, ProfileRecord, SocialProfile


_STEVE_JOBS: Dict[str, Any] = {
    "name": "Steve Jobs",
    "image": "https://images.unsplash.com/photo-1569585723035-0e9e6ff87cbf?ixlib=rb-1.2.1&auto=format&fit=crop&w=1074&q=80",
    "currentPosition": "Co-founder and former CEO of Apple Inc.",
    "location": "Palo Alto, California",
    "description": (
        "Visionary entrepreneur who co-founded Apple and transformed the technology industry "
        "with revolutionary products like the Macintosh, iPod, iPhone, and iPad."
    ),
    "education": [
        {
            "institution": "Reed College",
            "degree": "Dropped out",
            "field": "Liberal arts",
            "startYear": 1972,
            "endYear": 1974,
            "description": "Attended Reed College but dropped out after one semester.",
        }
    ],
    "career": [
        {
            "company": "Apple Inc.",
            "title": "Co-founder and CEO",
            "startYear": 1976,
            "endYear": 2011,
            "description": "Co-founded Apple and served as CEO, transforming it into one of the world's most valuable companies.",
        },
        {
            "company": "NeXT Computer",
            "title": "Founder and CEO",
            "startYear": 1985,
            "endYear": 1997,
            "description": "Founded NeXT after leaving Apple, later acquired by Apple in 1997.",
        },
        {
            "company": "Pixar",
            "title": "CEO",
            "startYear": 1986,
            "endYear": 2006,
            "description": "Acquired Pixar and served as CEO until it was acquired by Disney.",
        },
    ],
    "photos": [
        {
            "url": "https://images.unsplash.com/photo-1569585723035-0e9e6ff87cbf?ixlib=rb-1.2.1&auto=format&fit=crop&w=1074&q=80",
            "caption": "Steve Jobs presenting at an Apple event",
            "year": 2010,
        }
    ],
    "videos": [
        {
            "title": "Steve Jobs introduces the iPhone",
            "url": "https://example.com/steve-jobs-iphone",
            "platform": "YouTube",
            "date": "2007-01-09",
        }
    ],
}

_ELON_MUSK: Dict[str, Any] = {
    "name": "Elon Musk",
    "image": "https://images.unsplash.com/photo-1570295999919-56ceb5ecca61?ixlib=rb-1.2.1&auto=format&fit=crop&w=1074&q=80",
    "currentPosition": "CEO of Tesla and SpaceX",
    "location": "Austin, Texas",
    "description": (
        "Entrepreneur and business magnate who founded SpaceX and co-founded Tesla Motors, "
        "Neuralink, and The Boring Company."
    ),
    "education": [
        {
            "institution": "University of Pennsylvania",
            "degree": "Bachelor's Degree",
            "field": "Physics and Economics",
            "startYear": 1992,
            "endYear": 1997,
            "description": "Double major in Physics and Economics",
        }
    ],
    "career": [
        {
            "company": "Tesla",
            "title": "CEO",
            "startYear": 2008,
            "endYear": None,
            "description": "Leading electric vehicle and clean energy company",
        },
        {
            "company": "SpaceX",
            "title": "Founder and CEO",
            "startYear": 2002,
            "endYear": None,
            "description": "Aerospace manufacturer and space transportation company",
        },
        {
            "company": "X (Twitter)",
            "title": "Owner and CEO",
            "startYear": 2022,
            "endYear": None,
            "description": "Acquired Twitter and rebranded it as X",
        },
    ],
    "photos": [
        {
            "url": "https://images.unsplash.com/photo-1547407139-3c921a66005c?ixlib=rb-1.2.1&auto=format&fit=crop&w=1074&q=80",
            "caption": "Elon Musk at a SpaceX event",
            "year": 2021,
        }
    ],
    "videos": [
        {
            "title": "Elon Musk presents Tesla Cybertruck",
            "url": "https://example.com/elon-musk-cybertruck",
            "platform": "YouTube",
            "date": "2019-11-21",
        }
    ],
}

_SOCIAL: Dict[str, List[Dict[str, Any]]] = {
    "steve jobs": [
        {"platform": "Twitter", "username": "stevejobs", "url": "https://twitter.com/stevejobs", "followers": 2500000},
        {"platform": "LinkedIn", "username": "stevejobs", "url": "https://linkedin.com/in/stevejobs", "followers": 1800000},
    ],
    "elon musk": [
        {"platform": "Twitter", "username": "elonmusk", "url": "https://twitter.com/elonmusk", "followers": 128000000},
        {"platform": "LinkedIn", "username": "elonmusk", "url": "https://linkedin.com/in/elonmusk", "followers": 4000000},
    ],
}

_NEWS: Dict[str, List[Dict[str, Any]]] = {
    "steve jobs": [
        {
            "title": "The Visionary Who Transformed Technology",
            "url": "https://example.com/steve-jobs-visionary",
            "source": "Tech Magazine",
            "date": "2011-10-06",
        },
        {
            "title": "Remembering Steve Jobs: 10 Years Later",
            "url": "https://example.com/remembering-steve-jobs",
            "source": "Apple Insider",
            "date": "2021-10-05",
        },
    ],
    "elon musk": [
        {
            "title": "The Ambitious Vision of Elon Musk",
            "url": "https://example.com/elon-musk-vision",
            "source": "Business Insider",
            "date": "2023-05-15",
        },
        {
            "title": "Elon Musk's SpaceX Launches New Satellite Constellation",
            "url": "https://example.com/spacex-satellite-launch",
            "source": "Space News",
            "date": "2023-09-22",
        },
    ],
}

_KNOWN_PEOPLE: Dict[str, Dict[str, Any]] = {
    "steve jobs": _STEVE_JOBS,
    "elon musk": _ELON_MUSK,
}

_UNKNOWN_IMAGE = "https://images.unsplash.com/photo-1568602471122-7832951cc4c5?ixlib=rb-1.2.1&auto=format&fit=crop&w=1074&q=80"


def normalize_query(query: Optional[str]) -> str:
    """Lowercase, trim, and collapse internal whitespace to a single space."""
    if not query:
        return ""
    return " ".join(str(query).lower().split())


def match_known_person(query: Optional[str]) -> Optional[str]:
    """Return the canonical key of a known person whose name parts all occur in ``query``."""
    normalized = normalize_query(query)
    for key in _KNOWN_PEOPLE:
        if all(part in normalized for part in key.split()):
            return key
    return None


def known_profile(query: Optional[str]) -> Optional[ProfileRecord]:
    key = match_known_person(query)
    if key is None:
        return None
    return ProfileRecord.model_validate(_KNOWN_PEOPLE[key])


def known_social_profiles(query: Optional[str]) -> List[SocialProfile]:
    key = match_known_person(query)
    if key is None:
        return []
    return [SocialProfile.model_validate(item) for item in _SOCIAL[key]]


def known_articles(name: Optional[str]) -> List[Article]:
    # News is keyed on the full resolved name, not on loose name parts
    normalized = normalize_query(name)
    for key, items in _NEWS.items():
        if key in normalized:
            return [Article.model_validate(item) for item in items]
    return []


def get_mock_profile(query: str) -> ProfileRecord:
    """Deterministic static profile used when lookups fail or find nothing.

    Known people are matched on the normalized query. Anyone else gets a
    placeholder named after the trimmed query with empty collections.
    """
    record = known_profile(query)
    if record is not None:
        return record
    display = (query or "").strip()
    return ProfileRecord(
        name=display,
        image=_UNKNOWN_IMAGE,
        current_position="Unknown",
        location="Unknown",
        description="No detailed information available for this person.",
        biography=f"No detailed biography available for {display}.",
        recent_activities=[],
        social_links=[],
        blog_posts=[],
        timeline=[],
        education=[],
        career=[],
        photos=[],
        popular_content=[],
        projects=[],
        possible_matches=[],
    )
