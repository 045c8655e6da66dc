from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


_DOC_CONFIG = ConfigDict(extra="ignore", populate_by_name=True)


class SocialProfile(BaseModel):
    platform: str
    username: str | None = None
    url: str | None = None
    followers: int | None = None

    model_config = _DOC_CONFIG


class Article(BaseModel):
    title: str
    url: str | None = None
    source: str | None = None
    date: str | None = None

    model_config = _DOC_CONFIG


class Activity(BaseModel):
    type: str | None = None
    name: str | None = None
    date: str | None = None
    description: str | None = None
    image_url: str | None = Field(default=None, alias="imageUrl")

    model_config = _DOC_CONFIG


class BlogPost(BaseModel):
    title: str
    date: str | None = None
    url: str | None = None

    model_config = _DOC_CONFIG


class TimelineEvent(BaseModel):
    date: str | None = None
    title: str
    description: str | None = None
    category: str | None = None

    model_config = _DOC_CONFIG


class Education(BaseModel):
    institution: str
    degree: str | None = None
    field: str | None = None
    start_year: int | None = Field(default=None, alias="startYear")
    end_year: int | None = Field(default=None, alias="endYear")
    description: str | None = None
    achievements: list[str] | None = None

    model_config = _DOC_CONFIG


class CareerEntry(BaseModel):
    company: str
    title: str | None = None
    location: str | None = None
    start_year: int | None = Field(default=None, alias="startYear")
    end_year: int | None = Field(default=None, alias="endYear")
    description: str | None = None
    achievements: list[str] | None = None

    model_config = _DOC_CONFIG


class Photo(BaseModel):
    url: str
    caption: str | None = None
    year: int | None = None

    model_config = _DOC_CONFIG


class Video(BaseModel):
    title: str
    url: str | None = None
    platform: str | None = None
    date: str | None = None

    model_config = _DOC_CONFIG


class PopularContentItem(BaseModel):
    type: str | None = None
    platform: str | None = None
    title: str
    date: str | None = None
    url: str | None = None
    thumbnail_url: str | None = Field(default=None, alias="thumbnailUrl")
    views: int | None = None
    likes: int | None = None
    comments: int | None = None

    model_config = _DOC_CONFIG


class Project(BaseModel):
    name: str
    description: str | None = None
    role: str | None = None
    url: str | None = None
    github_url: str | None = Field(default=None, alias="githubUrl")
    technologies: list[str] | None = None
    team_size: int | None = Field(default=None, alias="teamSize")

    model_config = _DOC_CONFIG


class PossibleMatch(BaseModel):
    """Ambiguous-identity candidate surfaced for manual verification."""

    platform: str
    username: str | None = None
    url: str | None = None
    confidence_score: float = Field(default=0.0, alias="confidenceScore")
    match_reason: str | None = Field(default=None, alias="matchReason")

    model_config = _DOC_CONFIG


class ProfileRecord(BaseModel):
    """Aggregated person data returned by a search and stored as a document.

    Only ``name`` is mandatory. Collections are ``None`` when a source had
    nothing to contribute and an empty list when a source explicitly reported
    nothing (the static fallback for unknown people).
    """

    name: str
    image: str | None = None
    current_position: str | None = Field(default=None, alias="currentPosition")
    location: str | None = None
    description: str | None = None
    biography: str | None = None

    social_links: list[SocialProfile] | None = Field(default=None, alias="socialLinks")
    social_profiles: list[SocialProfile] | None = Field(default=None, alias="socialProfiles")
    articles: list[Article] | None = None
    recent_activities: list[Activity] | None = Field(default=None, alias="recentActivities")
    blog_posts: list[BlogPost] | None = Field(default=None, alias="blogPosts")
    timeline: list[TimelineEvent] | None = None
    education: list[Education] | None = None
    career: list[CareerEntry] | None = None
    photos: list[Photo] | None = None
    videos: list[Video] | None = None
    popular_content: list[PopularContentItem] | None = Field(default=None, alias="popularContent")
    projects: list[Project] | None = None
    possible_matches: list[PossibleMatch] | None = Field(default=None, alias="possibleMatches")

    model_config = _DOC_CONFIG

    def to_document(self) -> dict:
        """Document shape used for storage and JSON output (camelCase, no nulls)."""
        return self.model_dump(by_alias=True, exclude_none=True)
