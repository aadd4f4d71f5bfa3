import logging
from enum import Enum
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

TWITTER_MAX_CHARS = 280
ELLIPSIS = "..."


class ArtifactKind(str, Enum):
    SUMMARY = "summary"
    SOCIAL_POSTS = "social_posts"
    TITLES = "titles"
    YOUTUBE_TIMESTAMPS = "youtube_timestamps"


PhaseStatus = Literal["pending", "running", "completed", "failed"]


class Chapter(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    start: int = Field(..., ge=0)
    headline: str
    summary: str = ""
    gist: str = ""


class Transcript(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    text: str = ""
    chapters: List[Chapter] = Field(default_factory=list)
    entities: Optional[List[str]] = None
    topics: Optional[List[str]] = None


class Summary(BaseModel):
    model_config = ConfigDict(extra="ignore")

    full: str = Field(..., min_length=1)
    bullets: List[str] = Field(..., min_length=1)
    insights: List[str] = Field(..., min_length=1)
    tldr: str = Field(..., min_length=1)


class SocialPosts(BaseModel):
    model_config = ConfigDict(extra="ignore")

    twitter: str = Field(..., min_length=1)
    linkedin: str = Field(..., min_length=1)
    instagram: str = Field(..., min_length=1)
    tiktok: str = Field(..., min_length=1)
    youtube: str = Field(..., min_length=1)
    facebook: str = Field(..., min_length=1)

    @field_validator("twitter")
    @classmethod
    def cap_twitter(cls, value: str) -> str:
        if len(value) <= TWITTER_MAX_CHARS:
            return value
        logger.warning("Twitter post exceeded %d chars (%d), truncating", TWITTER_MAX_CHARS, len(value))
        return value[: TWITTER_MAX_CHARS - len(ELLIPSIS)] + ELLIPSIS


class Titles(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    youtube_short: List[str] = Field(..., alias="youtubeShort", min_length=3, max_length=3)
    youtube_long: List[str] = Field(..., alias="youtubeLong", min_length=3, max_length=3)
    podcast_titles: List[str] = Field(..., alias="podcastTitles", min_length=3, max_length=3)
    seo_keywords: List[str] = Field(..., alias="seoKeywords", min_length=5, max_length=10)


class ChapterTitle(BaseModel):
    model_config = ConfigDict(extra="ignore")

    index: int
    title: str


class ChapterTitles(BaseModel):
    model_config = ConfigDict(extra="ignore")

    titles: List[Any]


class YouTubeTimestamp(BaseModel):
    model_config = ConfigDict(extra="forbid")

    timestamp: str = Field(..., pattern=r"^(\d+:[0-5]\d:[0-5]\d|\d+:[0-5]\d)$")
    description: str


class ContentPackage(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    summary: Optional[Summary] = None
    social_posts: Optional[SocialPosts] = Field(default=None, alias="socialPosts")
    titles: Optional[Titles] = None
    youtube_timestamps: Optional[List[YouTubeTimestamp]] = Field(default=None, alias="youtubeTimestamps")
    fallbacks: List[ArtifactKind] = Field(default_factory=list)
