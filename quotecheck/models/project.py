"""Pydantic models for Project and related entities."""

from datetime import datetime
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, Field, model_validator

from .quotes import VerificationResult, check_source_ids

MAX_VERSIONS = 10


class SourceType(str, Enum):
    """Origin of a supplementary source document."""

    PDF = "pdf"
    URL = "url"


class Tone(str, Enum):
    """Tone of the article draft."""

    NEUTRAL = "neutral"
    STORYTELLING = "storytelling"
    PRESS_RELEASE = "press-release"


class ArticleLength(str, Enum):
    """Target length of the article draft."""

    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


class Source(BaseModel):
    """A supplementary document attached to a project (text already extracted)."""

    id: Annotated[str, Field(min_length=1)]
    type: SourceType
    name: Annotated[str, Field(min_length=1)]
    content: str = ""
    url: str | None = None


class KeyPoint(BaseModel):
    """A key point pulled from the transcript."""

    id: str
    text: Annotated[str, Field(min_length=1)]
    order: Annotated[int, Field(ge=0)]
    source: str | None = None


class StoryDirection(BaseModel):
    """Editorial direction for the draft."""

    tone: Tone = Tone.NEUTRAL
    length: ArticleLength = ArticleLength.MEDIUM
    angle: str = ""


class ProjectVersion(BaseModel):
    """A saved snapshot of a project's draft."""

    id: str
    label: str
    createdAt: datetime
    draftText: str = ""
    keyPoints: list[KeyPoint] = []
    direction: StoryDirection = StoryDirection()


# Request schemas
class CreateProjectRequest(BaseModel):
    """Request body for creating a new project."""

    title: Annotated[str, Field(min_length=1)] = "Untitled Project"


class UpdateProjectRequest(BaseModel):
    """Request body for updating a project."""

    title: Annotated[str, Field(min_length=1)]
    transcript: str = ""
    sources: list[Source] = []
    keyPoints: list[KeyPoint] = []
    direction: StoryDirection = StoryDirection()
    draftText: str = ""

    @model_validator(mode="after")
    def validate_source_ids(self) -> "UpdateProjectRequest":
        """Ensure source IDs are unique and do not shadow the transcript."""
        check_source_ids([s.id for s in self.sources])
        return self


class CreateVersionRequest(BaseModel):
    """Request body for saving a project version."""

    label: Annotated[str, Field(min_length=1)]


# Response schemas
class ProjectSummary(BaseModel):
    """Summary of a project for list view."""

    id: str
    title: str
    updatedAt: datetime


class Project(BaseModel):
    """Full project representation."""

    id: str
    title: str
    createdAt: datetime
    updatedAt: datetime
    transcript: str = ""
    sources: list[Source] = []
    keyPoints: list[KeyPoint] = []
    direction: StoryDirection = StoryDirection()
    draftText: str = ""
    quoteMatches: list[VerificationResult] = []
    versions: list[ProjectVersion] = []
