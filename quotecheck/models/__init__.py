"""Models package.

Note: keep these models as the source-of-truth schemas for OpenAPI + frontend types.
"""

from .project import (
    ArticleLength,
    CreateProjectRequest,
    CreateVersionRequest,
    KeyPoint,
    Project,
    ProjectSummary,
    ProjectVersion,
    Source,
    SourceType,
    StoryDirection,
    Tone,
    UpdateProjectRequest,
    MAX_VERSIONS,
)
from .quotes import (
    AlignmentResult,
    CandidateSource,
    CandidateSourceInput,
    ContextPrecision,
    ExtractQuotesRequest,
    ExtractedQuote,
    VerificationResult,
    VerificationSummary,
    VerifyQuotesRequest,
    VerifyQuotesResponse,
    check_source_ids,
    TRANSCRIPT_SOURCE_ID,
    TRANSCRIPT_SOURCE_NAME,
)

__all__ = [
    # Project
    "ArticleLength",
    "CreateProjectRequest",
    "CreateVersionRequest",
    "KeyPoint",
    "Project",
    "ProjectSummary",
    "ProjectVersion",
    "Source",
    "SourceType",
    "StoryDirection",
    "Tone",
    "UpdateProjectRequest",
    "MAX_VERSIONS",
    # Quote verification
    "AlignmentResult",
    "CandidateSource",
    "CandidateSourceInput",
    "ContextPrecision",
    "ExtractQuotesRequest",
    "ExtractedQuote",
    "VerificationResult",
    "VerificationSummary",
    "VerifyQuotesRequest",
    "VerifyQuotesResponse",
    "check_source_ids",
    "TRANSCRIPT_SOURCE_ID",
    "TRANSCRIPT_SOURCE_NAME",
]
