"""Project service for business logic."""

import logging
from datetime import UTC, datetime
from uuid import uuid4

from bson import ObjectId
from bson.errors import InvalidId

from quotecheck.api.exceptions import ProjectNotFoundError
from quotecheck.db.mongo import get_database
from quotecheck.models import (
    CandidateSource,
    CreateProjectRequest,
    Project,
    ProjectSummary,
    Source,
    StoryDirection,
    UpdateProjectRequest,
    VerificationResult,
    MAX_VERSIONS,
)
from quotecheck.services import quote_verification

logger = logging.getLogger(__name__)

COLLECTION_NAME = "projects"


def _to_object_id(project_id: str) -> ObjectId:
    try:
        return ObjectId(project_id)
    except (InvalidId, TypeError):
        raise ProjectNotFoundError(project_id) from None


def _to_project_summary(doc: dict) -> ProjectSummary:
    """Convert MongoDB document to ProjectSummary model."""
    return ProjectSummary(
        id=str(doc["_id"]),
        title=doc["title"],
        updatedAt=doc["updatedAt"],
    )


def _to_project(doc: dict) -> Project:
    """Convert MongoDB document to Project model."""
    return Project(
        id=str(doc["_id"]),
        title=doc["title"],
        createdAt=doc["createdAt"],
        updatedAt=doc["updatedAt"],
        transcript=doc.get("transcript", ""),
        sources=doc.get("sources", []),
        keyPoints=doc.get("keyPoints", []),
        direction=doc.get("direction") or StoryDirection(),
        draftText=doc.get("draftText", ""),
        quoteMatches=doc.get("quoteMatches", []),
        versions=doc.get("versions", []),
    )


def to_candidate_sources(sources: list[Source]) -> list[CandidateSource]:
    """Map project sources onto verification candidates, preserving order."""
    return [
        CandidateSource(id=s.id, display_name=s.name, content=s.content)
        for s in sources
    ]


async def _find_project_doc(project_id: str) -> dict:
    db = await get_database()
    doc = await db[COLLECTION_NAME].find_one({"_id": _to_object_id(project_id)})
    if doc is None:
        raise ProjectNotFoundError(project_id)
    return doc


async def list_projects() -> list[ProjectSummary]:
    """List all projects, sorted by updatedAt descending."""
    db = await get_database()
    collection = db[COLLECTION_NAME]

    cursor = collection.find().sort("updatedAt", -1)
    docs = await cursor.to_list(length=None)

    return [_to_project_summary(doc) for doc in docs]


async def create_project(request: CreateProjectRequest) -> Project:
    """Create a new, empty project in the database."""
    db = await get_database()
    collection = db[COLLECTION_NAME]

    now = datetime.now(UTC)
    doc = {
        "title": request.title,
        "createdAt": now,
        "updatedAt": now,
        "transcript": "",
        "sources": [],
        "keyPoints": [],
        "direction": StoryDirection().model_dump(mode="json"),
        "draftText": "",
        "quoteMatches": [],
        "versions": [],
    }

    result = await collection.insert_one(doc)
    doc["_id"] = result.inserted_id

    logger.info(f"Created project {doc['_id']}")
    return _to_project(doc)


async def get_project(project_id: str) -> Project:
    """Get a project by ID."""
    doc = await _find_project_doc(project_id)
    return _to_project(doc)


async def update_project(project_id: str, request: UpdateProjectRequest) -> Project:
    """Update a project's editable content.

    Quote matches and versions are owned by their own operations and are
    left untouched.
    """
    db = await get_database()
    collection = db[COLLECTION_NAME]

    existing = await _find_project_doc(project_id)

    update_doc = {
        "title": request.title,
        "updatedAt": datetime.now(UTC),
        "transcript": request.transcript,
        "sources": [s.model_dump(mode="json") for s in request.sources],
        "keyPoints": [kp.model_dump(mode="json") for kp in request.keyPoints],
        "direction": request.direction.model_dump(mode="json"),
        "draftText": request.draftText,
    }

    await collection.update_one({"_id": existing["_id"]}, {"$set": update_doc})

    updated_doc = await collection.find_one({"_id": existing["_id"]})
    return _to_project(updated_doc)


async def delete_project(project_id: str) -> bool:
    """Delete a project by ID."""
    db = await get_database()
    existing = await _find_project_doc(project_id)

    await db[COLLECTION_NAME].delete_one({"_id": existing["_id"]})
    logger.info(f"Deleted project {project_id}")
    return True


async def check_project_quotes(project_id: str) -> list[VerificationResult]:
    """Verify the quotes of a stored draft and save the results on the project.

    The draft is checked against the project transcript first and then its
    sources in stored order.
    """
    db = await get_database()
    project = _to_project(await _find_project_doc(project_id))

    results = quote_verification.verify(
        project.draftText,
        project.transcript,
        to_candidate_sources(project.sources),
    )

    await db[COLLECTION_NAME].update_one(
        {"_id": ObjectId(project.id)},
        {
            "$set": {
                "quoteMatches": [r.model_dump(mode="json") for r in results],
                "updatedAt": datetime.now(UTC),
            }
        },
    )
    return results


async def create_version(project_id: str, label: str) -> Project:
    """Snapshot the current draft, key points and direction.

    Versions are kept newest first; only the latest MAX_VERSIONS survive.
    """
    db = await get_database()
    collection = db[COLLECTION_NAME]

    project = _to_project(await _find_project_doc(project_id))
    now = datetime.now(UTC)

    version = {
        "id": str(uuid4()),
        "label": label,
        "createdAt": now,
        "draftText": project.draftText,
        "keyPoints": [kp.model_dump(mode="json") for kp in project.keyPoints],
        "direction": project.direction.model_dump(mode="json"),
    }
    versions = [version] + [
        {**v.model_dump(mode="json"), "createdAt": v.createdAt}
        for v in project.versions
    ]

    await collection.update_one(
        {"_id": ObjectId(project.id)},
        {"$set": {"versions": versions[:MAX_VERSIONS], "updatedAt": now}},
    )

    updated_doc = await collection.find_one({"_id": ObjectId(project.id)})
    return _to_project(updated_doc)
