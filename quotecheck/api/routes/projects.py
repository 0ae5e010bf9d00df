"""Project CRUD, quote checking, versioning and export endpoints."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, Response
from pydantic import ValidationError as PydanticValidationError

from quotecheck.api.exceptions import ValidationError
from quotecheck.api.response import success_response
from quotecheck.models import (
    CreateProjectRequest,
    CreateVersionRequest,
    UpdateProjectRequest,
    VerifyQuotesResponse,
)
from quotecheck.services import export_service, project_service, summarize

router = APIRouter(prefix="/projects", tags=["Projects"])


@router.get("")
async def list_projects() -> JSONResponse:
    """List all projects."""
    projects = await project_service.list_projects()
    return JSONResponse(
        content=success_response([p.model_dump(mode="json") for p in projects])
    )


@router.get("/{project_id}")
async def get_project(project_id: str) -> JSONResponse:
    """Get a project by ID."""
    project = await project_service.get_project(project_id)
    return JSONResponse(
        content=success_response(project.model_dump(mode="json"))
    )


@router.post("", status_code=201)
async def create_project(request: Request) -> JSONResponse:
    """Create a new project."""
    try:
        body = await request.json()
        create_request = CreateProjectRequest.model_validate(body)
    except (PydanticValidationError, ValueError) as e:
        raise ValidationError(str(e)) from None

    project = await project_service.create_project(create_request)
    return JSONResponse(
        status_code=201,
        content=success_response(project.model_dump(mode="json")),
    )


@router.put("/{project_id}")
async def update_project(project_id: str, request: Request) -> JSONResponse:
    """Update a project by ID."""
    try:
        body = await request.json()
        update_request = UpdateProjectRequest.model_validate(body)
    except (PydanticValidationError, ValueError) as e:
        raise ValidationError(str(e)) from None

    project = await project_service.update_project(project_id, update_request)
    return JSONResponse(
        content=success_response(project.model_dump(mode="json")),
    )


@router.delete("/{project_id}")
async def delete_project(project_id: str) -> JSONResponse:
    """Delete a project by ID."""
    await project_service.delete_project(project_id)
    return JSONResponse(
        content=success_response({"deleted": True}),
    )


@router.post("/{project_id}/quotes/check")
async def check_quotes(project_id: str) -> JSONResponse:
    """Verify the stored draft's quotes and save the results on the project."""
    results = await project_service.check_project_quotes(project_id)
    response = VerifyQuotesResponse(results=results, summary=summarize(results))
    return JSONResponse(
        content=success_response(response.model_dump(mode="json")),
    )


@router.post("/{project_id}/versions", status_code=201)
async def create_version(project_id: str, request: Request) -> JSONResponse:
    """Save a labelled snapshot of the current draft."""
    try:
        body = await request.json()
        version_request = CreateVersionRequest.model_validate(body)
    except (PydanticValidationError, ValueError) as e:
        raise ValidationError(str(e)) from None

    project = await project_service.create_version(project_id, version_request.label)
    return JSONResponse(
        status_code=201,
        content=success_response(project.model_dump(mode="json")),
    )


@router.get("/{project_id}/export/markdown")
async def export_markdown(project_id: str) -> Response:
    """Download the draft as markdown."""
    project = await project_service.get_project(project_id)
    markdown = export_service.build_markdown(project)
    return Response(
        content=markdown,
        media_type="text/markdown",
        headers={"Content-Disposition": 'attachment; filename="article-draft.md"'},
    )


@router.get("/{project_id}/export/json")
async def export_json(project_id: str) -> JSONResponse:
    """Download the provenance report."""
    project = await project_service.get_project(project_id)
    report = export_service.build_json_report(project)
    return JSONResponse(
        content=success_response(report),
        headers={"Content-Disposition": 'attachment; filename="article-data.json"'},
    )
