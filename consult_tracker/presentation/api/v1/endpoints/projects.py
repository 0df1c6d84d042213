"""Project CRUD endpoints, including pipeline status changes."""

from fastapi import APIRouter, Depends, status

from consult_tracker.application.schemas import (
    ActivityResponse,
    MeetingNoteResponse,
    ProjectCreate,
    ProjectResponse,
    ProjectStatusUpdate,
    ProjectUpdate,
)
from consult_tracker.application.services import TrackerService
from consult_tracker.infrastructure.dependencies import get_tracker_service
from consult_tracker.presentation.api.v1.errors import TRACKER_ERRORS, http_error

router = APIRouter(prefix="/projects", tags=["Projects"])


@router.get("", response_model=list[ProjectResponse])
async def list_projects(
    service: TrackerService = Depends(get_tracker_service),
) -> list[ProjectResponse]:
    try:
        data = await service.get_data()
    except TRACKER_ERRORS as e:
        raise http_error(e) from e
    return [ProjectResponse.model_validate(p, from_attributes=True) for p in data.projects]


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: str,
    service: TrackerService = Depends(get_tracker_service),
) -> ProjectResponse:
    try:
        project = await service.get_project(project_id)
    except TRACKER_ERRORS as e:
        raise http_error(e) from e
    return ProjectResponse.model_validate(project, from_attributes=True)


@router.get("/{project_id}/activities", response_model=list[ActivityResponse])
async def list_project_activities(
    project_id: str,
    service: TrackerService = Depends(get_tracker_service),
) -> list[ActivityResponse]:
    """Activities logged for a project, newest first."""
    try:
        activities = await service.activities_for_project(project_id)
    except TRACKER_ERRORS as e:
        raise http_error(e) from e
    return [ActivityResponse.model_validate(a, from_attributes=True) for a in activities]


@router.get("/{project_id}/meeting-notes", response_model=list[MeetingNoteResponse])
async def list_project_meeting_notes(
    project_id: str,
    service: TrackerService = Depends(get_tracker_service),
) -> list[MeetingNoteResponse]:
    try:
        notes = await service.meeting_notes_for_project(project_id)
    except TRACKER_ERRORS as e:
        raise http_error(e) from e
    return [MeetingNoteResponse.model_validate(n, from_attributes=True) for n in notes]


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(
    data: ProjectCreate,
    service: TrackerService = Depends(get_tracker_service),
) -> ProjectResponse:
    try:
        project = await service.add_project(data)
    except TRACKER_ERRORS as e:
        raise http_error(e) from e
    return ProjectResponse.model_validate(project, from_attributes=True)


@router.put("/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_id: str,
    data: ProjectUpdate,
    service: TrackerService = Depends(get_tracker_service),
) -> ProjectResponse:
    try:
        project = await service.update_project(project_id, data)
    except TRACKER_ERRORS as e:
        raise http_error(e) from e
    return ProjectResponse.model_validate(project, from_attributes=True)


@router.patch("/{project_id}/status", response_model=ProjectResponse)
async def update_project_status(
    project_id: str,
    data: ProjectStatusUpdate,
    service: TrackerService = Depends(get_tracker_service),
) -> ProjectResponse:
    """Move a project to another pipeline stage."""
    try:
        project = await service.update_project_status(project_id, data.status)
    except TRACKER_ERRORS as e:
        raise http_error(e) from e
    return ProjectResponse.model_validate(project, from_attributes=True)


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: str,
    service: TrackerService = Depends(get_tracker_service),
) -> None:
    try:
        await service.delete_project(project_id)
    except TRACKER_ERRORS as e:
        raise http_error(e) from e
