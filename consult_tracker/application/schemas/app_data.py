"""Pydantic DTOs for the aggregate snapshot and dashboard views."""

from pydantic import BaseModel

from .activity import ActivityResponse
from .client import ClientResponse
from .meeting_note import MeetingNoteResponse
from .project import ProjectResponse


class AppDataResponse(BaseModel):
    """All four collections as currently held by the session."""

    clients: list[ClientResponse]
    projects: list[ProjectResponse]
    activities: list[ActivityResponse]
    meeting_notes: list[MeetingNoteResponse]

    model_config = {"from_attributes": True}


class DashboardSummaryResponse(BaseModel):
    client_count: int
    project_count: int
    status_counts: dict[str, int]
    won_amount: int
    pipeline_amount: int
    recent_activities: list[ActivityResponse]

    model_config = {"from_attributes": True}


class LabelsResponse(BaseModel):
    """Display labels for enum values."""

    project_statuses: dict[str, str]
    activity_types: dict[str, str]
