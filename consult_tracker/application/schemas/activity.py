"""Pydantic DTOs for the activity log."""

from pydantic import BaseModel, Field

from consult_tracker.domain.entities import ActivityType


class ActivityCreate(BaseModel):
    """Schema for logging an activity. Activities cannot be edited afterwards."""

    project_id: str = Field(..., min_length=1)
    client_id: str = Field(..., min_length=1)
    type: ActivityType = ActivityType.OTHER
    title: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    date: str = Field(..., examples=["2026-02-10"])


class ActivityResponse(BaseModel):
    id: str
    project_id: str
    client_id: str
    type: ActivityType
    title: str
    description: str
    date: str
    created_at: str

    model_config = {"from_attributes": True}
