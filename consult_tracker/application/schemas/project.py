"""Pydantic DTOs for the Project feature."""

from pydantic import BaseModel, Field

from consult_tracker.domain.entities import ProjectStatus


class ProjectCreate(BaseModel):
    """Schema for creating a new project."""

    client_id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    status: ProjectStatus = ProjectStatus.PROSPECT
    amount: int = Field(0, ge=0, description="Whole currency units")
    start_date: str = Field("", examples=["2026-03-01"])
    end_date: str = Field("", examples=["2026-08-31"])


class ProjectUpdate(ProjectCreate):
    """Schema for updating a project — the full record replaces the stored one."""


class ProjectStatusUpdate(BaseModel):
    """Payload for moving a project to another pipeline stage."""

    status: ProjectStatus


class ProjectResponse(BaseModel):
    id: str
    client_id: str
    title: str
    description: str
    status: ProjectStatus
    amount: int
    start_date: str
    end_date: str
    created_at: str
    updated_at: str

    model_config = {"from_attributes": True}
