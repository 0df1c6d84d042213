"""Pydantic DTOs for meeting notes."""

from pydantic import BaseModel, Field


class MeetingNoteCreate(BaseModel):
    """Schema for uploading a plain-text meeting note."""

    project_id: str = Field(..., min_length=1)
    client_id: str = Field(..., min_length=1)
    activity_id: str | None = None
    file_name: str = Field(..., min_length=1, max_length=255, examples=["minutes.txt"])
    content: str


class MeetingNoteResponse(BaseModel):
    id: str
    project_id: str
    client_id: str
    activity_id: str | None
    file_name: str
    content: str
    uploaded_at: str

    model_config = {"from_attributes": True}
