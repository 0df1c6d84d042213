"""Pydantic DTOs for the GitHub repository settings."""

from pydantic import BaseModel, Field


class RemoteConfigUpdate(BaseModel):
    """Payload for saving the repository settings."""

    token: str = Field(..., min_length=1)
    owner: str = Field(..., min_length=1, examples=["my-org"])
    repo: str = Field(..., min_length=1, examples=["consult-data"])
    branch: str = Field("main", min_length=1)


class RemoteConfigResponse(BaseModel):
    """Current settings. The token itself is never returned."""

    owner: str
    repo: str
    branch: str
    token_set: bool
    configured: bool


class ConnectionTestResponse(BaseModel):
    ok: bool
    detail: str
