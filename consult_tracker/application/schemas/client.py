"""Pydantic DTOs (Data Transfer Objects) for the Client feature."""

from pydantic import BaseModel, Field


class ClientCreate(BaseModel):
    """Schema for registering a new client."""

    company_name: str = Field(..., min_length=1, max_length=200, examples=["Acme Corp."])
    contact_person: str = Field("", max_length=100)
    email: str = Field("", max_length=254)
    phone: str = Field("", max_length=50)
    address: str = Field("", max_length=300)
    notes: str = ""


class ClientUpdate(ClientCreate):
    """Schema for updating a client — the full record replaces the stored one."""


class ClientResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    company_name: str
    contact_person: str
    email: str
    phone: str
    address: str
    notes: str
    created_at: str
    updated_at: str

    model_config = {"from_attributes": True}
