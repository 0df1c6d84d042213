"""Client CRUD endpoints."""

from fastapi import APIRouter, Depends, status

from consult_tracker.application.schemas import (
    ClientCreate,
    ClientResponse,
    ClientUpdate,
    ProjectResponse,
)
from consult_tracker.application.services import TrackerService
from consult_tracker.infrastructure.dependencies import get_tracker_service
from consult_tracker.presentation.api.v1.errors import TRACKER_ERRORS, http_error

router = APIRouter(prefix="/clients", tags=["Clients"])


@router.get("", response_model=list[ClientResponse])
async def list_clients(
    service: TrackerService = Depends(get_tracker_service),
) -> list[ClientResponse]:
    """List all clients in the session snapshot."""
    try:
        data = await service.get_data()
    except TRACKER_ERRORS as e:
        raise http_error(e) from e
    return [ClientResponse.model_validate(c, from_attributes=True) for c in data.clients]


@router.get("/{client_id}", response_model=ClientResponse)
async def get_client(
    client_id: str,
    service: TrackerService = Depends(get_tracker_service),
) -> ClientResponse:
    try:
        client = await service.get_client(client_id)
    except TRACKER_ERRORS as e:
        raise http_error(e) from e
    return ClientResponse.model_validate(client, from_attributes=True)


@router.get("/{client_id}/projects", response_model=list[ProjectResponse])
async def list_client_projects(
    client_id: str,
    service: TrackerService = Depends(get_tracker_service),
) -> list[ProjectResponse]:
    """List the projects that reference this client."""
    try:
        await service.get_client(client_id)
        projects = await service.projects_for_client(client_id)
    except TRACKER_ERRORS as e:
        raise http_error(e) from e
    return [ProjectResponse.model_validate(p, from_attributes=True) for p in projects]


@router.post("", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
async def create_client(
    data: ClientCreate,
    service: TrackerService = Depends(get_tracker_service),
) -> ClientResponse:
    """Register a new client and commit the clients collection."""
    try:
        client = await service.add_client(data)
    except TRACKER_ERRORS as e:
        raise http_error(e) from e
    return ClientResponse.model_validate(client, from_attributes=True)


@router.put("/{client_id}", response_model=ClientResponse)
async def update_client(
    client_id: str,
    data: ClientUpdate,
    service: TrackerService = Depends(get_tracker_service),
) -> ClientResponse:
    try:
        client = await service.update_client(client_id, data)
    except TRACKER_ERRORS as e:
        raise http_error(e) from e
    return ClientResponse.model_validate(client, from_attributes=True)


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_client(
    client_id: str,
    service: TrackerService = Depends(get_tracker_service),
) -> None:
    """Delete a client. Projects that reference it are left as they are."""
    try:
        await service.delete_client(client_id)
    except TRACKER_ERRORS as e:
        raise http_error(e) from e
