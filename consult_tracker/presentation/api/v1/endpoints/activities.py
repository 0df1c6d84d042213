"""Activity log endpoints. Entries are immutable: create and delete only."""

from fastapi import APIRouter, Depends, status

from consult_tracker.application.schemas import ActivityCreate, ActivityResponse
from consult_tracker.application.services import TrackerService
from consult_tracker.infrastructure.dependencies import get_tracker_service
from consult_tracker.presentation.api.v1.errors import TRACKER_ERRORS, http_error

router = APIRouter(prefix="/activities", tags=["Activities"])


@router.get("", response_model=list[ActivityResponse])
async def list_activities(
    service: TrackerService = Depends(get_tracker_service),
) -> list[ActivityResponse]:
    try:
        data = await service.get_data()
    except TRACKER_ERRORS as e:
        raise http_error(e) from e
    return [ActivityResponse.model_validate(a, from_attributes=True) for a in data.activities]


@router.post("", response_model=ActivityResponse, status_code=status.HTTP_201_CREATED)
async def create_activity(
    data: ActivityCreate,
    service: TrackerService = Depends(get_tracker_service),
) -> ActivityResponse:
    try:
        activity = await service.add_activity(data)
    except TRACKER_ERRORS as e:
        raise http_error(e) from e
    return ActivityResponse.model_validate(activity, from_attributes=True)


@router.delete("/{activity_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_activity(
    activity_id: str,
    service: TrackerService = Depends(get_tracker_service),
) -> None:
    try:
        await service.delete_activity(activity_id)
    except TRACKER_ERRORS as e:
        raise http_error(e) from e
