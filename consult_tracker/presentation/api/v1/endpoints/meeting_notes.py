"""Meeting note endpoints — upload plain-text minutes and remove them."""

from fastapi import APIRouter, Depends, status

from consult_tracker.application.schemas import MeetingNoteCreate, MeetingNoteResponse
from consult_tracker.application.services import TrackerService
from consult_tracker.infrastructure.dependencies import get_tracker_service
from consult_tracker.presentation.api.v1.errors import TRACKER_ERRORS, http_error

router = APIRouter(prefix="/meeting-notes", tags=["Meeting Notes"])


@router.get("", response_model=list[MeetingNoteResponse])
async def list_meeting_notes(
    service: TrackerService = Depends(get_tracker_service),
) -> list[MeetingNoteResponse]:
    try:
        data = await service.get_data()
    except TRACKER_ERRORS as e:
        raise http_error(e) from e
    return [MeetingNoteResponse.model_validate(n, from_attributes=True) for n in data.meeting_notes]


@router.post("", response_model=MeetingNoteResponse, status_code=status.HTTP_201_CREATED)
async def create_meeting_note(
    data: MeetingNoteCreate,
    service: TrackerService = Depends(get_tracker_service),
) -> MeetingNoteResponse:
    """Store a meeting note. Content above the configured size limit is rejected."""
    try:
        note = await service.add_meeting_note(data)
    except TRACKER_ERRORS as e:
        raise http_error(e) from e
    return MeetingNoteResponse.model_validate(note, from_attributes=True)


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_meeting_note(
    note_id: str,
    service: TrackerService = Depends(get_tracker_service),
) -> None:
    try:
        await service.delete_meeting_note(note_id)
    except TRACKER_ERRORS as e:
        raise http_error(e) from e
