"""Aggregate snapshot endpoints — load, reload, seed and dashboard."""

from fastapi import APIRouter, Depends

from consult_tracker.application.schemas import (
    AppDataResponse,
    DashboardSummaryResponse,
    LabelsResponse,
)
from consult_tracker.application.services import TrackerService
from consult_tracker.domain.entities import ACTIVITY_TYPE_LABELS, PROJECT_STATUS_LABELS
from consult_tracker.infrastructure.dependencies import get_tracker_service
from consult_tracker.presentation.api.v1.errors import TRACKER_ERRORS, http_error

router = APIRouter(prefix="/data", tags=["Data"])


@router.get("", response_model=AppDataResponse)
async def get_data(
    service: TrackerService = Depends(get_tracker_service),
) -> AppDataResponse:
    """Return all collections, loading them from GitHub on first use."""
    try:
        data = await service.get_data()
    except TRACKER_ERRORS as e:
        raise http_error(e) from e
    return AppDataResponse.model_validate(data, from_attributes=True)


@router.post("/refresh", response_model=AppDataResponse)
async def refresh_data(
    service: TrackerService = Depends(get_tracker_service),
) -> AppDataResponse:
    """Reload all collections — the way to recover after a conflict."""
    try:
        data = await service.refresh()
    except TRACKER_ERRORS as e:
        raise http_error(e) from e
    return AppDataResponse.model_validate(data, from_attributes=True)


@router.post("/seed", response_model=AppDataResponse)
async def seed_data(
    service: TrackerService = Depends(get_tracker_service),
) -> AppDataResponse:
    """Overwrite the repository with the sample dataset and reload it."""
    try:
        data = await service.init_seed_data()
    except TRACKER_ERRORS as e:
        raise http_error(e) from e
    return AppDataResponse.model_validate(data, from_attributes=True)


@router.get("/dashboard", response_model=DashboardSummaryResponse)
async def get_dashboard(
    service: TrackerService = Depends(get_tracker_service),
) -> DashboardSummaryResponse:
    try:
        summary = await service.dashboard_summary()
    except TRACKER_ERRORS as e:
        raise http_error(e) from e
    return DashboardSummaryResponse.model_validate(summary, from_attributes=True)


@router.get("/labels", response_model=LabelsResponse)
async def get_labels() -> LabelsResponse:
    """Display labels for project statuses and activity types."""
    return LabelsResponse(
        project_statuses={s.value: label for s, label in PROJECT_STATUS_LABELS.items()},
        activity_types={t.value: label for t, label in ACTIVITY_TYPE_LABELS.items()},
    )
