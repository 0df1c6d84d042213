"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from consult_tracker.presentation.api.v1.endpoints.health import router as health_router
from consult_tracker.presentation.api.v1.endpoints.data import router as data_router
from consult_tracker.presentation.api.v1.endpoints.clients import router as clients_router
from consult_tracker.presentation.api.v1.endpoints.projects import router as projects_router
from consult_tracker.presentation.api.v1.endpoints.activities import router as activities_router
from consult_tracker.presentation.api.v1.endpoints.meeting_notes import router as meeting_notes_router
from consult_tracker.presentation.api.v1.settings_controller import router as settings_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(data_router)
router.include_router(clients_router)
router.include_router(projects_router)
router.include_router(activities_router)
router.include_router(meeting_notes_router)
router.include_router(settings_router)
