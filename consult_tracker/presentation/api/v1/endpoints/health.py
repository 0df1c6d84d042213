"""Health check endpoint — always available, even before GitHub is configured."""

from fastapi import APIRouter, Depends

from consult_tracker.application.services import SettingsService
from consult_tracker.config import get_settings
from consult_tracker.infrastructure.dependencies import get_settings_service

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(service: SettingsService = Depends(get_settings_service)) -> dict:
    """Report app status and whether a data repository is set up. Makes no remote call."""
    settings = get_settings()
    config = service.get_config()
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "remote_configured": config is not None and config.is_complete,
    }
