"""Settings API controller — manage the GitHub repository configuration."""

from fastapi import APIRouter, Depends

from consult_tracker.application.schemas import (
    ConnectionTestResponse,
    RemoteConfigResponse,
    RemoteConfigUpdate,
)
from consult_tracker.application.services import SettingsService
from consult_tracker.domain.entities import RemoteConfig
from consult_tracker.infrastructure.dependencies import get_settings_service

router = APIRouter(prefix="/settings", tags=["settings"])


def _to_response(config: RemoteConfig | None) -> RemoteConfigResponse:
    """Map a RemoteConfig to its API response, hiding the token."""
    if config is None:
        return RemoteConfigResponse(
            owner="", repo="", branch="main", token_set=False, configured=False
        )
    return RemoteConfigResponse(
        owner=config.owner,
        repo=config.repo,
        branch=config.branch,
        token_set=bool(config.token),
        configured=config.is_complete,
    )


@router.get("/github", response_model=RemoteConfigResponse)
async def get_github_settings(
    service: SettingsService = Depends(get_settings_service),
):
    """Return the current repository settings (without the token)."""
    return _to_response(service.get_config())


@router.put("/github", response_model=RemoteConfigResponse)
async def put_github_settings(
    body: RemoteConfigUpdate,
    service: SettingsService = Depends(get_settings_service),
):
    """Save the repository settings to the local settings store."""
    config = service.update_config(
        RemoteConfig(
            token=body.token,
            owner=body.owner,
            repo=body.repo,
            branch=body.branch,
        )
    )
    return _to_response(config)


@router.post("/github/test", response_model=ConnectionTestResponse)
async def test_github_connection(
    service: SettingsService = Depends(get_settings_service),
):
    """Check that the token can reach the configured repository."""
    result = await service.test_connection()
    return ConnectionTestResponse(ok=result.ok, detail=result.detail)
