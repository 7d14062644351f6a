"""User settings API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.dependencies import CurrentClaims, get_settings_service
from src.schemas.settings import SettingsEnvelope, SettingsResponse, SettingsUpdate
from src.services.settings_service import SettingsService

router = APIRouter(prefix="/api/settings", tags=["settings"])


@router.get("", response_model=SettingsEnvelope)
def get_user_settings(
    claims: CurrentClaims,
    service: Annotated[SettingsService, Depends(get_settings_service)],
):
    """Get settings for the current user, creating defaults on first access."""
    settings = service.get_or_create(claims.user_id)
    return SettingsEnvelope(
        message="Settings retrieved successfully",
        settings=SettingsResponse.model_validate(settings),
    )


@router.put("", response_model=SettingsEnvelope)
def update_user_settings(
    settings_data: SettingsUpdate,
    claims: CurrentClaims,
    service: Annotated[SettingsService, Depends(get_settings_service)],
):
    """Update settings for the current user."""
    settings = service.update(claims.user_id, settings_data.patch())
    return SettingsEnvelope(
        message="Settings updated successfully",
        settings=SettingsResponse.model_validate(settings),
    )
