"""Theme and contact info endpoints (single-row settings)."""
from fastapi import APIRouter, Depends

from vivida.auth.bearer import get_current_user
from vivida.schemas.site import (
    ContactInfoResponse,
    ContactInfoUpdate,
    SiteThemeResponse,
    SiteThemeUpdate,
)
from vivida.services.storage import Storage, get_storage
from vivida.utils.exceptions import handle_database_error
from vivida.utils.logger import logger

router = APIRouter(
    prefix="/api/admin",
    tags=["site-settings"],
    dependencies=[Depends(get_current_user)],
)


@router.get("/theme", response_model=SiteThemeResponse)
async def get_theme(storage: Storage = Depends(get_storage)):
    """Get the site theme, creating the default one on first access."""
    try:
        return storage.get_site_theme()
    except Exception as e:
        logger.error(f"Failed to fetch theme: {e}", exc_info=True)
        raise handle_database_error(e, "get_theme")


@router.put("/theme", response_model=SiteThemeResponse)
async def update_theme(
    theme: SiteThemeUpdate,
    storage: Storage = Depends(get_storage),
):
    """
    Update the site theme.

    Args:
        theme: Fields to change; omitted fields keep their value
        storage: Request-scoped storage

    Returns:
        The theme after the update
    """
    try:
        updated = storage.update_site_theme(theme.model_dump(exclude_unset=True))
        logger.info("Updated site theme")
        return updated
    except Exception as e:
        logger.error(f"Failed to update theme: {e}", exc_info=True)
        raise handle_database_error(e, "update_theme")


@router.get("/contact-info", response_model=ContactInfoResponse)
async def get_contact_info(storage: Storage = Depends(get_storage)):
    """Get the contact info, creating the default one on first access."""
    try:
        return storage.get_contact_info()
    except Exception as e:
        logger.error(f"Failed to fetch contact info: {e}", exc_info=True)
        raise handle_database_error(e, "get_contact_info")


@router.put("/contact-info", response_model=ContactInfoResponse)
async def update_contact_info(
    info: ContactInfoUpdate,
    storage: Storage = Depends(get_storage),
):
    """Update the given contact info fields."""
    try:
        updated = storage.update_contact_info(info.model_dump(exclude_unset=True))
        logger.info("Updated contact info")
        return updated
    except Exception as e:
        logger.error(f"Failed to update contact info: {e}", exc_info=True)
        raise handle_database_error(e, "update_contact_info")
