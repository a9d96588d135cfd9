"""Public content and database initialization endpoints."""
from fastapi import APIRouter, Depends

from vivida.schemas.site import PublicContentResponse
from vivida.services.seed import seed_database
from vivida.services.storage import Storage, get_storage
from vivida.utils.exceptions import handle_database_error
from vivida.utils.logger import logger

router = APIRouter(prefix="/api", tags=["public"])


@router.get("/public-content", response_model=PublicContentResponse)
async def get_public_content(storage: Storage = Depends(get_storage)):
    """
    Get everything the public pages render in one response.

    Args:
        storage: Request-scoped storage

    Returns:
        Theme, contact info and every content list, each list in display order
    """
    try:
        return storage.get_public_content()
    except Exception as e:
        logger.error(f"Failed to fetch public content: {e}", exc_info=True)
        raise handle_database_error(e, "get_public_content")


@router.get("/init")
async def init_database(storage: Storage = Depends(get_storage)) -> dict[str, str]:
    """Seed default content. Safe to call repeatedly."""
    try:
        seed_database(storage)
        return {"message": "Database initialized successfully"}
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}", exc_info=True)
        raise handle_database_error(e, "init_database")
