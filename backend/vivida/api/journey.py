"""Journey milestone endpoints (admin CRUD plus the public post view)."""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response, status

from vivida.auth.bearer import get_current_user
from vivida.schemas.content import (
    JourneyMilestoneCreate,
    JourneyMilestoneResponse,
    JourneyMilestoneUpdate,
)
from vivida.services.storage import Storage, get_storage
from vivida.utils.exceptions import handle_database_error, not_found_error
from vivida.utils.logger import logger

public_router = APIRouter(prefix="/api/journey", tags=["journey"])

router = APIRouter(
    prefix="/api/admin/journey",
    tags=["journey"],
    dependencies=[Depends(get_current_user)],
)


@public_router.get("/{milestone_id}", response_model=JourneyMilestoneResponse)
async def get_journey_milestone(
    milestone_id: str,
    storage: Storage = Depends(get_storage),
):
    """
    Get one milestone for its blog post page.

    Args:
        milestone_id: Milestone ID
        storage: Request-scoped storage

    Returns:
        The milestone, including its HTML content
    """
    try:
        milestone = storage.get_journey_milestone(milestone_id)
        if not milestone:
            raise not_found_error("Milestone")
        return milestone
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to fetch milestone {milestone_id}: {e}", exc_info=True)
        raise handle_database_error(e, "get_journey_milestone")


@router.get("", response_model=List[JourneyMilestoneResponse])
async def list_journey_milestones(storage: Storage = Depends(get_storage)):
    """Get all milestones in timeline order."""
    try:
        return storage.get_journey_milestones()
    except Exception as e:
        logger.error(f"Failed to fetch journey milestones: {e}", exc_info=True)
        raise handle_database_error(e, "list_journey_milestones")


@router.post("", response_model=JourneyMilestoneResponse, status_code=status.HTTP_201_CREATED)
async def create_journey_milestone(
    milestone: JourneyMilestoneCreate,
    storage: Storage = Depends(get_storage),
):
    """Create a milestone."""
    try:
        new_milestone = storage.create_journey_milestone(milestone.model_dump())
        logger.info(f"Created journey milestone {new_milestone.id}")
        return new_milestone
    except Exception as e:
        logger.error(f"Failed to create journey milestone: {e}", exc_info=True)
        raise handle_database_error(e, "create_journey_milestone")


@router.put("/{milestone_id}", response_model=JourneyMilestoneResponse)
async def update_journey_milestone(
    milestone_id: str,
    milestone: JourneyMilestoneUpdate,
    storage: Storage = Depends(get_storage),
):
    """Update the given fields of a milestone."""
    try:
        updated = storage.update_journey_milestone(milestone_id, milestone.model_dump(exclude_unset=True))
        if not updated:
            raise not_found_error("Milestone")
        return updated
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to update journey milestone {milestone_id}: {e}", exc_info=True)
        raise handle_database_error(e, "update_journey_milestone")


@router.delete("/{milestone_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_journey_milestone(
    milestone_id: str,
    storage: Storage = Depends(get_storage),
) -> Response:
    """Delete a milestone."""
    try:
        if not storage.delete_journey_milestone(milestone_id):
            raise not_found_error("Milestone")
        logger.info(f"Deleted journey milestone {milestone_id}")
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to delete journey milestone {milestone_id}: {e}", exc_info=True)
        raise handle_database_error(e, "delete_journey_milestone")
