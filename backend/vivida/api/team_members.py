"""Team member management endpoints."""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response, status

from vivida.auth.bearer import get_current_user
from vivida.schemas.content import TeamMemberCreate, TeamMemberResponse, TeamMemberUpdate
from vivida.services.storage import Storage, get_storage
from vivida.utils.exceptions import handle_database_error, not_found_error
from vivida.utils.logger import logger

router = APIRouter(
    prefix="/api/admin/team-members",
    tags=["team-members"],
    dependencies=[Depends(get_current_user)],
)


@router.get("", response_model=List[TeamMemberResponse])
async def list_team_members(storage: Storage = Depends(get_storage)):
    """
    Get all team members in display order.

    Args:
        storage: Request-scoped storage

    Returns:
        Team members sorted by `order`
    """
    try:
        return storage.get_team_members()
    except Exception as e:
        logger.error(f"Failed to fetch team members: {e}", exc_info=True)
        raise handle_database_error(e, "list_team_members")


@router.post("", response_model=TeamMemberResponse, status_code=status.HTTP_201_CREATED)
async def create_team_member(
    member: TeamMemberCreate,
    storage: Storage = Depends(get_storage),
):
    """
    Create a team member.

    Args:
        member: Team member data
        storage: Request-scoped storage

    Returns:
        Created team member
    """
    try:
        new_member = storage.create_team_member(member.model_dump())
        logger.info(f"Created team member {new_member.id}")
        return new_member
    except Exception as e:
        logger.error(f"Failed to create team member: {e}", exc_info=True)
        raise handle_database_error(e, "create_team_member")


@router.put("/{member_id}", response_model=TeamMemberResponse)
async def update_team_member(
    member_id: str,
    member: TeamMemberUpdate,
    storage: Storage = Depends(get_storage),
):
    """
    Update the given fields of a team member.

    Args:
        member_id: Team member ID
        member: Fields to change; omitted fields are left as they are
        storage: Request-scoped storage

    Returns:
        Updated team member
    """
    try:
        updated = storage.update_team_member(member_id, member.model_dump(exclude_unset=True))
        if not updated:
            raise not_found_error("Team member")
        return updated
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to update team member {member_id}: {e}", exc_info=True)
        raise handle_database_error(e, "update_team_member")


@router.delete("/{member_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_team_member(
    member_id: str,
    storage: Storage = Depends(get_storage),
) -> Response:
    """
    Delete a team member.

    Args:
        member_id: Team member ID
        storage: Request-scoped storage
    """
    try:
        if not storage.delete_team_member(member_id):
            raise not_found_error("Team member")
        logger.info(f"Deleted team member {member_id}")
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to delete team member {member_id}: {e}", exc_info=True)
        raise handle_database_error(e, "delete_team_member")
