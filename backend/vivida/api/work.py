"""Portfolio project ("work") management endpoints."""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response, status

from vivida.auth.bearer import get_current_user
from vivida.schemas.content import (
    PortfolioProjectCreate,
    PortfolioProjectResponse,
    PortfolioProjectUpdate,
)
from vivida.services.storage import Storage, get_storage
from vivida.utils.exceptions import handle_database_error, not_found_error
from vivida.utils.logger import logger

router = APIRouter(
    prefix="/api/admin/work",
    tags=["work"],
    dependencies=[Depends(get_current_user)],
)


@router.get("", response_model=List[PortfolioProjectResponse])
async def list_portfolio_projects(storage: Storage = Depends(get_storage)):
    """Get all portfolio projects in display order."""
    try:
        return storage.get_portfolio_projects()
    except Exception as e:
        logger.error(f"Failed to fetch portfolio projects: {e}", exc_info=True)
        raise handle_database_error(e, "list_portfolio_projects")


@router.post("", response_model=PortfolioProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_portfolio_project(
    project: PortfolioProjectCreate,
    storage: Storage = Depends(get_storage),
):
    """
    Create a portfolio project.

    Args:
        project: Project data; `tags` keeps the order it was given in
        storage: Request-scoped storage

    Returns:
        Created project
    """
    try:
        new_project = storage.create_portfolio_project(project.model_dump())
        logger.info(f"Created portfolio project {new_project.id}")
        return new_project
    except Exception as e:
        logger.error(f"Failed to create portfolio project: {e}", exc_info=True)
        raise handle_database_error(e, "create_portfolio_project")


@router.put("/{project_id}", response_model=PortfolioProjectResponse)
async def update_portfolio_project(
    project_id: str,
    project: PortfolioProjectUpdate,
    storage: Storage = Depends(get_storage),
):
    """Update the given fields of a portfolio project."""
    try:
        updated = storage.update_portfolio_project(project_id, project.model_dump(exclude_unset=True))
        if not updated:
            raise not_found_error("Project")
        return updated
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to update portfolio project {project_id}: {e}", exc_info=True)
        raise handle_database_error(e, "update_portfolio_project")


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_portfolio_project(
    project_id: str,
    storage: Storage = Depends(get_storage),
) -> Response:
    """Delete a portfolio project."""
    try:
        if not storage.delete_portfolio_project(project_id):
            raise not_found_error("Project")
        logger.info(f"Deleted portfolio project {project_id}")
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to delete portfolio project {project_id}: {e}", exc_info=True)
        raise handle_database_error(e, "delete_portfolio_project")
