"""Service offering management endpoints."""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response, status

from vivida.auth.bearer import get_current_user
from vivida.schemas.content import ServiceCreate, ServiceResponse, ServiceUpdate
from vivida.services.storage import Storage, get_storage
from vivida.utils.exceptions import handle_database_error, not_found_error
from vivida.utils.logger import logger

router = APIRouter(
    prefix="/api/admin/services",
    tags=["services"],
    dependencies=[Depends(get_current_user)],
)


@router.get("", response_model=List[ServiceResponse])
async def list_services(storage: Storage = Depends(get_storage)):
    """Get all services in display order."""
    try:
        return storage.get_services()
    except Exception as e:
        logger.error(f"Failed to fetch services: {e}", exc_info=True)
        raise handle_database_error(e, "list_services")


@router.post("", response_model=ServiceResponse, status_code=status.HTTP_201_CREATED)
async def create_service(
    service: ServiceCreate,
    storage: Storage = Depends(get_storage),
):
    """Create a service."""
    try:
        new_service = storage.create_service(service.model_dump())
        logger.info(f"Created service {new_service.id}")
        return new_service
    except Exception as e:
        logger.error(f"Failed to create service: {e}", exc_info=True)
        raise handle_database_error(e, "create_service")


@router.put("/{service_id}", response_model=ServiceResponse)
async def update_service(
    service_id: str,
    service: ServiceUpdate,
    storage: Storage = Depends(get_storage),
):
    """Update the given fields of a service."""
    try:
        updated = storage.update_service(service_id, service.model_dump(exclude_unset=True))
        if not updated:
            raise not_found_error("Service")
        return updated
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to update service {service_id}: {e}", exc_info=True)
        raise handle_database_error(e, "update_service")


@router.delete("/{service_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_service(
    service_id: str,
    storage: Storage = Depends(get_storage),
) -> Response:
    """Delete a service."""
    try:
        if not storage.delete_service(service_id):
            raise not_found_error("Service")
        logger.info(f"Deleted service {service_id}")
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to delete service {service_id}: {e}", exc_info=True)
        raise handle_database_error(e, "delete_service")
