"""
Catalog service endpoints for API v1.

Listing and reading services is public; creating, updating and
deleting them requires an authenticated administrator.
"""

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, status

from site_admin_api.app.api.dependencies import get_data_store
from site_admin_api.app.core.db import DataStore
from site_admin_api.app.core.exceptions import DataStoreError, NoRowsError
from site_admin_api.app.core.security import get_current_user
from site_admin_api.app.schemas.service import ServiceCreate, ServiceUpdate
from site_admin_api.app.services.catalog_service import CatalogService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[Dict[str, Any]])
async def list_services(store: DataStore = Depends(get_data_store)) -> List[Dict[str, Any]]:
    """Return all services, newest first.  An empty catalog is ``[]``."""
    try:
        return await CatalogService.list_services(store)
    except DataStoreError as exc:
        logger.error("Get services error: %s", exc)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch services") from exc


@router.get("/{service_id}", response_model=Dict[str, Any])
async def get_service(service_id: str, store: DataStore = Depends(get_data_store)) -> Dict[str, Any]:
    try:
        return await CatalogService.get_service(store, service_id)
    except NoRowsError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Service not found") from exc
    except DataStoreError as exc:
        logger.error("Get service error: %s", exc)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch service") from exc


@router.post("", response_model=Dict[str, Any], status_code=status.HTTP_201_CREATED)
async def create_service(
    service_in: ServiceCreate,
    current_user: dict = Depends(get_current_user),
    store: DataStore = Depends(get_data_store),
) -> Dict[str, Any]:
    """Create a service (admin only).

    ``title``, ``description`` and ``price`` are required; a payload
    missing any of them is rejected before the store is contacted.
    """
    missing = service_in.missing_fields()
    if missing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Missing required fields: {', '.join(missing)}",
        )
    try:
        return await CatalogService.create_service(store, service_in)
    except DataStoreError as exc:
        logger.error("Create service error: %s", exc)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to create service") from exc


@router.put("/{service_id}", response_model=Dict[str, Any])
async def update_service(
    service_id: str,
    service_in: ServiceUpdate,
    current_user: dict = Depends(get_current_user),
    store: DataStore = Depends(get_data_store),
) -> Dict[str, Any]:
    """Update a service (admin only).  Only supplied fields change."""
    try:
        return await CatalogService.update_service(store, service_id, service_in)
    except DataStoreError as exc:
        logger.error("Update service error: %s", exc)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to update service") from exc


@router.delete("/{service_id}", response_model=Dict[str, str])
async def delete_service(
    service_id: str,
    current_user: dict = Depends(get_current_user),
    store: DataStore = Depends(get_data_store),
) -> Dict[str, str]:
    """Delete a service (admin only).

    Deleting an id that does not exist reports the same success.
    """
    try:
        await CatalogService.delete_service(store, service_id)
    except DataStoreError as exc:
        logger.error("Delete service error: %s", exc)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to delete service") from exc
    return {"message": "Service deleted successfully"}
