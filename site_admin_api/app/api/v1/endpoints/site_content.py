"""
Site content endpoints for API v1.

Reading content is public so the website can render it; writing a
section requires an authenticated administrator.
"""

import logging
from typing import Any, Dict, List, Optional, Union

from fastapi import APIRouter, Depends, HTTPException, Query, status

from site_admin_api.app.api.dependencies import get_data_store
from site_admin_api.app.core.db import DataStore
from site_admin_api.app.core.exceptions import DataStoreError
from site_admin_api.app.core.security import get_current_user
from site_admin_api.app.schemas.site_content import SiteContentUpdate
from site_admin_api.app.services.site_content_service import SiteContentService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=Union[List[Dict[str, Any]], Dict[str, Any], None])
async def get_site_content(
    section: Optional[str] = Query(None),
    store: DataStore = Depends(get_data_store),
) -> Union[List[Dict[str, Any]], Dict[str, Any], None]:
    """Return every section, or only ``section`` when it is given.

    A section that was never written is returned as ``null``, not 404.
    """
    try:
        if section:
            return await SiteContentService.get_section(store, section)
        return await SiteContentService.list_sections(store)
    except DataStoreError as exc:
        logger.error("Get site content error: %s", exc)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch content") from exc


@router.put("/{section}", response_model=Dict[str, Any])
async def update_site_content(
    section: str,
    body: SiteContentUpdate,
    current_user: dict = Depends(get_current_user),
    store: DataStore = Depends(get_data_store),
) -> Dict[str, Any]:
    """Insert or replace the payload of one section (admin only)."""
    if body.data is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Content data is required")
    try:
        return await SiteContentService.upsert_section(store, section, body.data)
    except DataStoreError as exc:
        logger.error("Update site content error: %s", exc)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to update content") from exc
