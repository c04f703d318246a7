"""
Message inbox endpoints for API v1.

All routes require an authenticated administrator.  Messages are
created through the public contact endpoint, not here.
"""

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, status

from site_admin_api.app.api.dependencies import get_data_store
from site_admin_api.app.core.db import DataStore
from site_admin_api.app.core.exceptions import DataStoreError
from site_admin_api.app.core.security import get_current_user
from site_admin_api.app.schemas.message import MessageStatusUpdate
from site_admin_api.app.services.message_service import MessageService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[Dict[str, Any]])
async def list_messages(
    current_user: dict = Depends(get_current_user),
    store: DataStore = Depends(get_data_store),
) -> List[Dict[str, Any]]:
    """List all messages, newest first."""
    try:
        return await MessageService.list_messages(store)
    except DataStoreError as exc:
        logger.error("Get messages error: %s", exc)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch messages") from exc


@router.put("/{message_id}", response_model=Dict[str, Any])
async def update_message(
    message_id: str,
    body: MessageStatusUpdate,
    current_user: dict = Depends(get_current_user),
    store: DataStore = Depends(get_data_store),
) -> Dict[str, Any]:
    """Change a message's status to ``new``, ``read`` or ``archived``."""
    try:
        return await MessageService.update_status(store, message_id, body.status)
    except DataStoreError as exc:
        logger.error("Update message error: %s", exc)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to update message") from exc


@router.delete("/{message_id}", response_model=Dict[str, str])
async def delete_message(
    message_id: str,
    current_user: dict = Depends(get_current_user),
    store: DataStore = Depends(get_data_store),
) -> Dict[str, str]:
    try:
        await MessageService.delete_message(store, message_id)
    except DataStoreError as exc:
        logger.error("Delete message error: %s", exc)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to delete message") from exc
    return {"message": "Message deleted successfully"}
