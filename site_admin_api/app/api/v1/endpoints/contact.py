"""
Public contact form endpoint for API v1.

A submission is stored as a ``new`` message and the response is sent as
soon as the write succeeds.  The e-mail notification to the site owner
runs afterwards as a background task: it is never awaited by the
request, its result is discarded, and any error it raises is logged
and swallowed.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, status

from site_admin_api.app.api.dependencies import get_data_store, get_notifier
from site_admin_api.app.core.db import DataStore
from site_admin_api.app.core.exceptions import DataStoreError
from site_admin_api.app.schemas.message import ContactCreate
from site_admin_api.app.services.message_service import MessageService
from site_admin_api.app.services.notification_service import EmailNotifier

logger = logging.getLogger(__name__)

router = APIRouter()


async def notify_contact(notifier: EmailNotifier, contact: Dict[str, Any]) -> None:
    """Send the contact notification, logging instead of raising."""
    try:
        sent = await notifier.send_contact_notification(contact)
    except Exception:
        logger.exception("Email notification failed")
        return
    if not sent:
        logger.warning("Contact notification for %r was not sent", contact.get("subject"))


@router.post("", status_code=status.HTTP_201_CREATED)
async def submit_contact(
    contact_in: ContactCreate,
    background_tasks: BackgroundTasks,
    store: DataStore = Depends(get_data_store),
    notifier: EmailNotifier = Depends(get_notifier),
) -> Dict[str, Any]:
    """Store a contact form submission and notify the owner by e-mail."""
    if not contact_in.is_complete():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="All fields are required")
    try:
        stored = await MessageService.create_message(store, contact_in)
    except DataStoreError as exc:
        logger.error("Contact form error: %s", exc)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to send message") from exc

    background_tasks.add_task(notify_contact, notifier, contact_in.model_dump())
    return {"message": "Message sent successfully", "data": stored}
