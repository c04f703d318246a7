"""
Service layer for contact messages.

Messages are created by the public contact form with status ``new``
and managed from the admin inbox.  The inbox lists them newest first.
"""

import logging
from typing import Any, Dict, List

from site_admin_api.app.core.db import DataStore
from site_admin_api.app.schemas.message import ContactCreate

logger = logging.getLogger(__name__)

TABLE = "messages"


class MessageService:
    """Operations on the ``messages`` table."""

    @classmethod
    async def list_messages(cls, store: DataStore) -> List[Dict[str, Any]]:
        rows = await store.table(TABLE).select().order("created_at", desc=True).execute()
        return rows or []

    @classmethod
    async def create_message(cls, store: DataStore, data: ContactCreate) -> Dict[str, Any]:
        row = {
            "name": data.name,
            "email": data.email,
            "subject": data.subject,
            "message": data.message,
            "status": "new",
        }
        created = await store.table(TABLE).insert(row).single().execute()
        logger.info("Stored contact message %s from %s", created.get("id"), data.email)
        return created

    @classmethod
    async def update_status(cls, store: DataStore, message_id: str, status: str) -> Dict[str, Any]:
        updated = await store.table(TABLE).update({"status": status}).eq("id", message_id).single().execute()
        logger.info("Message %s marked %s", message_id, status)
        return updated

    @classmethod
    async def delete_message(cls, store: DataStore, message_id: str) -> None:
        await store.table(TABLE).delete().eq("id", message_id).execute()
        logger.info("Deleted message %s", message_id)
