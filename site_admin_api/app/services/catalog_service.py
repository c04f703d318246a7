"""
Business logic for catalog services.

Services are listed newest first.  Required fields are validated by the
API layer before any method here is called, so every call in this
module results in exactly one data store request.  Store failures are
logged and propagated as ``DataStoreError``.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List

from site_admin_api.app.core.db import DataStore
from site_admin_api.app.schemas.service import ServiceCreate, ServiceUpdate

logger = logging.getLogger(__name__)

TABLE = "services"


class CatalogService:
    """CRUD operations on the ``services`` table."""

    @classmethod
    async def list_services(cls, store: DataStore) -> List[Dict[str, Any]]:
        rows = await store.table(TABLE).select().order("created_at", desc=True).execute()
        return rows or []

    @classmethod
    async def get_service(cls, store: DataStore, service_id: str) -> Dict[str, Any]:
        """Return one service; raises ``NoRowsError`` if it does not exist."""
        return await store.table(TABLE).select().eq("id", service_id).single().execute()

    @classmethod
    async def create_service(cls, store: DataStore, data: ServiceCreate) -> Dict[str, Any]:
        row = {
            "title": data.title,
            "description": data.description,
            "price": data.price,
            "duration": data.duration,
            "image_url": data.image_url,
            "featured": bool(data.featured),
        }
        created = await store.table(TABLE).insert(row).single().execute()
        logger.info("Created service %s", created.get("id"))
        return created

    @classmethod
    async def update_service(cls, store: DataStore, service_id: str, data: ServiceUpdate) -> Dict[str, Any]:
        """Write the supplied fields and stamp ``updated_at``.

        Fields absent from the payload keep their stored values.  An id
        that matches nothing raises ``NoRowsError``.
        """
        values = data.model_dump(exclude_unset=True)
        values["updated_at"] = datetime.now(timezone.utc).isoformat()
        updated = await store.table(TABLE).update(values).eq("id", service_id).single().execute()
        logger.info("Updated service %s", service_id)
        return updated

    @classmethod
    async def delete_service(cls, store: DataStore, service_id: str) -> None:
        """Delete a service.  Unknown ids are not distinguished."""
        await store.table(TABLE).delete().eq("id", service_id).execute()
        logger.info("Deleted service %s", service_id)
