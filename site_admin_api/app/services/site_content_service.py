"""
Service layer for editable site content.

Each record holds the structured payload of one page section and is
keyed by its unique ``section`` name.

``upsert_section`` reads before it writes: it looks the section up and
then either updates the existing record or inserts a new one.  The two
steps are not atomic.  Two concurrent first writes to the same section
may both take the insert branch, and the outcome is then decided by
the table's own uniqueness constraint (or lack of one).
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from site_admin_api.app.core.db import DataStore

logger = logging.getLogger(__name__)

TABLE = "site_content"


class SiteContentService:
    """Read and upsert ``site_content`` sections."""

    @classmethod
    async def list_sections(cls, store: DataStore) -> List[Dict[str, Any]]:
        rows = await store.table(TABLE).select().execute()
        return rows or []

    @classmethod
    async def get_section(cls, store: DataStore, section: str) -> Optional[Dict[str, Any]]:
        """Return the section's record, or ``None`` if it was never written."""
        return await store.table(TABLE).select().eq("section", section).maybe_single().execute()

    @classmethod
    async def upsert_section(cls, store: DataStore, section: str, data: Dict[str, Any]) -> Dict[str, Any]:
        existing = await store.table(TABLE).select("id").eq("section", section).maybe_single().execute()
        if existing:
            result = await (
                store.table(TABLE)
                .update({"data": data, "updated_at": datetime.now(timezone.utc).isoformat()})
                .eq("section", section)
                .single()
                .execute()
            )
            logger.info("Updated site content section %s", section)
        else:
            result = await store.table(TABLE).insert({"section": section, "data": data}).single().execute()
            logger.info("Created site content section %s", section)
        return result
