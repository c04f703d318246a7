"""
System endpoints for API v1: liveness and the upload placeholder.

File storage is not implemented; ``/upload`` returns a fixed stub URL
so the admin UI can be exercised end to end.
"""

from datetime import datetime, timezone
from typing import Dict

from fastapi import APIRouter, Depends

from site_admin_api.app.core.security import get_current_user

router = APIRouter()

PLACEHOLDER_IMAGE_URL = "https://via.placeholder.com/400x300"


@router.get("/health", response_model=Dict[str, str])
async def health() -> Dict[str, str]:
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}


@router.post("/upload", response_model=Dict[str, str])
async def upload(current_user: dict = Depends(get_current_user)) -> Dict[str, str]:
    return {
        "url": PLACEHOLDER_IMAGE_URL,
        "message": "File upload not yet implemented. Configure Supabase Storage.",
    }
