"""Pydantic schemas for editable site content sections."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class SiteContentUpdate(BaseModel):
    """Payload stored for a section, e.g. ``{"data": {"headline": "..."}}``."""

    data: Optional[Dict[str, Any]] = Field(None, example={"headline": "Travel with us"})
