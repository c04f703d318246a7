"""
Pydantic schemas for catalog services.

A service is a bookable offer shown on the public site: title,
description and price are mandatory at creation, the remaining fields
are optional.  ``id`` and the timestamps are assigned by the store.
"""

from typing import Optional

from pydantic import BaseModel, Field

REQUIRED_FIELDS = ("title", "description", "price")


class ServiceBase(BaseModel):
    title: Optional[str] = Field(None, example="City walking tour")
    description: Optional[str] = Field(None, example="Three hours through the old town")
    price: Optional[float] = Field(None, example=49.0)
    duration: Optional[str] = Field(None, example="3 hours")
    image_url: Optional[str] = Field(None, example="https://example.com/tour.jpg")
    featured: Optional[bool] = Field(None, example=False)


class ServiceCreate(ServiceBase):
    """Schema for creating a service.

    ``missing_fields`` lists the required fields that are absent, null
    or blank; the endpoint rejects the payload when it is not empty.
    """

    def missing_fields(self) -> list:
        missing = []
        for name in REQUIRED_FIELDS:
            value = getattr(self, name)
            if value is None or (isinstance(value, str) and not value.strip()):
                missing.append(name)
        return missing


class ServiceUpdate(ServiceBase):
    """Schema for updating a service.  Only supplied fields are written."""
