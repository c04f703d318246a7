"""
Pydantic schemas for contact messages.

Visitors submit messages through the public contact form; the admin
inbox can then mark them ``read`` or ``archived``.  ``status`` is never
taken from the visitor: new submissions always start as ``new``.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field

MessageStatus = Literal["new", "read", "archived"]

CONTACT_FIELDS = ("name", "email", "subject", "message")


class ContactCreate(BaseModel):
    """Schema for a contact form submission."""

    name: Optional[str] = Field(None, example="Jane Doe")
    email: Optional[str] = Field(None, example="jane@example.com")
    subject: Optional[str] = Field(None, example="Group booking")
    message: Optional[str] = Field(None, example="Do you offer discounts for groups of ten?")

    def is_complete(self) -> bool:
        return all(getattr(self, name) and getattr(self, name).strip() for name in CONTACT_FIELDS)


class MessageStatusUpdate(BaseModel):
    status: MessageStatus = Field(..., example="read")
