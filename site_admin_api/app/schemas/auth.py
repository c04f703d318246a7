"""Pydantic schemas for authentication and the AI passthrough."""

from typing import Optional

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    email: Optional[str] = Field(None, example="admin@example.com")
    password: Optional[str] = Field(None, example="strongpassword")


class GenerateRequest(BaseModel):
    prompt: Optional[str] = Field(None, example="Write a short intro for our summer tours")
