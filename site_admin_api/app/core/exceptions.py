"""
Exceptions raised by the clients of external collaborators.

Endpoints never forward these to callers: they log the detail and
answer with a generic, resource-specific message.
"""

from typing import Optional


class UpstreamError(Exception):
    """Base class for failures reported by an external collaborator."""

    def __init__(self, message: str, *, status_code: Optional[int] = None, code: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code


class DataStoreError(UpstreamError):
    """The hosted data store rejected a query or could not be reached."""


class NoRowsError(DataStoreError):
    """A query expecting exactly one row matched none (or several)."""

    def __init__(self, message: str = "JSON object requested, multiple (or no) rows returned") -> None:
        super().__init__(message, status_code=406, code="PGRST116")


class IdentityProviderError(UpstreamError):
    """The identity provider could not be reached or failed internally."""
