"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules: ``core`` (configuration, logging, the authorization gate
and the clients of the hosted backend), ``services`` (one class per
resource), ``schemas`` (request payloads) and ``api/v1`` (routers).
"""

from .main import app  # noqa: F401
