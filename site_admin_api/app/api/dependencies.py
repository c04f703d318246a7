"""
API dependencies.

External collaborators are created once per process by ``create_app``
and stored on ``app.state``.  Endpoints receive them through these
dependency functions, so tests can build an app around fakes without
patching module globals.
"""

from fastapi import Request

from site_admin_api.app.core.config import Settings
from site_admin_api.app.core.db import DataStore
from site_admin_api.app.core.identity import IdentityProvider
from site_admin_api.app.services.ai_service import ContentGenerator
from site_admin_api.app.services.notification_service import EmailNotifier


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_data_store(request: Request) -> DataStore:
    return request.app.state.data_store


def get_identity_provider(request: Request) -> IdentityProvider:
    return request.app.state.identity_provider


def get_notifier(request: Request) -> EmailNotifier:
    return request.app.state.notifier


def get_content_generator(request: Request) -> ContentGenerator:
    return request.app.state.content_generator
