"""
Authentication endpoints for API v1.

``/auth/login`` exchanges e-mail and password for a session issued by
the identity provider.  ``/admin-init`` bootstraps the configured
administrator account on a fresh installation and is a no-op once the
account exists.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status

from site_admin_api.app.api.dependencies import get_identity_provider, get_settings
from site_admin_api.app.core.config import Settings
from site_admin_api.app.core.exceptions import IdentityProviderError
from site_admin_api.app.core.identity import IdentityProvider
from site_admin_api.app.schemas.auth import LoginRequest
from site_admin_api.app.services.auth_service import AuthService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/auth/login")
async def login(
    credentials: LoginRequest,
    identity: IdentityProvider = Depends(get_identity_provider),
) -> Dict[str, Any]:
    if not credentials.email or not credentials.password:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email and password required")
    try:
        result = await AuthService.login(identity, credentials.email, credentials.password)
    except IdentityProviderError as exc:
        logger.error("Login error: %s", exc)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Login failed") from exc
    if result is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    return result


@router.get("/admin-init")
async def admin_init(
    identity: IdentityProvider = Depends(get_identity_provider),
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    try:
        return await AuthService.ensure_admin(
            identity, settings.admin_init_email, settings.admin_init_password
        )
    except IdentityProviderError as exc:
        logger.error("Admin init error: %s", exc)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to initialize admin") from exc
