"""
Authorization gate for protected routes.

Protected endpoints declare ``Depends(get_current_user)``.  The
dependency extracts the bearer token from the ``Authorization``
header and asks the identity provider who owns it.  Outcomes:

* no bearer token                      -> 401 ``Access token required``
* token rejected by the provider       -> 403 ``Invalid or expired token``
* provider unreachable or failing      -> 500 ``Authentication failed``

On success the identity is attached to ``request.state.user`` and
returned to the endpoint.  Verification is never retried.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from site_admin_api.app.api.dependencies import get_identity_provider
from site_admin_api.app.core.exceptions import IdentityProviderError
from site_admin_api.app.core.identity import IdentityProvider

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    identity: IdentityProvider = Depends(get_identity_provider),
) -> Dict[str, Any]:
    """Dependency that resolves the identity behind the bearer token."""
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access token required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        user = await identity.get_user(credentials.credentials)
    except IdentityProviderError as exc:
        logger.error("Auth middleware error: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Authentication failed",
        ) from exc
    if not user:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid or expired token",
        )
    request.state.user = user
    return user
