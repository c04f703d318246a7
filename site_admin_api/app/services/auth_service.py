"""
Authentication helpers on top of the identity provider.

Password checks and account storage are owned by the provider; this
module only shapes its answers for the API and bootstraps the first
administrator account.
"""

import logging
from typing import Any, Dict, Optional

from site_admin_api.app.core.identity import IdentityProvider

logger = logging.getLogger(__name__)


class AuthService:

    @classmethod
    async def login(cls, identity: IdentityProvider, email: str, password: str) -> Optional[Dict[str, Any]]:
        """Return ``{"user", "session", "token"}`` or ``None`` on bad credentials."""
        session = await identity.sign_in_with_password(email, password)
        if not session:
            logger.info("Rejected login for %s", email)
            return None
        return {
            "user": session.get("user"),
            "session": session,
            "token": session.get("access_token"),
        }

    @classmethod
    async def ensure_admin(cls, identity: IdentityProvider, email: str, password: str) -> Dict[str, Any]:
        """Create the bootstrap administrator unless it already exists.

        Safe to call repeatedly; only the first call creates the account
        and reveals its initial password.
        """
        users = await identity.list_users()
        if any((user.get("email") or "").lower() == email.lower() for user in users):
            return {"message": "Admin user already exists", "email": email}

        await identity.create_user(
            email,
            password,
            email_confirm=True,
            user_metadata={"role": "admin"},
        )
        logger.warning("Created bootstrap admin user %s", email)
        return {
            "message": "Admin user created successfully",
            "email": email,
            "password": password,
            "warning": "Please change this password immediately!",
        }
