"""
Identity provider integration.

Authentication is delegated entirely to Supabase Auth (GoTrue).  This
module wraps the handful of its endpoints the API needs: verifying a
bearer token, exchanging e-mail and password for a session, and the
admin calls used to bootstrap the first administrator.

A rejected token or password is a normal outcome and is reported as
``None``.  Only transport failures and server-side errors raise
``IdentityProviderError``.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from .exceptions import IdentityProviderError

logger = logging.getLogger(__name__)


class IdentityProvider:
    """Async client for the Supabase Auth REST API."""

    def __init__(
        self,
        url: str,
        service_key: str,
        anon_key: Optional[str] = None,
        *,
        timeout: float = 15,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.base_url = url.rstrip("/")
        self.service_key = service_key
        self.anon_key = anon_key or service_key
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._owns_client = client is None

    async def get_user(self, token: str) -> Optional[Dict[str, Any]]:
        """Return the identity owning ``token`` or ``None`` if it is not valid."""
        response = await self._request(
            "GET",
            "/user",
            headers={"apikey": self.service_key, "Authorization": f"Bearer {token}"},
        )
        if response.is_client_error:
            return None
        self._raise_for_server_error(response)
        user = self._json_object(response)
        return user if user.get("id") else None

    async def sign_in_with_password(self, email: str, password: str) -> Optional[Dict[str, Any]]:
        """Exchange credentials for a session.

        Returns the session payload (``access_token``, ``refresh_token``,
        ``user`` ...) or ``None`` when the provider rejects the
        credentials.
        """
        response = await self._request(
            "POST",
            "/token",
            params={"grant_type": "password"},
            json={"email": email, "password": password},
            headers={"apikey": self.anon_key},
        )
        if response.is_client_error:
            return None
        self._raise_for_server_error(response)
        return self._json_object(response)

    async def list_users(self) -> List[Dict[str, Any]]:
        response = await self._request("GET", "/admin/users", headers=self._admin_headers())
        self._raise_for_error(response)
        users = self._json_object(response).get("users", [])
        if not isinstance(users, list) or not all(isinstance(user, dict) for user in users):
            raise IdentityProviderError("Identity provider returned an unexpected user list")
        return users

    async def create_user(
        self,
        email: str,
        password: str,
        *,
        email_confirm: bool = False,
        user_metadata: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        response = await self._request(
            "POST",
            "/admin/users",
            json={
                "email": email,
                "password": password,
                "email_confirm": email_confirm,
                "user_metadata": user_metadata or {},
            },
            headers=self._admin_headers(),
        )
        self._raise_for_error(response)
        return self._json_object(response)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _admin_headers(self) -> Dict[str, str]:
        return {"apikey": self.service_key, "Authorization": f"Bearer {self.service_key}"}

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        url = f"{self.base_url}/auth/v1{path}"
        try:
            return await self._client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            raise IdentityProviderError(f"Identity provider request failed: {exc}") from exc

    @staticmethod
    def _raise_for_server_error(response: httpx.Response) -> None:
        if response.is_server_error:
            raise IdentityProviderError(
                f"Identity provider error: {response.text}",
                status_code=response.status_code,
            )

    @staticmethod
    def _raise_for_error(response: httpx.Response) -> None:
        if response.is_error:
            try:
                body = response.json()
            except ValueError:
                body = None
            if isinstance(body, dict):
                message = body.get("msg") or body.get("message") or body.get("error_description") or str(body)
            else:
                message = response.text
            raise IdentityProviderError(message, status_code=response.status_code)

    @staticmethod
    def _json_object(response: httpx.Response) -> Dict[str, Any]:
        """Decode a successful response that must be a JSON object."""
        try:
            body = response.json()
        except ValueError as exc:
            raise IdentityProviderError(
                f"Identity provider returned a non-JSON body: {response.text[:200]}",
                status_code=response.status_code,
            ) from exc
        if not isinstance(body, dict):
            raise IdentityProviderError(
                "Identity provider returned an unexpected payload",
                status_code=response.status_code,
            )
        return body
