"""
Top‑level router for version 1 of the API.

This router aggregates the resource routers under a unified prefix.
Which routes are public and which require a bearer token is declared
per endpoint through the ``get_current_user`` dependency.
"""

from fastapi import APIRouter

from .endpoints import ai, auth, contact, messages, services, site_content, system

router = APIRouter()

# ``auth`` and ``system`` define full paths (``/auth/login``,
# ``/admin-init``, ``/health``, ``/upload``) and take no prefix.
router.include_router(auth.router, tags=["auth"])
router.include_router(services.router, prefix="/services", tags=["services"])
router.include_router(messages.router, prefix="/messages", tags=["messages"])
router.include_router(contact.router, prefix="/contact", tags=["contact"])
router.include_router(site_content.router, prefix="/site-content", tags=["site-content"])
router.include_router(ai.router, prefix="/ai", tags=["ai"])
router.include_router(system.router, tags=["system"])
