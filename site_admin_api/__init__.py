"""
Top‑level package for the Site Admin API.

The admin dashboard backend of a small business website: catalog
services, the contact inbox and editable site content, stored in a
hosted Supabase project.  All functionality lives in submodules under
``app``.
"""

__all__ = []
