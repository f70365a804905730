"""
Top-level package for the User CRUD API.

All functionality lives in submodules under ``app``; the ASGI
application is available as ``user_crud_api.app.main:app``.
"""

__all__ = []
