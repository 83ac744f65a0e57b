"""
Top‑level package for the User Directory API.

All functionality lives in submodules under ``app``; import
``user_directory_api.app.main`` for the ASGI application.
"""

__all__ = []
