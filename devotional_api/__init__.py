"""
Top-level package for the Devotional API.

All functionality lives in submodules under ``app``; import
``devotional_api.app.main`` for the ASGI application.
"""

__all__ = []
