"""
Top-level router for the API.

Devotional CRUD is mounted under ``/api/devotionals``; the greeting
route stays at the root.
"""

from fastapi import APIRouter

from .endpoints import devotionals, hello

router = APIRouter()

router.include_router(devotionals.router, prefix="/api/devotionals", tags=["devotionals"])
router.include_router(hello.router, tags=["hello"])
