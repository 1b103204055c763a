"""
Devotional endpoints.

These routes expose CRUD over devotional entries under
``/api/devotionals``.  Request bodies are decoded as plain JSON and
validated by the schema helpers, so a missing or empty field answers 400
with ``{"error": ...}`` instead of FastAPI's default 422.  Deleted
entries behave exactly like entries that never existed.

Handlers are plain ``def`` so the blocking SQLite calls run in FastAPI's
threadpool instead of on the event loop.
"""

from typing import Any, List

from fastapi import APIRouter, Body, Depends, Response, status

from devotional_api.app.api.deps import get_devotional_service
from devotional_api.app.core.errors import PayloadValidationError
from devotional_api.app.schemas.devotional import (
    DevotionalCreated,
    DevotionalRead,
    validate_create,
    validate_update,
)
from devotional_api.app.services.devotional_service import DevotionalService

router = APIRouter()


@router.get("", response_model=List[DevotionalRead])
def list_devotionals(
    service: DevotionalService = Depends(get_devotional_service),
) -> List[DevotionalRead]:
    """Return all live devotionals, newest first."""
    return service.list_devotionals()


@router.get("/{devotional_id}", response_model=DevotionalRead)
def get_devotional(
    devotional_id: str,
    service: DevotionalService = Depends(get_devotional_service),
) -> DevotionalRead:
    return service.get_devotional(devotional_id)


@router.post("", response_model=DevotionalCreated, status_code=status.HTTP_201_CREATED)
def create_devotional(
    payload: Any = Body(None),
    service: DevotionalService = Depends(get_devotional_service),
) -> DevotionalCreated:
    """Create a devotional from ``{verse, content}``; both are required."""
    result = validate_create(payload)
    if not result.ok:
        raise PayloadValidationError("Both verse and content are required.", result.errors)
    devotional_id = service.create_devotional(result.value)
    return DevotionalCreated(message="Devotional created successfully.", id=devotional_id)


@router.patch("/{devotional_id}", response_model=DevotionalRead)
def update_devotional(
    devotional_id: str,
    payload: Any = Body(None),
    service: DevotionalService = Depends(get_devotional_service),
) -> DevotionalRead:
    """Update verse and/or content of a live devotional."""
    result = validate_update(payload)
    if not result.ok:
        raise PayloadValidationError(
            "At least one non-empty field (verse or content) is required.", result.errors
        )
    return service.update_devotional(devotional_id, result.value)


@router.delete("/{devotional_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_devotional(
    devotional_id: str,
    service: DevotionalService = Depends(get_devotional_service),
) -> Response:
    """Soft delete a devotional; a second delete answers 404."""
    service.delete_devotional(devotional_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
