"""
FastAPI dependencies wiring the store client into request handlers.

``create_app`` builds one ``Database`` and one ``DevotionalService`` and
keeps them on ``app.state``; handlers obtain the service through
``Depends`` so tests can build isolated applications or override it.
"""

from fastapi import Request

from devotional_api.app.services.devotional_service import DevotionalService


def get_devotional_service(request: Request) -> DevotionalService:
    return request.app.state.devotional_service
