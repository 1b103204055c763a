"""Plain-text greeting used as a liveness probe."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()


@router.get("/hello_world", response_class=PlainTextResponse)
async def hello_world() -> str:
    return "Hello, World!"
