"""HTTP route handler for the greeting endpoint."""

from fastapi import APIRouter

from app.schemas.common import Message

GREETING = "hello kity"

router = APIRouter(tags=["greeting"])


@router.get("/hello", response_model=Message)
async def hello() -> Message:
    """Return the fixed greeting; headers, query string and body are ignored."""

    return Message(message=GREETING)
