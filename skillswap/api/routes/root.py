"""Liveness banner."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["root"])


@router.get("/", response_class=PlainTextResponse)
async def root() -> str:
    """Report that the server is up."""
    return "SkillSwap server is running..."
