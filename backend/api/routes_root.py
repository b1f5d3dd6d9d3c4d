"""Root API endpoint."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

GREETING = "Backend Node.js funcionando!"

router = APIRouter(tags=["root"])


@router.get("/", response_class=PlainTextResponse)
async def root():
    return GREETING
