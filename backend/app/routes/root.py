"""
Booklist Backend - Root Route
==============================

GET / answers with a plain-text welcome so a browser pointed at the server
shows something other than a 404.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from app.config import settings

router = APIRouter(tags=["Root"])


@router.get("/", response_class=PlainTextResponse, summary="Welcome message")
async def welcome() -> PlainTextResponse:
    return PlainTextResponse(settings.welcome_message)
