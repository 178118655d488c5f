# /api/pages.py
# This module defines the API endpoint listing a user's GitHub Pages repositories, optionally filtered
# by a search term.
from fastapi import APIRouter, Depends, Query, Request

from .schemas import ErrorResponse, PagesResponse
from ..services.pages_service import PagesService

router = APIRouter(prefix="/api")


def get_service(request: Request) -> PagesService:
    # set on app.state by the lifespan in main.py
    svc = getattr(request.app.state, "svc", None)
    if svc is None:
        raise RuntimeError("Service not initialized")
    return svc


@router.get(
    "/users/{username}/pages",
    response_model=PagesResponse,
    responses={
        code: {"model": ErrorResponse} for code in (400, 403, 404, 500, 502)
    },
)
async def list_pages(
    username: str,
    q: str = Query("", description="Case-insensitive filter on name and description"),
    svc: PagesService = Depends(get_service),
):
    return await svc.list_pages(username, q)
