# /api/schemas.py
# This module defines the response schemas for the GitHub Pages Explorer API, as well as a
# standard error response format.
from pydantic import BaseModel, Field
from typing import List

from ..services.models import PagesCard


class PagesResponse(BaseModel):
    username: str
    query: str = ""
    total: int = Field(..., description="Repositories with GitHub Pages enabled")
    count: int = Field(..., description="Repositories left after applying the search term")
    repositories: List[PagesCard]


class ErrorResponse(BaseModel):
    status: str = "error"
    message: str
