# /services/models.py
# Repository records: the summary parsed from the GitHub listing and the card shown to the user.
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class RepoSummary(BaseModel):
    """One entry of GET /users/{username}/repos. Unknown upstream fields are ignored."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: int
    name: str
    full_name: str
    description: Optional[str] = None
    html_url: str
    homepage: Optional[str] = None
    has_pages: bool = False
    language: Optional[str] = None
    stargazers_count: int = 0
    updated_at: datetime


class PagesCard(BaseModel):
    id: int
    name: str
    full_name: str
    description: str  # truncated, or the placeholder
    language: Optional[str] = None
    stars: int
    updated: str
    updated_at: datetime
    site_url: str
    repo_url: str
