# /services/pages_service.py
# This module defines the PagesService class, which fetches a user's repositories, keeps the ones with
# GitHub Pages enabled, and turns them into the cards shown in the UI and returned by the API.
from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from ..settings import settings
from ..services.github_client import GitHubClient
from ..services.models import PagesCard, RepoSummary
from ..utils.links import page_url, repo_url
from ..utils.logging import get_logger
from ..utils.text import format_updated_date, normalize_term, truncate_description

logger = get_logger(__name__)


def pages_only(repos: Sequence[RepoSummary]) -> List[RepoSummary]:
    return [repo for repo in repos if repo.has_pages]


def matches(repo: RepoSummary, term: str) -> bool:
    """`term` must already be normalized (see utils.text.normalize_term)."""
    if term in repo.name.lower():
        return True
    return bool(repo.description) and term in repo.description.lower()


def filter_repos(repos: Sequence[RepoSummary], term: Optional[str]) -> List[RepoSummary]:
    term = normalize_term(term)
    if not term:
        return list(repos)
    return [repo for repo in repos if matches(repo, term)]


def build_card(repo: RepoSummary, username: str) -> PagesCard:
    return PagesCard(
        id=repo.id,
        name=repo.name,
        full_name=repo.full_name,
        description=truncate_description(repo.description, settings.description_max_chars),
        language=repo.language,
        stars=repo.stargazers_count,
        updated=format_updated_date(repo.updated_at),
        updated_at=repo.updated_at,
        site_url=page_url(repo, username),
        repo_url=repo_url(repo),
    )


class PagesService:
    def __init__(self, github: GitHubClient) -> None:
        self.github = github

    async def fetch_pages_repos(self, username: str) -> List[RepoSummary]:
        repos = await self.github.list_user_repos(username)
        pages = pages_only(repos)
        logger.info("%s: %d repositories, %d with GitHub Pages", username.strip(), len(repos), len(pages))
        return pages

    def to_cards(self, repos: Sequence[RepoSummary], username: str) -> List[PagesCard]:
        return [build_card(repo, username) for repo in repos]

    async def list_pages(self, username: str, term: Optional[str] = None) -> Dict[str, Any]:
        username = username.strip()
        pages = await self.fetch_pages_repos(username)
        filtered = filter_repos(pages, term)
        return {
            "username": username,
            "query": term or "",
            "total": len(pages),
            "count": len(filtered),
            "repositories": self.to_cards(filtered, username),
        }
