# /services/github_client.py
# This module defines a GitHubClient class that lists a user's repositories through the GitHub REST API
# and turns non-success responses into user-facing errors.
import re
from typing import List, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from ..settings import settings
from ..services.models import RepoSummary
from ..utils.errors import AppError, bad_request, forbidden, not_found, upstream_error
from ..utils.logging import get_logger

logger = get_logger(__name__)

# GitHub logins: alphanumerics and single hyphens, no leading/trailing hyphen, max 39 chars
GITHUB_LOGIN_RE = re.compile(r"^[A-Za-z0-9](?:[A-Za-z0-9]|-(?=[A-Za-z0-9])){0,38}$")

FETCH_FAILED = "Failed to fetch repositories"

_repo_list = TypeAdapter(List[RepoSummary])


class GitHubClient:
    def __init__(
        self,
        token: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        token = settings.github_token if token is None else (token.strip() or None)
        self.has_token = bool(token)

        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": "pages-explorer/0.1",
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"
        else:
            logger.warning("GITHUB_TOKEN not found. Making unauthenticated requests.")

        self._client = httpx.AsyncClient(
            base_url=settings.github_api_base,
            headers=headers,
            timeout=httpx.Timeout(settings.http_timeout_s),
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    @staticmethod
    def clean_username(username: Optional[str]) -> str:
        username = (username or "").strip()
        if not username:
            raise bad_request("Please enter a GitHub username.")
        if not GITHUB_LOGIN_RE.match(username):
            raise bad_request(f"'{username}' is not a valid GitHub username.")
        return username

    def status_error(self, status_code: int) -> AppError:
        """Map a non-success listing status to the message shown to the user."""
        if status_code == 403:
            if self.has_token:
                return forbidden(
                    f"{FETCH_FAILED}: 403. This might be due to an invalid or expired GitHub token, "
                    "or insufficient permissions. Please check your GITHUB_TOKEN."
                )
            return forbidden(
                f"{FETCH_FAILED}: 403. This is likely due to rate limiting. "
                "Please set GITHUB_TOKEN in your .env file to increase the rate limit."
            )
        if status_code == 404:
            return not_found(f"{FETCH_FAILED}: 404")
        return upstream_error(f"{FETCH_FAILED}: {status_code}")

    async def list_user_repos(self, username: str) -> List[RepoSummary]:
        username = self.clean_username(username)
        try:
            r = await self._client.get(f"/users/{username}/repos", params={"per_page": settings.repos_per_page})
        except httpx.HTTPError as e:
            logger.error("GitHub request for %s failed: %s", username, e)
            raise upstream_error(f"{FETCH_FAILED}: could not reach GitHub ({e.__class__.__name__})") from e

        logger.info("GET /users/%s/repos -> %s", username, r.status_code)
        if not r.is_success:
            raise self.status_error(r.status_code)

        try:
            data = r.json()
            if not isinstance(data, list):
                raise ValueError("expected a JSON array")
            return _repo_list.validate_python(data)
        except (ValueError, ValidationError) as e:
            logger.error("Unexpected repository listing for %s: %s", username, e)
            raise upstream_error(f"{FETCH_FAILED}: unexpected response from GitHub") from e
