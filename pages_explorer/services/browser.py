# /services/browser.py
# View-model behind the Pages grid. It holds the username, the search term and the last fetched set,
# and decides which display state the page is in (loading, error, empty, no matches, results).
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from ..settings import settings
from ..services.models import PagesCard, RepoSummary
from ..services.pages_service import PagesService, build_card, filter_repos, matches
from ..utils.errors import AppError
from ..utils.logging import get_logger
from ..utils.text import normalize_term

logger = get_logger(__name__)

SKELETON_CARDS = 6

ERROR_GUIDANCE = (
    "Make sure the username is correct and the profile is public. If you are seeing persistent 403 errors, "
    "ensure your GITHUB_TOKEN is correctly set in a .env file and the server has been restarted."
)


class DisplayState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"
    EMPTY = "empty"
    NO_MATCHES = "no_matches"
    RESULTS = "results"


@dataclass
class GridItem:
    """A card plus what the in-page search needs to show or hide it."""

    card: PagesCard
    visible: bool
    search_name: str
    search_description: str


def found_label(count: int) -> str:
    noun = "repository" if count == 1 else "repositories"
    return f"Found {count} GitHub Pages {noun}"


class PagesBrowser:
    """State for one Pages grid.

    The Django view builds one per request and awaits `fetch` before rendering, so it only ever sees a
    settled state. The loading flag and the stale-fetch guard matter when one browser instance serves
    overlapping fetches.
    """

    def __init__(self, service: PagesService, username: Optional[str] = None, search_term: str = "") -> None:
        self.service = service
        self.username = settings.default_username if username is None else username
        self.search_term = search_term

        self.repos: List[RepoSummary] = []
        self.loading = False
        self.error: Optional[str] = None
        # username the current `repos` belong to; None until a fetch completes
        self.fetched_for: Optional[str] = None
        self._generation = 0

    async def fetch(self, username: Optional[str] = None) -> None:
        """Fetch the pages-enabled set for `username` (or the current one), replacing the previous set.

        Only the most recently started fetch may update the state. A failed fetch clears the set.
        """
        if username is not None:
            self.username = username
        target = self.username.strip()

        self._generation += 1
        generation = self._generation
        self.loading = True
        self.error = None

        try:
            repos = await self.service.fetch_pages_repos(target)
            error = None
        except AppError as e:
            repos, error = [], e.message
        except Exception:
            logger.exception("Unexpected error while fetching repositories for %r", target)
            repos, error = [], "An error occurred"

        if generation != self._generation:
            logger.info("Discarding stale fetch for %r (superseded by a newer request)", target)
            return

        self.repos = repos
        self.error = error
        self.fetched_for = None if error else target
        self.loading = False

    @property
    def filtered(self) -> List[RepoSummary]:
        return filter_repos(self.repos, self.search_term)

    @property
    def cards(self) -> List[PagesCard]:
        return self.service.to_cards(self.filtered, self.fetched_for or self.username.strip())

    @property
    def state(self) -> DisplayState:
        if self.loading:
            return DisplayState.LOADING
        if self.error:
            return DisplayState.ERROR
        if self.fetched_for is None:
            return DisplayState.IDLE
        if not self.repos:
            return DisplayState.EMPTY
        if not self.filtered:
            return DisplayState.NO_MATCHES
        return DisplayState.RESULTS

    @property
    def show_search(self) -> bool:
        return bool(self.repos)

    @property
    def summary(self) -> str:
        return found_label(len(self.filtered))

    @property
    def empty_message(self) -> str:
        return (
            f'No repositories with GitHub Pages were found for user "{self.fetched_for}". '
            "Make sure you have repositories with GitHub Pages enabled."
        )

    def grid(self) -> List[GridItem]:
        # every fetched repo is rendered so the in-page search can reveal the ones `q` hides
        term = normalize_term(self.search_term)
        username = self.fetched_for or self.username.strip()
        return [
            GridItem(
                card=build_card(repo, username),
                visible=not term or matches(repo, term),
                search_name=repo.name.lower(),
                search_description=(repo.description or "").lower(),
            )
            for repo in self.repos
        ]
