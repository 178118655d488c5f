# /utils/links.py
# Outbound links for a repository card: the live Pages site and the source repository.
from ..services.models import RepoSummary


def page_url(repo: RepoSummary, username: str) -> str:
    # homepage wins only when it is an absolute http(s) URL
    if repo.homepage and repo.homepage.startswith("http"):
        return repo.homepage
    return f"https://{username}.github.io/{repo.name}"


def repo_url(repo: RepoSummary) -> str:
    return repo.html_url
