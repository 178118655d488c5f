"""
Pytest configuration and shared fixtures.
"""

import os

import django
import httpx
import pytest

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "pages_explorer.django_ui.settings")
django.setup()


# ============================================================================
# Data Fixtures
# ============================================================================

def _repo(id, name, has_pages=True, description=None, homepage=None, language=None, stars=0,
          updated_at="2026-10-07T12:00:00Z"):
    return {
        "id": id,
        "name": name,
        "full_name": f"octocat/{name}",
        "description": description,
        "html_url": f"https://github.com/octocat/{name}",
        "homepage": homepage,
        "has_pages": has_pages,
        "language": language,
        "stargazers_count": stars,
        "updated_at": updated_at,
        "fork": False,  # extra upstream field, ignored
    }


@pytest.fixture
def make_repo():
    """Factory for one upstream repository JSON object."""
    return _repo


@pytest.fixture
def repos_payload():
    """A listing mixing repositories with and without GitHub Pages."""
    return [
        _repo(1, "blog", description="My personal Blog built with Jekyll", language="HTML", stars=12),
        _repo(2, "dotfiles", has_pages=False, description="Shell config"),
        _repo(3, "docs-site", homepage="https://docs.example.com", language="TypeScript", stars=3),
        _repo(4, "Spoon-Knife", description="This repo is for demonstration purposes only."),
        _repo(5, "api-server", has_pages=False, language="Python"),
    ]


@pytest.fixture
def repo_models(repos_payload):
    from pages_explorer.services.models import RepoSummary

    return [RepoSummary.model_validate(r) for r in repos_payload]


@pytest.fixture
def pages_models(repo_models):
    return [r for r in repo_models if r.has_pages]


# ============================================================================
# HTTP Fixtures
# ============================================================================

@pytest.fixture
def github_transport():
    """Build an httpx.MockTransport answering every request with `status` and `payload`.

    Requests are recorded on the returned transport's `calls` list.
    """
    def factory(status=200, payload=None, exc=None):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            if exc is not None:
                raise exc(f"{exc.__name__} for tests", request=request)
            return httpx.Response(status, json=payload if payload is not None else [])

        transport = httpx.MockTransport(handler)
        transport.calls = calls
        return transport

    return factory
