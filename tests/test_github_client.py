"""
Tests for the GitHub client.
"""

import httpx
import pytest

from pages_explorer.services.github_client import GitHubClient
from pages_explorer.utils.errors import AppError


class TestCleanUsername:
    """Tests for username validation."""

    def test_strips_whitespace(self):
        assert GitHubClient.clean_username("  octocat ") == "octocat"

    @pytest.mark.parametrize("username", ["", "   ", None])
    def test_blank_rejected(self, username):
        with pytest.raises(AppError) as exc:
            GitHubClient.clean_username(username)
        assert exc.value.status_code == 400

    @pytest.mark.parametrize("username", ["../orgs/x", "a--b", "-lead", "trail-", "a" * 40, "octo cat"])
    def test_invalid_login_rejected(self, username):
        with pytest.raises(AppError) as exc:
            GitHubClient.clean_username(username)
        assert exc.value.status_code == 400
        assert "not a valid GitHub username" in exc.value.message

    @pytest.mark.parametrize("username", ["octocat", "my-org", "a", "A1-b2-C3", "a" * 39])
    def test_valid_login_accepted(self, username):
        assert GitHubClient.clean_username(username) == username


class TestListUserRepos:
    """Tests for GitHubClient.list_user_repos."""

    @pytest.mark.asyncio
    async def test_requests_single_page_of_100(self, github_transport, repos_payload):
        """The listing asks for one page of up to 100 repositories."""
        transport = github_transport(payload=repos_payload)
        client = GitHubClient(token="ghp_test", transport=transport)

        repos = await client.list_user_repos("octocat")
        await client.aclose()

        assert len(repos) == len(repos_payload)
        request = transport.calls[0]
        assert request.method == "GET"
        assert request.url.path == "/users/octocat/repos"
        assert request.url.params["per_page"] == "100"
        assert request.headers["Accept"] == "application/vnd.github+json"

    @pytest.mark.asyncio
    async def test_bearer_header_with_token(self, github_transport):
        transport = github_transport()
        client = GitHubClient(token="  ghp_test  ", transport=transport)

        await client.list_user_repos("octocat")
        await client.aclose()

        assert client.has_token
        assert transport.calls[0].headers["Authorization"] == "Bearer ghp_test"

    @pytest.mark.asyncio
    async def test_no_auth_header_without_token(self, github_transport):
        """A blank token counts as no token."""
        transport = github_transport()
        client = GitHubClient(token="   ", transport=transport)

        await client.list_user_repos("octocat")
        await client.aclose()

        assert not client.has_token
        assert "Authorization" not in transport.calls[0].headers

    @pytest.mark.asyncio
    async def test_parses_models_and_ignores_extra_fields(self, github_transport, make_repo):
        transport = github_transport(payload=[make_repo(7, "blog", homepage="https://example.com")])
        client = GitHubClient(token="", transport=transport)

        [repo] = await client.list_user_repos("octocat")
        await client.aclose()

        assert repo.id == 7
        assert repo.full_name == "octocat/blog"
        assert repo.homepage == "https://example.com"
        assert repo.has_pages is True
        assert repo.updated_at.year == 2026
        assert not hasattr(repo, "fork")

    @pytest.mark.asyncio
    async def test_invalid_username_makes_no_request(self, github_transport):
        transport = github_transport()
        client = GitHubClient(token="", transport=transport)

        with pytest.raises(AppError) as exc:
            await client.list_user_repos("../../rate_limit")
        await client.aclose()

        assert exc.value.status_code == 400
        assert transport.calls == []


class TestErrorClassification:
    """Non-success statuses map to user-facing messages."""

    @pytest.mark.asyncio
    async def test_403_with_token(self, github_transport):
        client = GitHubClient(token="ghp_test", transport=github_transport(status=403, payload={"message": "Bad credentials"}))

        with pytest.raises(AppError) as exc:
            await client.list_user_repos("octocat")
        await client.aclose()

        assert exc.value.status_code == 403
        assert exc.value.message.startswith("Failed to fetch repositories: 403.")
        assert "invalid or expired GitHub token" in exc.value.message
        assert "rate limiting" not in exc.value.message

    @pytest.mark.asyncio
    async def test_403_without_token(self, github_transport):
        client = GitHubClient(token="", transport=github_transport(status=403, payload={"message": "rate limit"}))

        with pytest.raises(AppError) as exc:
            await client.list_user_repos("octocat")
        await client.aclose()

        assert exc.value.status_code == 403
        assert "likely due to rate limiting" in exc.value.message
        assert "GITHUB_TOKEN" in exc.value.message

    @pytest.mark.asyncio
    async def test_500_is_generic(self, github_transport):
        client = GitHubClient(token="ghp_test", transport=github_transport(status=500, payload={}))

        with pytest.raises(AppError) as exc:
            await client.list_user_repos("octocat")
        await client.aclose()

        assert exc.value.status_code == 502
        assert exc.value.message == "Failed to fetch repositories: 500"

    @pytest.mark.asyncio
    async def test_404(self, github_transport):
        client = GitHubClient(token="", transport=github_transport(status=404, payload={"message": "Not Found"}))

        with pytest.raises(AppError) as exc:
            await client.list_user_repos("nobody-here")
        await client.aclose()

        assert exc.value.status_code == 404
        assert exc.value.message == "Failed to fetch repositories: 404"

    @pytest.mark.asyncio
    async def test_network_error(self, github_transport):
        client = GitHubClient(token="", transport=github_transport(exc=httpx.ConnectError))

        with pytest.raises(AppError) as exc:
            await client.list_user_repos("octocat")
        await client.aclose()

        assert exc.value.status_code == 502
        assert "could not reach GitHub (ConnectError)" in exc.value.message

    @pytest.mark.asyncio
    async def test_non_array_body(self, github_transport):
        client = GitHubClient(token="", transport=github_transport(payload={"message": "odd"}))

        with pytest.raises(AppError) as exc:
            await client.list_user_repos("octocat")
        await client.aclose()

        assert exc.value.status_code == 502
        assert exc.value.message == "Failed to fetch repositories: unexpected response from GitHub"

    @pytest.mark.asyncio
    async def test_malformed_entry(self, github_transport):
        client = GitHubClient(token="", transport=github_transport(payload=[{"id": "x", "name": "blog"}]))

        with pytest.raises(AppError) as exc:
            await client.list_user_repos("octocat")
        await client.aclose()

        assert exc.value.status_code == 502
        assert "unexpected response" in exc.value.message
