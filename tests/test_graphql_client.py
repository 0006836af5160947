"""Tests for the GraphQL client over a mocked HTTP transport."""

import json

import httpx
import pytest
from tenacity import wait_none

from github_activity.config import Config
from github_activity.exceptions import (
    AuthenticationError,
    ConfigurationError,
    GitHubAPIError,
    GitHubGraphQLError,
)
from github_activity.services.github_graphql_client import GitHubGraphQLClient
from github_activity.services.queries import Connection

GRAPHQL_URL = "https://api.github.com/graphql"


@pytest.fixture(autouse=True)
def no_retry_wait(monkeypatch):
    monkeypatch.setattr(GitHubGraphQLClient._post.retry, "wait", wait_none())


def _client(handler, token="test_token"):
    config = Config(github_token=token, github_graphql_url=GRAPHQL_URL)
    return GitHubGraphQLClient(config=config, http_transport=httpx.MockTransport(handler))


class TestExecute:
    """Tests for GitHubGraphQLClient.execute."""

    @pytest.mark.asyncio
    async def test_returns_data(self):
        """Test that the data object is returned."""
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, json={"data": {"user": {"login": "octocat"}}})

        async with _client(handler) as client:
            data = await client.execute(
                Connection.ISSUES.operation_name,
                {"username": "octocat", "first": 25, "after": None},
            )

        assert data == {"user": {"login": "octocat"}}
        assert len(requests) == 1

        request = requests[0]
        assert str(request.url) == GRAPHQL_URL
        assert request.headers["Authorization"] == "Bearer test_token"
        assert request.headers["User-Agent"].startswith("github-activity/")

        body = json.loads(request.content)
        assert body["operationName"] == Connection.ISSUES.operation_name
        assert "issueContributions" in body["query"]
        assert body["variables"]["username"] == "octocat"

    @pytest.mark.asyncio
    async def test_unknown_operation(self):
        """Test that only known operations are sent."""
        async with _client(lambda request: httpx.Response(200, json={})) as client:
            with pytest.raises(ValueError):
                await client.execute("DropTables", {})

    @pytest.mark.asyncio
    async def test_graphql_errors(self):
        """Test that a GraphQL errors array raises."""

        def handler(request):
            return httpx.Response(
                200,
                json={"data": None, "errors": [{"message": "Field 'x' doesn't exist"}]},
            )

        async with _client(handler) as client:
            with pytest.raises(GitHubGraphQLError, match="doesn't exist") as exc_info:
                await client.execute(Connection.BASE.operation_name, {})

        assert exc_info.value.errors == [{"message": "Field 'x' doesn't exist"}]

    @pytest.mark.asyncio
    async def test_unauthorized(self):
        """Test that a 401 raises AuthenticationError."""
        async with _client(lambda request: httpx.Response(401, text="Bad credentials")) as client:
            with pytest.raises(AuthenticationError) as exc_info:
                await client.execute(Connection.BASE.operation_name, {})

        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_client_error_status(self):
        """Test that other non-200 responses raise GitHubAPIError."""
        async with _client(lambda request: httpx.Response(403, text="Forbidden")) as client:
            with pytest.raises(GitHubAPIError) as exc_info:
                await client.execute(Connection.BASE.operation_name, {})

        assert exc_info.value.status_code == 403

    @pytest.mark.asyncio
    async def test_invalid_json(self):
        """Test that a non-JSON body raises GitHubAPIError."""
        async with _client(lambda request: httpx.Response(200, text="<html>")) as client:
            with pytest.raises(GitHubAPIError, match="not valid JSON"):
                await client.execute(Connection.BASE.operation_name, {})

    @pytest.mark.asyncio
    async def test_server_error_is_retried(self):
        """Test that a transient 5xx is retried."""
        responses = [
            httpx.Response(502, text="Bad gateway"),
            httpx.Response(200, json={"data": {"ok": True}}),
        ]

        async with _client(lambda request: responses.pop(0)) as client:
            data = await client.execute(Connection.BASE.operation_name, {})

        assert data == {"ok": True}
        assert responses == []

    @pytest.mark.asyncio
    async def test_server_error_gives_up(self):
        """Test that persistent 5xx responses surface as GitHubAPIError."""
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(503, text="Unavailable")

        async with _client(handler) as client:
            with pytest.raises(GitHubAPIError) as exc_info:
                await client.execute(Connection.BASE.operation_name, {})

        assert exc_info.value.status_code == 503
        assert len(calls) == 3

    @pytest.mark.asyncio
    async def test_connection_error(self):
        """Test that network failures surface as GitHubAPIError."""

        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        async with _client(handler) as client:
            with pytest.raises(GitHubAPIError, match="request failed"):
                await client.execute(Connection.BASE.operation_name, {})

    @pytest.mark.asyncio
    async def test_missing_token(self):
        """Test that requests need a token."""
        async with _client(lambda request: httpx.Response(200, json={}), token=None) as client:
            with pytest.raises(ConfigurationError):
                await client.execute(Connection.BASE.operation_name, {})
