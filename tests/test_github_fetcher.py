"""Tests for GitHub fetcher."""

import asyncio

import httpx
import pytest
from repo_validator.errors import GitHubValidationError, ValidationErrorKind
from repo_validator.tools.github_fetcher import GitHubFetcher, check_repository_exists


def make_fetcher(handler) -> GitHubFetcher:
    return GitHubFetcher(transport=httpx.MockTransport(handler))


def run_check(handler, owner: str = "owner", repo: str = "repo") -> bool:
    async def check():
        async with make_fetcher(handler) as fetcher:
            return await fetcher.repository_exists(owner, repo)

    return asyncio.run(check())


class TestRepositoryExists:
    """Unit tests for GitHubFetcher.repository_exists."""

    def test_existing_repository(self):
        """Test metadata body means the repository exists."""
        def handler(request):
            return httpx.Response(200, json={"name": "requests", "full_name": "psf/requests"})

        assert run_check(handler, "psf", "requests") is True

    def test_missing_repository(self):
        """Test GitHub's Not Found body means the repository is missing."""
        def handler(request):
            return httpx.Response(404, json={"message": "Not Found"})

        assert run_check(handler) is False

    def test_other_message_counts_as_existing(self):
        """Test only the exact Not Found message signals absence."""
        def handler(request):
            return httpx.Response(200, json={"message": "Moved Permanently"})

        assert run_check(handler) is True

    def test_not_found_is_case_sensitive(self):
        """Test message comparison is exact."""
        def handler(request):
            return httpx.Response(404, json={"message": "not found"})

        assert run_check(handler) is True

    def test_request_url_and_headers(self):
        """Test the request targets the repos endpoint with fixed headers."""
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={})

        run_check(handler, "psf", "requests")

        request = seen[0]
        assert request.method == "GET"
        assert str(request.url) == "https://api.github.com/repos/psf/requests"
        assert request.headers["Accept"] == "application/vnd.github.v3+json"
        assert request.headers["User-Agent"] == "github-repo-validator/1.0.0"

    def test_server_error_raises(self):
        """Test 500 is a request failure."""
        def handler(request):
            return httpx.Response(500, json={"message": "Server Error"})

        with pytest.raises(GitHubValidationError, match="status 500") as exc_info:
            run_check(handler)
        assert exc_info.value.kind is ValidationErrorKind.REQUEST_FAILED

    def test_rate_limit_is_request_failure(self):
        """Test exhausted rate limit is reported but not special-cased."""
        def handler(request):
            return httpx.Response(
                403,
                json={"message": "API rate limit exceeded"},
                headers={"X-RateLimit-Remaining": "0"},
            )

        with pytest.raises(GitHubValidationError, match="rate limit exhausted") as exc_info:
            run_check(handler)
        assert exc_info.value.kind is ValidationErrorKind.REQUEST_FAILED

    def test_transport_error_wrapped(self):
        """Test connection failures keep the original error as cause."""
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(GitHubValidationError) as exc_info:
            run_check(handler)
        assert exc_info.value.kind is ValidationErrorKind.TRANSPORT_FAILED
        assert isinstance(exc_info.value.cause, httpx.ConnectError)

    def test_invalid_json_wrapped(self):
        """Test non-JSON body is an invalid response."""
        def handler(request):
            return httpx.Response(200, text="<html>oops</html>")

        with pytest.raises(GitHubValidationError) as exc_info:
            run_check(handler)
        assert exc_info.value.kind is ValidationErrorKind.INVALID_RESPONSE
        assert exc_info.value.cause is not None

    def test_non_object_body_counts_as_existing(self):
        """Test JSON that is not an object has no Not Found message."""
        def handler(request):
            return httpx.Response(200, json=["not", "a", "mapping"])

        assert run_check(handler) is True

    def test_odd_typed_fields_ignored(self):
        """Test fields other than message are not type-checked."""
        def handler(request):
            return httpx.Response(200, json={"name": 5, "full_name": ["o", "r"], "private": "no"})

        assert run_check(handler) is True

    def test_empty_404_body_wrapped(self):
        """Test 404 without a JSON body is an invalid response."""
        def handler(request):
            return httpx.Response(404, text="")

        with pytest.raises(GitHubValidationError) as exc_info:
            run_check(handler)
        assert exc_info.value.kind is ValidationErrorKind.INVALID_RESPONSE


class TestClientLifecycle:
    """Tests for client creation and cleanup."""

    def test_close_releases_client(self):
        """Test close drops the underlying client."""
        async def scenario():
            fetcher = make_fetcher(lambda request: httpx.Response(200, json={}))
            await fetcher.repository_exists("owner", "repo")
            assert fetcher._client is not None
            await fetcher.close()
            return fetcher

        fetcher = asyncio.run(scenario())
        assert fetcher._client is None

    def test_client_reused_between_calls(self):
        """Test one client serves consecutive lookups."""
        async def scenario():
            async with make_fetcher(lambda request: httpx.Response(200, json={})) as fetcher:
                await fetcher.repository_exists("a", "b")
                first = fetcher._client
                await fetcher.repository_exists("c", "d")
                return first is fetcher._client

        assert asyncio.run(scenario()) is True

    def test_timeout_passed_to_client(self):
        """Test explicit timeout reaches the httpx client."""
        async def scenario():
            async with GitHubFetcher(timeout=3) as fetcher:
                client = await fetcher._get_client()
                return client.timeout

        timeout = asyncio.run(scenario())
        assert timeout.connect == 3
        assert timeout.read == 3


class TestCheckRepositoryExists:
    """Tests for the module-level helper."""

    def test_uses_short_lived_fetcher(self, monkeypatch):
        """Test helper delegates to a fetcher and closes it."""
        calls = []

        async def fake_exists(self, owner, repo):
            calls.append((owner, repo))
            return True

        async def fake_close(self):
            calls.append("closed")

        monkeypatch.setattr(GitHubFetcher, "repository_exists", fake_exists)
        monkeypatch.setattr(GitHubFetcher, "close", fake_close)

        assert asyncio.run(check_repository_exists("psf", "requests")) is True
        assert calls == [("psf", "requests"), "closed"]
