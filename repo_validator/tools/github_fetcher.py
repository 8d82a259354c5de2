"""GitHub API client for checking repository existence."""

import httpx
from typing import Any, Dict, Optional
import logging
from repo_validator.errors import GitHubValidationError, ValidationErrorKind
from repo_validator.models import GitHubApiResponse

logger = logging.getLogger(__name__)


class GitHubFetcher:
    """Looks up repository metadata on the GitHub REST API."""

    BASE_URL = "https://api.github.com"
    USER_AGENT = "github-repo-validator/1.0.0"
    ACCEPT_HEADER = "application/vnd.github.v3+json"
    NOT_FOUND_MESSAGE = "Not Found"

    def __init__(
        self,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            timeout: Request timeout in seconds. When omitted httpx's default applies.
            transport: Custom httpx transport (e.g. httpx.MockTransport in tests)
        """
        self.timeout = timeout
        self.transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "GitHubFetcher":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def _get_client(self) -> httpx.AsyncClient:
        """Gets or creates the HTTP client."""
        if self._client is None:
            kwargs: Dict[str, Any] = {
                "headers": {
                    "Accept": self.ACCEPT_HEADER,
                    "User-Agent": self.USER_AGENT,
                },
            }
            if self.timeout is not None:
                kwargs["timeout"] = self.timeout
            if self.transport is not None:
                kwargs["transport"] = self.transport
            self._client = httpx.AsyncClient(**kwargs)
        return self._client

    async def close(self) -> None:
        """Closes the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def repository_exists(self, owner: str, repo: str) -> bool:
        """
        Checks whether a repository exists.

        Args:
            owner: Repository owner
            repo: Repository name

        Returns:
            False if GitHub answers with its "Not Found" message, True otherwise

        Raises:
            GitHubValidationError: On non-404 error statuses, transport
                failures or an unparseable response body
        """
        client = await self._get_client()
        url = f"{self.BASE_URL}/repos/{owner}/{repo}"

        try:
            response = await client.get(url)
        except httpx.HTTPError as e:
            raise GitHubValidationError(
                ValidationErrorKind.TRANSPORT_FAILED,
                "Failed to check repository existence",
                e,
            ) from e

        if not response.is_success and response.status_code != 404:
            message = (
                f"GitHub API request failed with status "
                f"{response.status_code}: {response.reason_phrase}"
            )
            if response.status_code == 403 and response.headers.get("x-ratelimit-remaining") == "0":
                message += " (rate limit exhausted)"
            raise GitHubValidationError(ValidationErrorKind.REQUEST_FAILED, message)

        try:
            body = response.json()
        except ValueError as e:
            raise GitHubValidationError(
                ValidationErrorKind.INVALID_RESPONSE,
                f"Unexpected response body for {owner}/{repo}",
                e,
            ) from e

        # a JSON value that is not an object carries no message
        data = GitHubApiResponse.model_validate(body if isinstance(body, dict) else {})
        exists = data.message != self.NOT_FOUND_MESSAGE
        logger.debug(f"Repository {owner}/{repo} exists: {exists}")
        return exists


async def check_repository_exists(owner: str, repo: str) -> bool:
    """Performs a single lookup with a short-lived fetcher."""
    async with GitHubFetcher() as fetcher:
        return await fetcher.repository_exists(owner, repo)
