"""Validates that a URL points to an existing GitHub repository."""

from dataclasses import dataclass
from typing import Optional
import logging

from repo_validator.errors import GitHubValidationError
from repo_validator.tools.github_fetcher import GitHubFetcher, check_repository_exists
from repo_validator.validators import RepoInfo, parse_github_url

logger = logging.getLogger(__name__)


@dataclass
class ValidationOutcome:
    """Result of a validation run, separating the answer from the failure."""

    exists: bool
    repo: Optional[RepoInfo] = None
    error: Optional[Exception] = None

    @property
    def is_ok(self) -> bool:
        return self.error is None


async def inspect_github_repository_url(
    url: str, fetcher: Optional[GitHubFetcher] = None
) -> ValidationOutcome:
    """
    Parses the URL and looks the repository up, capturing any failure.

    Args:
        url: GitHub repository URL
        fetcher: Fetcher to use; a short-lived one is created when omitted

    Returns:
        ValidationOutcome; ``error`` is set and ``exists`` is False on failure
    """
    repo_info: Optional[RepoInfo] = None
    try:
        repo_info = parse_github_url(url)
        if fetcher is None:
            exists = await check_repository_exists(repo_info.owner, repo_info.repo)
        else:
            exists = await fetcher.repository_exists(repo_info.owner, repo_info.repo)
    except Exception as e:
        return ValidationOutcome(exists=False, repo=repo_info, error=e)
    return ValidationOutcome(exists=exists, repo=repo_info)


async def validate_github_repository_url(
    url: str, fetcher: Optional[GitHubFetcher] = None
) -> bool:
    """
    Returns True if the URL refers to an existing GitHub repository.

    Never raises: failures are logged and reported as False.
    """
    outcome = await inspect_github_repository_url(url, fetcher)
    if outcome.is_ok:
        return outcome.exists

    error = outcome.error
    if isinstance(error, GitHubValidationError):
        cause = f" (caused by {error.cause!r})" if error.cause is not None else ""
        logger.error(f"GitHub validation error [{error.kind.value}]: {error.message}{cause}")
    else:
        logger.error(
            f"Unexpected error during GitHub URL validation: {error!r}",
            exc_info=error,
        )
    return False
