"""URL parsing for GitHub repository URLs."""

from dataclasses import dataclass
from urllib.parse import urlsplit

from repo_validator.errors import GitHubValidationError, ValidationErrorKind

GITHUB_HOST = "github.com"
MIN_PATH_SEGMENTS = 2
SPECIAL_SCHEMES = ("http", "https")


@dataclass(frozen=True)
class RepoInfo:
    """Information extracted from a GitHub repository URL."""
    owner: str
    repo: str


def parse_github_url(url: str) -> RepoInfo:
    """
    Parses a GitHub repository URL and extracts owner/repo.

    Args:
        url: GitHub repository URL, e.g. https://github.com/psf/requests.git

    Returns:
        RepoInfo with owner and repo name (``.git`` suffix removed)

    Raises:
        GitHubValidationError: For malformed URLs, non-GitHub hosts,
            missing path segments or empty owner/repo values
    """
    try:
        url = url.strip()
        parsed = urlsplit(url)
        if parsed.scheme in SPECIAL_SCHEMES and "\\" in url:
            # browsers read backslashes in http(s) URLs as path separators
            url = url.replace("\\", "/")
            parsed = urlsplit(url)
        hostname = parsed.hostname
        # port is parsed lazily and raises on non-numeric or out-of-range values
        _ = parsed.port
    except (TypeError, ValueError, AttributeError) as e:
        raise GitHubValidationError(
            ValidationErrorKind.MALFORMED_URL, "Failed to parse GitHub URL", e
        ) from e

    if not parsed.scheme or not parsed.netloc:
        raise GitHubValidationError(
            ValidationErrorKind.MALFORMED_URL, f"Not an absolute URL: {url!r}"
        )

    if hostname != GITHUB_HOST:
        raise GitHubValidationError(
            ValidationErrorKind.WRONG_HOST, "URL must be a GitHub repository URL"
        )

    segments = [segment for segment in parsed.path.split("/") if segment]
    if len(segments) < MIN_PATH_SEGMENTS:
        raise GitHubValidationError(
            ValidationErrorKind.MISSING_PATH_SEGMENTS,
            "URL must contain both owner and repository name",
        )

    owner = segments[0]
    repo = segments[1]
    if repo.endswith(".git"):
        repo = repo[:-4]

    if not owner or not repo:
        raise GitHubValidationError(
            ValidationErrorKind.EMPTY_SEGMENT, "Invalid owner or repository name in URL"
        )

    return RepoInfo(owner=owner, repo=repo)
