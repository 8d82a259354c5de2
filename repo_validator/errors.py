"""Validation error type and error response helpers for the GitHub URL validator."""

from enum import Enum
from typing import Dict, Any, Optional
import logging

logger = logging.getLogger(__name__)


class ValidationErrorKind(str, Enum):
    """What went wrong while validating a repository URL."""

    MALFORMED_URL = "malformed_url"
    WRONG_HOST = "wrong_host"
    MISSING_PATH_SEGMENTS = "missing_path_segments"
    EMPTY_SEGMENT = "empty_segment"
    REQUEST_FAILED = "request_failed"
    TRANSPORT_FAILED = "transport_failed"
    INVALID_RESPONSE = "invalid_response"


class GitHubValidationError(Exception):
    """
    Single error type for every validation failure.

    The failure is identified by ``kind``; ``cause`` holds the underlying
    exception when one triggered the failure.
    """

    def __init__(
        self,
        kind: ValidationErrorKind,
        message: str,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        return f"GitHubValidationError(kind={self.kind.value!r}, message={self.message!r})"


def create_error_response(message: str) -> Dict[str, Any]:
    """
    Creates standardized error response.

    Args:
        message: Error description

    Returns:
        Dict with status="error" and message
    """
    logger.error(f"Error response: {message}")
    return {
        "status": "error",
        "message": message
    }
