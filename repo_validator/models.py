"""Pydantic models for GitHub API payloads and request/response validation."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Literal, Optional


class GitHubApiResponse(BaseModel):
    """Body returned by GET /repos/{owner}/{repo}. Only ``message`` is inspected."""

    model_config = ConfigDict(extra="allow")

    message: Optional[Any] = None
    name: Optional[Any] = None
    full_name: Optional[Any] = None
    private: Optional[Any] = None


class ValidateRequest(BaseModel):
    """Request model for the /validate endpoint."""

    github_url: str = Field(
        ...,
        description="URL of a GitHub repository",
        examples=["https://github.com/psf/requests"]
    )

    @field_validator("github_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("URL cannot be empty")
        return v.strip()


class ValidateResponse(BaseModel):
    """Response model for the /validate endpoint."""

    github_url: str = Field(..., description="URL that was checked")
    exists: bool = Field(..., description="Whether the URL points to an existing repository")


class ErrorResponse(BaseModel):
    """Response model for errors."""

    status: Literal["error"] = "error"
    message: str = Field(..., description="Error description")
