"""FastAPI application for the GitHub repository validator."""

import logging
import time
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from repo_validator.logging_config import setup_logging
from repo_validator.models import ValidateRequest, ValidateResponse, ErrorResponse
from repo_validator.repository_validator import validate_github_repository_url
from repo_validator.errors import create_error_response

# Setup logging on module load
setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info("Starting GitHub repository validator API")
    yield
    logger.info("Shutting down GitHub repository validator API")


app = FastAPI(
    title="GitHub Repository Validator",
    description="Checks whether a URL points to an existing GitHub repository",
    version="1.0.0",
    lifespan=lifespan
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle Pydantic validation errors."""
    errors = exc.errors()
    if errors:
        message = errors[0].get("msg", "Validation error")
    else:
        message = "Invalid request"

    logger.warning(f"Validation error: {message}")
    return JSONResponse(
        status_code=400,
        content=create_error_response(message)
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content=create_error_response("An unexpected error occurred")
    )


@app.post(
    "/validate",
    response_model=ValidateResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing or empty URL"},
        500: {"model": ErrorResponse, "description": "Unexpected server error"},
    }
)
async def validate(request: ValidateRequest) -> ValidateResponse:
    """
    Check a GitHub repository URL.

    ``exists`` is False both for missing repositories and for URLs that
    could not be checked; the reason is only visible in the server logs.
    """
    start_time = time.time()
    github_url = request.github_url
    logger.info(f"Received validate request for: {github_url}")

    exists = await validate_github_repository_url(github_url)

    duration = time.time() - start_time
    logger.info(f"Validated {github_url} in {duration:.2f}s: exists={exists}")
    return ValidateResponse(github_url=github_url, exists=exists)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
