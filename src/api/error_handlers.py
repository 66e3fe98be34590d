"""Centralized error handling for the tip board API."""

from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.services.subscription_ledger import (
    DuplicateSubscriptionError,
    SubscriptionError,
)
from src.utils.logger import StructuredLogger

logger = StructuredLogger("ErrorHandlers")


class BoardError:
    """Standard error codes for the tip board API."""

    # Subscription errors
    INVALID_FORMAT = "INVALID_FORMAT"
    EMAIL_EXISTS = "EMAIL_EXISTS"

    # Tip navigation errors
    INVALID_TIP_INDEX = "INVALID_TIP_INDEX"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Generic errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ErrorResponse:
    """Standardized error response format."""

    def __init__(
        self,
        error_code: str,
        message: str,
        details: dict[str, Any] | list[str] | None = None,
        status_code: int = status.HTTP_400_BAD_REQUEST,
    ):
        """
        Initialize error response.

        Args:
            error_code: Standard error code from BoardError class
            message: Human-readable error message
            details: Additional error details (field-specific errors, etc.)
            status_code: HTTP status code
        """
        self.error_code = error_code
        self.message = message
        self.details = details
        self.status_code = status_code

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON response."""
        response = {
            "error": self.error_code,
            "message": self.message,
        }
        if self.details:
            response["details"] = self.details
        return response

    def to_json_response(self) -> JSONResponse:
        return JSONResponse(status_code=self.status_code, content=self.to_dict())


def create_validation_error_response(errors: list[dict[str, Any]]) -> ErrorResponse:
    """
    Create standardized validation error response from Pydantic validation errors.

    Args:
        errors: List of validation errors from Pydantic

    Returns:
        ErrorResponse with field-specific validation errors
    """
    field_errors = {}
    for error in errors:
        field_path = ".".join(str(loc) for loc in error["loc"])
        field_errors[field_path] = error["msg"]

    return ErrorResponse(
        error_code=BoardError.VALIDATION_ERROR,
        message="Validation failed for one or more fields",
        details=field_errors,
        status_code=status.HTTP_400_BAD_REQUEST,
    )


def create_subscription_error(error: SubscriptionError) -> ErrorResponse:
    """
    Map a rejected subscription to its error response.

    The message is the same status text the page shows.
    """
    if isinstance(error, DuplicateSubscriptionError):
        return ErrorResponse(
            error_code=BoardError.EMAIL_EXISTS,
            message=error.user_message,
            status_code=status.HTTP_409_CONFLICT,
        )
    return ErrorResponse(
        error_code=BoardError.INVALID_FORMAT,
        message=error.user_message,
        status_code=status.HTTP_400_BAD_REQUEST,
    )


def create_tip_index_error(index: int, count: int) -> ErrorResponse:
    """Error for a tip selection outside the navigation dots."""
    return ErrorResponse(
        error_code=BoardError.INVALID_TIP_INDEX,
        message=f"Tip index {index} is out of range",
        details={"index": index, "count": count},
        status_code=status.HTTP_400_BAD_REQUEST,
    )


def create_internal_error(message: str = "An unexpected error occurred") -> ErrorResponse:
    return ErrorResponse(
        error_code=BoardError.INTERNAL_ERROR,
        message=message,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle FastAPI validation errors with standardized format."""
    return create_validation_error_response(exc.errors()).to_json_response()


async def subscription_exception_handler(
    request: Request, exc: SubscriptionError
) -> JSONResponse:
    """Handle rejected subscriptions with standardized format."""
    return create_subscription_error(exc).to_json_response()


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected failures and return a generic error."""
    logger.error(
        "Unhandled error while serving request",
        context={"path": request.url.path, "method": request.method},
        exception=exc,
    )
    return create_internal_error().to_json_response()


def register_error_handlers(app: FastAPI) -> None:
    """Attach the standard exception handlers to an app."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SubscriptionError, subscription_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
