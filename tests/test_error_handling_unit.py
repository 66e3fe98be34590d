"""Unit tests for API error responses."""

import json

from fastapi import status

from src.api.error_handlers import (
    BoardError,
    ErrorResponse,
    create_internal_error,
    create_subscription_error,
    create_tip_index_error,
    create_validation_error_response,
)
from src.services.subscription_ledger import (
    DuplicateSubscriptionError,
    InvalidEmailFormatError,
)


class TestErrorResponse:
    """Tests for the standard error envelope."""

    def test_to_dict_without_details(self):
        response = ErrorResponse(BoardError.INVALID_FORMAT, "Bad email")
        assert response.to_dict() == {"error": "INVALID_FORMAT", "message": "Bad email"}

    def test_to_dict_with_details(self):
        response = ErrorResponse(BoardError.VALIDATION_ERROR, "Bad", details={"email": "missing"})
        assert response.to_dict()["details"] == {"email": "missing"}

    def test_to_json_response(self):
        response = create_internal_error().to_json_response()
        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert json.loads(response.body) == {
            "error": "INTERNAL_ERROR",
            "message": "An unexpected error occurred",
        }


class TestSubscriptionErrors:
    """Tests for mapping rejected subscriptions."""

    def test_invalid_format(self):
        response = create_subscription_error(InvalidEmailFormatError("nope"))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.error_code == BoardError.INVALID_FORMAT
        assert response.message == "❌ Please enter a valid email address."

    def test_duplicate(self):
        response = create_subscription_error(DuplicateSubscriptionError("a@example.com"))

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.error_code == BoardError.EMAIL_EXISTS
        assert response.message == "📧 This email is already subscribed!!"


class TestValidationErrors:
    """Tests for request validation errors."""

    def test_field_paths_are_joined(self):
        response = create_validation_error_response(
            [{"loc": ("body", "email"), "msg": "Field required", "type": "missing"}]
        )

        assert response.error_code == BoardError.VALIDATION_ERROR
        assert response.details == {"body.email": "Field required"}

    def test_tip_index_error(self):
        response = create_tip_index_error(7, 5)

        assert response.error_code == BoardError.INVALID_TIP_INDEX
        assert response.details == {"index": 7, "count": 5}
