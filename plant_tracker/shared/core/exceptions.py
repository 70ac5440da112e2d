# 📄 File: plant_tracker/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# This file defines the special error types the plant tracker uses to say what went wrong,
# like "that plant does not exist" or "the watering frequency must be at least one day".
# 🧪 Purpose (Technical Summary):
# Custom exception hierarchy carrying HTTP status codes, error codes and details,
# serialisable for API responses and raised by the domain services.
# 🔗 Dependencies:
# FastAPI HTTP status constants, typing
# 🔄 Connected Modules / Calls From:
# Domain models and services, presentation dependencies, plant_tracker.main exception handlers

from typing import Any, Dict, Optional
from fastapi import status


class PlantCareException(Exception):
    """
    Base exception class for the plant tracker.
    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__.upper()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format."""
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
                "status_code": self.status_code
            }
        }


# =============================================================================
# AUTHENTICATION EXCEPTIONS
# =============================================================================

class AuthenticationError(PlantCareException):
    """
    Exception raised when the authentication flag is not set.
    """

    def __init__(
        self,
        message: str = "Authentication required",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            status_code=status.HTTP_401_UNAUTHORIZED,
            details=details,
            error_code="AUTHENTICATION_ERROR"
        )


# =============================================================================
# VALIDATION & DATA EXCEPTIONS
# =============================================================================

class ValidationError(PlantCareException):
    """
    Exception raised for data validation failures.
    Raised before any store is touched.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        value: Optional[Any] = None,
        constraint: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)
        if constraint:
            details["constraint"] = constraint

        super().__init__(
            message=message,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            details=details,
            error_code="VALIDATION_ERROR"
        )


class NotFoundError(PlantCareException):
    """
    Exception raised when a referenced identifier does not exist.
    """

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if resource_id:
            details["resource_id"] = resource_id

        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details=details,
            error_code="NOT_FOUND"
        )


# =============================================================================
# PLANT CARE SPECIFIC EXCEPTIONS
# =============================================================================

class PlantNotFoundError(NotFoundError):
    """
    Exception raised when plant is not found.
    Specialized NotFoundError for plant resources.
    """

    def __init__(self, plant_id: str, message: Optional[str] = None):
        if not message:
            message = f"Plant not found: {plant_id}"

        super().__init__(
            message=message,
            resource_type="plant",
            resource_id=plant_id
        )


class NothingToRestoreError(NotFoundError):
    """Raised by the API when the undo buffer is empty or its window has passed."""

    def __init__(self, message: str = "No deleted plant to restore"):
        super().__init__(message=message, resource_type="deleted_plant")


# =============================================================================
# EXCEPTION UTILITIES
# =============================================================================

def validation_error_from_pydantic(exc: Any, message: str = "Validation failed") -> ValidationError:
    """
    Build a ValidationError from a pydantic ValidationError.

    The first failing field is promoted to ``field``/``constraint``; the full
    list of errors is kept under ``details["errors"]``.
    """
    errors = exc.errors() if hasattr(exc, "errors") else []
    details: Dict[str, Any] = {
        "errors": [
            {
                "field": ".".join(str(part) for part in error.get("loc", ())),
                "message": error.get("msg", ""),
            }
            for error in errors
        ]
    }

    first = errors[0] if errors else {}
    field = ".".join(str(part) for part in first.get("loc", ())) or None
    constraint = first.get("msg")

    return ValidationError(
        message=message,
        field=field,
        constraint=constraint,
        details=details
    )

