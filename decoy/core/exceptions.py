"""
Custom exceptions and error handling for the Decoy admin.

Admin errors carry a severity, a category and the HTTP status they are
rendered with, so the provider's exception handler can turn any of them
into the same JSON body.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from fastapi import HTTPException, status
from pydantic import BaseModel


class ErrorSeverity(str, Enum):
    """Error severity levels for categorization."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """Which part of the admin failed."""
    VALIDATION = "validation"
    ANCESTRY = "ancestry"
    ROUTING = "routing"
    AUTHENTICATION = "authentication"
    CONFIGURATION = "configuration"


class ErrorResponse(BaseModel):
    """Standard error response format."""
    error: str
    details: Dict[str, Any] = {}
    severity: str = "medium"
    category: str = "validation"


class DecoyException(Exception):
    """
    Base exception for the Decoy admin.

    Attributes:
        message: Human readable description.
        details: Structured context for logs and the response body.
        severity: How bad it is.
        category: Which part of the admin raised it.
        http_status: Status used when the exception reaches the client.
    """

    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        category: ErrorCategory = ErrorCategory.VALIDATION,
    ):
        self.message = message
        self.details = details or {}
        self.severity = severity
        self.category = category
        super().__init__(self.message)


# ==================== HTTP Exceptions ====================

class HTTPUnauthorizedException(HTTPException):
    """401, with the bearer challenge header."""

    def __init__(self, detail: str = "Unauthorized"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class HTTPForbiddenException(HTTPException):
    """403, the auth strategy refused the action."""

    def __init__(self, detail: str = "Forbidden"):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class HTTPNotFoundException(HTTPException):
    """404, no controller answers the path."""

    def __init__(self, detail: str = "Not Found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


# ==================== Ancestry Exceptions ====================

class AncestryError(DecoyException):
    """
    Raised when the parent/child relationship between controllers
    can't be deduced.

    These are logic errors: either a caller asked for a parent that the
    route doesn't have, or a naming convention didn't match and the
    controller needs an explicit relationship declared.
    """

    def __init__(self, message: str, controller: Optional[str] = None, **kwargs):
        details = kwargs.pop("details", {})
        details["controller"] = controller
        super().__init__(
            message=message,
            details=details,
            severity=ErrorSeverity.HIGH,
            category=ErrorCategory.ANCESTRY,
            **kwargs,
        )


class ParentControllerError(AncestryError):
    """Raised when the parent controller is requested for a top level controller."""

    def __init__(self, controller: str, **kwargs):
        super().__init__("Error getting the parent controller.", controller=controller, **kwargs)


class RelationshipMissingError(AncestryError):
    """Raised when no accessor matches any of the conventional relationship names."""

    def __init__(
        self,
        side: str,  # "parent" or "child"
        looked_for: List[str],
        controller: Optional[str] = None,
        model: Optional[str] = None,
    ):
        super().__init__(
            f"{side.capitalize()} relationship missing, looking for: "
            f"{', '.join(looked_for)}. This controller is: {controller}. "
            f"The model is: {model}",
            controller=controller,
            details={"side": side, "looked_for": looked_for, "model": model},
        )


# ==================== Routing Exceptions ====================

class ControllerNotFoundError(DecoyException):
    """Raised when a controller name or slug isn't registered."""

    http_status = status.HTTP_404_NOT_FOUND

    def __init__(self, name: str):
        super().__init__(
            message=f"Controller could not be found: {name}",
            details={"name": name},
            severity=ErrorSeverity.LOW,
            category=ErrorCategory.ROUTING,
        )


# ==================== Auth Exceptions ====================

class AuthConfigurationError(DecoyException):
    """Raised at boot when the configured auth class is unusable."""

    def __init__(self, message: str, auth_class: str):
        super().__init__(
            message=f"{message}: {auth_class}",
            details={"auth_class": auth_class},
            severity=ErrorSeverity.CRITICAL,
            category=ErrorCategory.CONFIGURATION,
        )


# ==================== Exception Handlers ====================

def format_exception(e: DecoyException) -> ErrorResponse:
    """Format an admin exception into the standard error response."""
    return ErrorResponse(
        error=e.message,
        details=e.details,
        severity=e.severity.value,
        category=e.category.value,
    )


def status_code_for(e: DecoyException) -> int:
    """Pick the HTTP status an unhandled admin exception is rendered with."""
    return e.http_status
