"""
Custom Exceptions

Application-specific exceptions with HTTP status codes and error codes.

Exception Hierarchy:
====================
    TicketingException (base)
       │
       ├── AuthenticationError (401)    ← Invalid credentials, token expired
       ├── AuthorizationError (403)     ← Authenticated but not allowed
       ├── NotFoundError (404)          ← No row matches a lookup
       │      ├── UserNotFoundError
       │      ├── VenueNotFoundError
       │      ├── EventNotFoundError
       │      ├── TicketNotFoundError
       │      └── OrderNotFoundError
       ├── ValidationError (400)        ← Malformed or out-of-range input
       └── ConflictError (409)          ← Uniqueness or state conflict
              ├── DuplicateResourceError
              └── InvalidStatusTransitionError

Anything that is not a TicketingException is treated as an internal error
(500) by the error handler middleware.

Usage:
======
    from ticketing_api.shared.core.exceptions import NotFoundError, ConflictError

    raise NotFoundError("Event", event_id)
    # {"data": null, "errors": {"code": "NOT_FOUND", "message": "Event with id '7' not found"}}

    raise ConflictError("Email already registered", details={"field": "email"})
"""

from typing import Any, Optional


class TicketingException(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (default 500)
        error_code: Machine-readable error code
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or "INTERNAL_ERROR"
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to the response envelope.

        Returns:
            Dictionary with `data` set to None and the error under `errors`
        """
        return {
            "data": None,
            "errors": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            },
        }


# ═══════════════════════════════════════════════════════════════════════════════
# AUTHENTICATION & AUTHORIZATION ERRORS (401, 403)
# ═══════════════════════════════════════════════════════════════════════════════


class AuthenticationError(TicketingException):
    """
    Authentication failed error (401 Unauthorized).

    Raised when:
    - Missing or invalid credentials
    - Token expired, malformed, or of the wrong type
    """

    def __init__(
        self,
        message: str = "Authentication failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=401,
            error_code="AUTHENTICATION_ERROR",
            details=details,
        )


class AuthorizationError(TicketingException):
    """Authorization failed error (403 Forbidden)."""

    def __init__(
        self,
        message: str = "Access denied",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=403,
            error_code="AUTHORIZATION_ERROR",
            details=details,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# NOT FOUND ERRORS (404)
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(TicketingException):
    """
    Resource not found error (404 Not Found).

    Single signal for "no row matches a lookup", raised by repositories.

    Example:
        raise NotFoundError("Venue", 12)
        # Message: "Venue with id '12' not found"
    """

    def __init__(
        self,
        resource: str,
        resource_id: Optional[Any] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        message = f"{resource} not found"
        if resource_id is not None:
            message = f"{resource} with id '{resource_id}' not found"
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details=details,
        )


class UserNotFoundError(NotFoundError):
    """User not found error."""

    def __init__(self, user_id: Any) -> None:
        super().__init__(resource="User", resource_id=user_id)


class VenueNotFoundError(NotFoundError):
    """Venue not found error."""

    def __init__(self, venue_id: Any) -> None:
        super().__init__(resource="Venue", resource_id=venue_id)


class EventNotFoundError(NotFoundError):
    """Event not found error."""

    def __init__(self, event_id: Any) -> None:
        super().__init__(resource="Event", resource_id=event_id)


class TicketNotFoundError(NotFoundError):
    """Ticket not found error."""

    def __init__(self, ticket_id: Any) -> None:
        super().__init__(resource="Ticket", resource_id=ticket_id)


class OrderNotFoundError(NotFoundError):
    """Order not found error."""

    def __init__(self, order_id: Any) -> None:
        super().__init__(resource="Order", resource_id=order_id)


# ═══════════════════════════════════════════════════════════════════════════════
# VALIDATION & CONFLICT ERRORS (400, 409)
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(TicketingException):
    """
    Validation error (400 Bad Request).

    Raised when input data fails a domain rule that pydantic can't express.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=400,
            error_code="VALIDATION_ERROR",
            details=details,
        )


class ConflictError(TicketingException):
    """
    Resource conflict error (409 Conflict).

    Example:
        raise ConflictError("Ticket already belongs to an order")
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=409,
            error_code="CONFLICT",
            details=details,
        )


class DuplicateResourceError(ConflictError):
    """Uniqueness violation, e.g. an email that is already registered."""

    def __init__(
        self,
        message: str = "Resource already exists",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, details=details)


class InvalidStatusTransitionError(ConflictError):
    """Order status change that the order lifecycle does not allow."""

    def __init__(self, current: str, target: str) -> None:
        super().__init__(
            message=f"Cannot change order status from '{current}' to '{target}'",
            details={"current_status": current, "target_status": target},
        )
