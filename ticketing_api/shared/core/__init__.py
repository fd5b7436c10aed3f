"""
Core Module

Cross-cutting pieces shared by every layer:
- Structured logging (structlog)
- Exception taxonomy mapped to HTTP status codes

Usage:
======
    from ticketing_api.shared.core import get_logger, NotFoundError

    logger = get_logger("ticketing.venues")
    raise NotFoundError("Venue", venue_id)
"""

from ticketing_api.shared.core.logging import (
    logger,
    get_logger,
    log_context,
    clear_log_context,
)
from ticketing_api.shared.core.exceptions import (
    TicketingException,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    UserNotFoundError,
    VenueNotFoundError,
    EventNotFoundError,
    TicketNotFoundError,
    OrderNotFoundError,
    ValidationError,
    ConflictError,
    DuplicateResourceError,
    InvalidStatusTransitionError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    # Exceptions
    "TicketingException",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "UserNotFoundError",
    "VenueNotFoundError",
    "EventNotFoundError",
    "TicketNotFoundError",
    "OrderNotFoundError",
    "ValidationError",
    "ConflictError",
    "DuplicateResourceError",
    "InvalidStatusTransitionError",
]
