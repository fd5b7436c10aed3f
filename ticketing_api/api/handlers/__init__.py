"""
API Handlers

Route handlers for the Ticketing API.

Handlers follow the pattern:
- Parse HTTP requests
- Call service methods
- Wrap results in the {"data", "errors"} envelope

All business logic is delegated to the service layer.
"""

from ticketing_api.api.handlers import (
    health_handler,
    user_handler,
    venue_handler,
    event_handler,
    ticket_handler,
    order_handler,
)

__all__ = [
    "health_handler",
    "user_handler",
    "venue_handler",
    "event_handler",
    "ticket_handler",
    "order_handler",
]
