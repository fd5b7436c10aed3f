"""
API Middleware

Components:
===========
- error_handler: Global exception handling into the response envelope
- request_context: Request id, method and path bound to log lines

Usage:
======
    from ticketing_api.api.middleware import setup_exception_handlers, setup_request_context

    app = FastAPI()
    setup_exception_handlers(app)
    setup_request_context(app)
"""

from ticketing_api.api.middleware.error_handler import setup_exception_handlers
from ticketing_api.api.middleware.request_context import setup_request_context

__all__ = [
    "setup_exception_handlers",
    "setup_request_context",
]
