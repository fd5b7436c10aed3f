"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /health, /ready, /live  → Health check endpoints
    /users                  → Registration, login, profile, password reset
    /venues                 → Venue catalog
    /events                 → Event catalog
    /tickets                → Ticket issuance and search
    /orders                 → Purchases

Usage:
======
    from ticketing_api.api.routes import register_routes

    app = FastAPI()
    register_routes(app)
"""

from fastapi import FastAPI

from ticketing_api.api.handlers import (
    event_handler,
    health_handler,
    order_handler,
    ticket_handler,
    user_handler,
    venue_handler,
)


def register_routes(app: FastAPI) -> None:
    """
    Register all API routes.

    Args:
        app: FastAPI application instance
    """
    # Health check endpoints (no prefix, root level)
    app.include_router(
        health_handler.router,
        tags=["Health"],
    )

    app.include_router(
        user_handler.router,
        prefix="/users",
        tags=["Users"],
    )

    app.include_router(
        venue_handler.router,
        prefix="/venues",
        tags=["Venues"],
    )

    app.include_router(
        event_handler.router,
        prefix="/events",
        tags=["Events"],
    )

    app.include_router(
        ticket_handler.router,
        prefix="/tickets",
        tags=["Tickets"],
    )

    app.include_router(
        order_handler.router,
        prefix="/orders",
        tags=["Orders"],
    )
