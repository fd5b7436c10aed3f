"""
Database Module

Async engine, session factory and request-scoped session dependency.

Architecture Overview:
======================
    FastAPI handler
        │  Depends(get_db)
        ▼
    AsyncSession (one per request, commit/rollback at the end)
        │  passed to services → repositories
        ▼
    PostgreSQL

Usage:
======
    from ticketing_api.shared.db import get_db

    @router.get("/venues/{venue_id}")
    async def get_venue(venue_id: int, db: AsyncSession = Depends(get_db)):
        return await VenueRepository(db).get_by_id(venue_id)
"""

from ticketing_api.shared.db.session import (
    get_db,
    init_db,
    close_db,
    commit_session,
    run_after_commit,
    AsyncSessionLocal,
    engine,
)

__all__ = [
    "get_db",
    "init_db",
    "close_db",
    "commit_session",
    "run_after_commit",
    "AsyncSessionLocal",
    "engine",
]
