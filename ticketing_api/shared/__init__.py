"""
Shared Module

Everything below the HTTP layer:
- Models: SQLAlchemy ORM entities (User, Venue, Event, Ticket, Order)
- Repositories: Generic CRUD + filtered, sorted, paginated listing
- Services: Business rules and cache-aside reads
- Schemas: Pydantic request/response models and query options
- Adapters: Redis cache wrapper, email sender
- Core: Logging, exceptions

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions
    ├── db/             ← Database session management
    ├── models/         ← SQLAlchemy models
    ├── repositories/   ← Data access layer + query builder
    ├── services/       ← Business logic
    ├── schemas/        ← Pydantic schemas and query options
    ├── adapters/       ← Cache, email
    └── utils/          ← Security helpers, constants

Usage:
======
    from ticketing_api.shared.models import Event
    from ticketing_api.shared.repositories import EventRepository
    from ticketing_api.shared.schemas import EventQueryOptions
"""
