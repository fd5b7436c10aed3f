"""
Ticketing API

REST backend for an event-ticketing platform.

Package Structure:
==================
    ticketing_api/
    ├── api/        ← FastAPI application (handlers, dependencies, middleware)
    ├── shared/     ← Models, repositories, services, schemas, adapters
    └── config/     ← Configuration

Running the Application:
========================
    uvicorn ticketing_api.api.main:app --reload
"""
