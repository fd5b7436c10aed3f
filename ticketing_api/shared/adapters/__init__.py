"""
Adapters Package

External service integrations.

Contents:
=========
- redis_adapter: Redis cache client (cache-aside reads for venues and events)
- email_adapter: Outgoing email (password reset links)

Note: Database access is handled by shared/db/session.py using async SQLAlchemy.

Usage:
======
    from ticketing_api.shared.adapters.redis_adapter import RedisCache, get_cache
    from ticketing_api.shared.adapters.email_adapter import EmailSender
"""
