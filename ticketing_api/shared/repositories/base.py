"""
Base Repository

Generic repository with the CRUD and paginated-listing operations every
entity shares. Entity repositories inherit from it and declare a QuerySpec.

What This Provides:
===================
- get(id)              → Optional lookup by primary key
- get_by_id(id)        → Lookup that raises NotFoundError
- get_by_ids(ids)      → Fetch several rows in one IN query
- get_paginated(opts)  → (items, total) for a listing request
- exists(id)           → Existence check without loading the row
- create(**fields)     → INSERT
- update(id, **fields) → UPDATE (None values skipped)
- delete(id)           → DELETE

Generic Type Pattern:
=====================
    class VenueRepository(BaseRepository[Venue]):
        query_spec = VENUE_QUERY_SPEC

        def __init__(self, session: AsyncSession):
            super().__init__(Venue, session)

    venue = await VenueRepository(db).get_by_id(3)  # Venue, not Any

Paginated Listing Flow:
=======================
┌─────────────────────────────────────────────────────────────────────────────┐
│                        get_paginated(options)                               │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   1. options already normalized (page ≥ 1, size ≥ 1)                        │
│   2. query = build_query(base_query(), query_spec, options)                 │
│              WHERE <filters>  ORDER BY <allow-listed sort | default>        │
│   3. total = SELECT count(*) FROM (query without ORDER BY)                  │
│   4. items = query OFFSET (page-1)*size LIMIT size                          │
│   5. return (items, total)                                                  │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

The count and the page are two separate statements, so a row inserted in
between can make `total` disagree with the page by one. Listings accept that.

flush() vs commit():
====================
Repositories only flush(). get_db() commits once the handler returns, so
a service can chain several repository writes in one transaction.
"""

from typing import Any, Generic, Optional, Sequence, Type, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ticketing_api.shared.core.exceptions import NotFoundError
from ticketing_api.shared.models.base import Base
from ticketing_api.shared.repositories.query_builder import QuerySpec, build_query
from ticketing_api.shared.schemas.query_options import QueryOptions


# TypeVar bound to Base ensures we only work with SQLAlchemy models
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository.

    Type Parameter:
        ModelType: The SQLAlchemy model class this repository manages

    Attributes:
        model: The SQLAlchemy model class
        session: The async database session
        query_spec: Static filter/sort table used by get_paginated()
        not_found_error: NotFoundError subclass raised for this entity
    """

    query_spec: Optional[QuerySpec] = None
    not_found_error: Optional[Type[NotFoundError]] = None

    def __init__(self, model: Type[ModelType], session: AsyncSession) -> None:
        self.model = model
        self.session = session

    def _not_found(self, record_id: Any) -> NotFoundError:
        if self.not_found_error is not None:
            return self.not_found_error(record_id)
        return NotFoundError(self.model.__name__, record_id)

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    def base_query(self) -> Select:
        """Starting SELECT for listings. Override to add joins or eager loads."""
        return select(self.model)

    async def get(self, record_id: Any) -> Optional[ModelType]:
        """
        Get a single record by primary key, or None.

        SQL Generated:
            SELECT * FROM venues WHERE id = 12
        """
        result = await self.session.execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    async def get_by_id(self, record_id: Any) -> ModelType:
        """
        Get a single record by primary key.

        Raises:
            NotFoundError: No row has this id
        """
        instance = await self.get(record_id)
        if instance is None:
            raise self._not_found(record_id)
        return instance

    async def get_by_ids(self, ids: Sequence[Any]) -> list[ModelType]:
        """
        Get multiple records in one query.

        Returns only the rows that exist, so the result may be shorter
        than `ids`.

        SQL Generated:
            SELECT * FROM tickets WHERE id IN ('a1..', 'b2..')
        """
        if not ids:
            return []

        result = await self.session.execute(select(self.model).where(self.model.id.in_(list(ids))))
        return list(result.scalars().all())

    async def get_paginated(self, options: QueryOptions) -> tuple[list[ModelType], int]:
        """
        One page of rows matching the options' filters, plus the total match count.

        Args:
            options: Normalized query options for this entity

        Returns:
            (items, total) where len(items) <= options.size and total counts
            every matching row regardless of pagination

        Example:
            events, total = await repo.get_paginated(
                EventQueryOptions(name="jazz", page=2, size=10, sort="date", order="asc")
            )

        SQL Generated:
            SELECT count(*) FROM (SELECT ... WHERE lower(name) LIKE '%jazz%') AS anon_1
            SELECT ... WHERE lower(name) LIKE '%jazz%'
                ORDER BY date ASC, id ASC LIMIT 10 OFFSET 10
        """
        if self.query_spec is None:
            raise NotImplementedError(f"{type(self).__name__} has no query_spec")

        query = build_query(self.base_query(), self.query_spec, options)

        count_query = select(func.count()).select_from(query.order_by(None).subquery())
        total = (await self.session.execute(count_query)).scalar() or 0

        result = await self.session.execute(query.offset(options.offset).limit(options.size))
        return list(result.scalars().all()), total

    async def exists(self, record_id: Any) -> bool:
        """Check if a record exists without loading it."""
        result = await self.session.execute(
            select(func.count()).select_from(self.model).where(self.model.id == record_id)
        )
        return (result.scalar() or 0) > 0

    # ═══════════════════════════════════════════════════════════════════════════
    # WRITE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create(self, **kwargs: Any) -> ModelType:
        """
        Create a new record.

        Flushes so DB-generated values (id, created_at) are loaded before
        returning.
        """
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def create_many(self, rows: Sequence[dict[str, Any]]) -> list[ModelType]:
        """Create several records in one flush."""
        instances = [self.model(**row) for row in rows]
        self.session.add_all(instances)
        await self.session.flush()
        for instance in instances:
            await self.session.refresh(instance)
        return instances

    async def update(self, record_id: Any, **kwargs: Any) -> ModelType:
        """
        Update a record by id. None values are skipped (partial update).

        Raises:
            NotFoundError: No row has this id
        """
        instance = await self.get_by_id(record_id)

        for field, value in kwargs.items():
            if hasattr(instance, field) and value is not None:
                setattr(instance, field, value)

        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def delete(self, record_id: Any) -> None:
        """
        Hard delete a record by id.

        Raises:
            NotFoundError: No row has this id
        """
        instance = await self.get_by_id(record_id)
        await self.session.delete(instance)
        await self.session.flush()
