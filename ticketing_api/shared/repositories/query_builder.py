"""
Query Builder

Turns a QueryOptions bag into a filtered, sorted SELECT without executing it.

Each entity declares a static QuerySpec:

    EVENT_QUERY_SPEC = QuerySpec(
        filters={
            "id":          FilterField(Event.id),
            "name":        FilterField(Event.name, FilterKind.CONTAINS),
            "date":        FilterField(Event.date, FilterKind.DATE),
            "venue_id":    FilterField(Event.venue_id),
        },
        sortable={"id": Event.id, "name": Event.name, "created_at": Event.created_at},
        default_order=(Event.created_at.desc(), Event.id.desc()),
        tiebreaker=Event.id,
    )

Only keys found in these tables ever touch the query. A sort field or
direction coming from the request is used as a dictionary key, never as
SQL text, so anything outside the allow-list simply falls back to the
default order.

Filter Kinds:
=============
    EQUALS    column = value
    CONTAINS  lower(column) LIKE lower('%value%')   (%, _ in value escaped)
    DATE      start_of_day <= column < start_of_next_day
    IN        column IN (values...)

SQL Generated (EventQueryOptions(name="jazz", sort="name", order="ASC")):
    SELECT events.* FROM events
    WHERE lower(events.name) LIKE lower('%' || 'jazz' || '%') ESCAPE '/'
    ORDER BY events.name ASC, events.id ASC
"""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from enum import Enum
from typing import Any, Mapping, Optional

from sqlalchemy import Select
from sqlalchemy.sql.elements import ColumnElement

from ticketing_api.shared.schemas.query_options import QueryOptions
from ticketing_api.shared.utils.constants import SORT_DIRECTIONS


class FilterKind(str, Enum):
    """How a filter value is compared against its column."""

    EQUALS = "equals"
    CONTAINS = "contains"
    DATE = "date"
    IN = "in"


@dataclass(frozen=True)
class FilterField:
    """One filterable field: the column it maps to and how to compare."""

    column: Any
    kind: FilterKind = FilterKind.EQUALS

    def condition(self, value: Any) -> ColumnElement[bool]:
        if self.kind is FilterKind.CONTAINS:
            return self.column.icontains(str(value), autoescape=True)
        if self.kind is FilterKind.DATE:
            start, end = day_bounds(value)
            return (self.column >= start) & (self.column < end)
        if self.kind is FilterKind.IN:
            return self.column.in_(list(value))
        return self.column == value


@dataclass(frozen=True)
class QuerySpec:
    """
    Static filter/sort table for one entity.

    Attributes:
        filters: option field name → FilterField
        sortable: accepted `sort` values (aliases included) → column
        default_order: ORDER BY used when sort/order is missing or invalid
        tiebreaker: unique column appended to a valid sort so page
            boundaries don't shift between requests
    """

    filters: Mapping[str, FilterField]
    sortable: Mapping[str, Any]
    default_order: tuple[Any, ...]
    tiebreaker: Optional[Any] = None


def day_bounds(value: date | datetime) -> tuple[datetime, datetime]:
    """Half-open [start, end) UTC range covering the calendar day of `value`."""
    day = value.date() if isinstance(value, datetime) else value
    start = datetime.combine(day, time.min, tzinfo=timezone.utc)
    return start, start + timedelta(days=1)


def is_present(value: Any) -> bool:
    """
    Whether a filter value should produce a condition.

    None, empty strings, empty collections and numeric zero are "not given".
    """
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip() != ""
    if isinstance(value, (list, tuple, set, frozenset)):
        return len(value) > 0
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value != 0
    return True


def build_conditions(spec: QuerySpec, filters: Mapping[str, Any]) -> list[ColumnElement[bool]]:
    """AND-able conditions for every supplied filter the QuerySpec knows about."""
    conditions = []
    for name, value in filters.items():
        filter_field = spec.filters.get(name)
        if filter_field is None or not is_present(value):
            continue
        conditions.append(filter_field.condition(value))
    return conditions


def build_order_by(spec: QuerySpec, sort: Optional[str], order: Optional[str]) -> list[Any]:
    """
    ORDER BY clauses for a requested sort.

    Both the field and the direction must be valid; otherwise the
    QuerySpec default order is used.
    """
    column = spec.sortable.get(sort) if sort else None
    direction = (order or "").strip().lower()

    if column is None or direction not in SORT_DIRECTIONS:
        return list(spec.default_order)

    clauses = [column.asc() if direction == "asc" else column.desc()]
    if spec.tiebreaker is not None and column is not spec.tiebreaker:
        clauses.append(spec.tiebreaker.asc() if direction == "asc" else spec.tiebreaker.desc())
    return clauses


def build_query(base: Select, spec: QuerySpec, options: QueryOptions) -> Select:
    """
    Apply options' filters and sort to `base`. Pure; nothing is executed.

    Args:
        base: Starting SELECT (usually select(Model))
        spec: The entity's static filter/sort table
        options: Validated query options

    Returns:
        A new Select with WHERE and ORDER BY applied (no LIMIT/OFFSET)
    """
    conditions = build_conditions(spec, options.filters())
    query = base.where(*conditions) if conditions else base
    return query.order_by(*build_order_by(spec, options.sort, options.order))
