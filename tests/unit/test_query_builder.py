import datetime as dt

import pytest
from sqlalchemy import select

from ticketing_api.shared.models.event import Event
from ticketing_api.shared.repositories.event_repository import EVENT_QUERY_SPEC
from ticketing_api.shared.repositories.query_builder import (
    build_conditions,
    build_order_by,
    build_query,
    day_bounds,
    is_present,
)
from ticketing_api.shared.repositories.ticket_repository import TICKET_QUERY_SPEC
from ticketing_api.shared.schemas.query_options import EventQueryOptions


def _sql(options: EventQueryOptions) -> str:
    return str(build_query(select(Event), EVENT_QUERY_SPEC, options))


def _is_default_order(clauses) -> bool:
    default = EVENT_QUERY_SPEC.default_order
    return len(clauses) == len(default) and all(a is b for a, b in zip(clauses, default))


@pytest.mark.unit
class TestIsPresent:

    @pytest.mark.parametrize("value", [None, "", "   ", 0, 0.0, [], ()])
    def test_empty_values_are_absent(self, value):
        assert is_present(value) is False

    @pytest.mark.parametrize("value", ["x", 1, 2.5, ["R-1"], dt.date(2026, 1, 1), False])
    def test_real_values_are_present(self, value):
        assert is_present(value) is True


@pytest.mark.unit
class TestBuildConditions:

    def test_unknown_filter_names_are_ignored(self):
        conditions = build_conditions(EVENT_QUERY_SPEC, {"name": "jazz", "password_hash": "x"})

        assert len(conditions) == 1

    def test_zero_id_adds_no_condition(self):
        assert build_conditions(EVENT_QUERY_SPEC, {"id": 0, "venue_id": 0}) == []

    def test_in_filter_for_seat_numbers(self):
        conditions = build_conditions(TICKET_QUERY_SPEC, {"seat_numbers": ["V-1", "V-2"]})

        assert "tickets.seat_number IN" in str(conditions[0])


@pytest.mark.unit
class TestBuildOrderBy:

    def test_valid_sort_and_direction(self):
        clauses = build_order_by(EVENT_QUERY_SPEC, "name", "ASC")

        assert [str(c) for c in clauses] == ["events.name ASC", "events.id ASC"]

    def test_direction_is_case_insensitive(self):
        clauses = build_order_by(EVENT_QUERY_SPEC, "date", "Desc")

        assert [str(c) for c in clauses] == ["events.date DESC", "events.id DESC"]

    def test_sorting_by_id_has_no_duplicate_tiebreaker(self):
        assert [str(c) for c in build_order_by(EVENT_QUERY_SPEC, "id", "asc")] == ["events.id ASC"]

    def test_camel_case_alias(self):
        clauses = build_order_by(EVENT_QUERY_SPEC, "venueId", "asc")

        assert str(clauses[0]) == "events.venue_id ASC"

    @pytest.mark.parametrize(
        "sort, order",
        [
            ("name; DROP TABLE events", "asc"),
            ("password_hash", "asc"),
            ("name", "sideways"),
            ("name", None),
            (None, "asc"),
            (None, None),
        ],
    )
    def test_invalid_or_missing_sort_falls_back_to_default(self, sort, order):
        assert _is_default_order(build_order_by(EVENT_QUERY_SPEC, sort, order))


@pytest.mark.unit
class TestBuildQuery:

    def test_substring_filter_is_case_insensitive_like(self):
        sql = _sql(EventQueryOptions(name="EVE"))

        assert "lower(events.name) LIKE" in sql

    def test_default_order_is_created_at_desc(self):
        assert "ORDER BY events.created_at DESC, events.id DESC" in _sql(EventQueryOptions())

    def test_injection_shaped_sort_never_reaches_sql(self):
        sql = _sql(EventQueryOptions(sort="id; DROP TABLE events", order="asc"))

        assert "DROP" not in sql
        assert "ORDER BY events.created_at DESC" in sql

    def test_no_pagination_is_applied(self):
        sql = _sql(EventQueryOptions(page=3, size=5))

        assert "LIMIT" not in sql and "OFFSET" not in sql


@pytest.mark.unit
def test_day_bounds_cover_one_utc_day():
    start, end = day_bounds(dt.date(2026, 5, 1))

    assert start == dt.datetime(2026, 5, 1, tzinfo=dt.timezone.utc)
    assert end - start == dt.timedelta(days=1)
