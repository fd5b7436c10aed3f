from datetime import datetime, time, timedelta, timezone

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from ticketing_api.shared.core.exceptions import EventNotFoundError, NotFoundError
from ticketing_api.shared.models import Event, Venue
from ticketing_api.shared.repositories.event_repository import EventRepository
from ticketing_api.shared.schemas.query_options import EventQueryOptions


async def _seed_events(session: AsyncSession, venue: Venue, count: int) -> list[Event]:
    start = datetime(2026, 6, 1, 20, 0, tzinfo=timezone.utc)
    events = [
        Event(
            name=f"Event {n:02d}",
            description="Live show",
            date=start + timedelta(days=n),
            time=time(20, 0),
            venue_id=venue.id,
        )
        for n in range(1, count + 1)
    ]
    session.add_all(events)
    await session.commit()
    return events


@pytest.mark.unit
class TestGetPaginated:

    async def test_second_page_of_twenty_five(self, db_session, sample_venue):
        """Test page 2 at size 10 returns events 11-20 and the full total."""
        await _seed_events(db_session, sample_venue, 25)
        repo = EventRepository(db_session)

        items, total = await repo.get_paginated(
            EventQueryOptions(venue_id=sample_venue.id, page=2, size=10, sort="id", order="asc")
        )

        assert total == 25
        assert [event.name for event in items] == [f"Event {n:02d}" for n in range(11, 21)]

    async def test_last_page_is_partial(self, db_session, sample_venue):
        await _seed_events(db_session, sample_venue, 25)

        items, total = await EventRepository(db_session).get_paginated(
            EventQueryOptions(page=3, size=10, sort="id", order="asc")
        )

        assert total == 25
        assert len(items) == 5

    async def test_page_past_the_end_is_empty(self, db_session, sample_venue):
        await _seed_events(db_session, sample_venue, 3)

        items, total = await EventRepository(db_session).get_paginated(EventQueryOptions(page=9))

        assert items == []
        assert total == 3

    async def test_invalid_pagination_is_normalized(self, db_session, sample_venue):
        await _seed_events(db_session, sample_venue, 12)

        items, total = await EventRepository(db_session).get_paginated(
            EventQueryOptions(page=0, size=0)
        )

        assert len(items) == 10
        assert total == 12

    async def test_substring_filter_ignores_case(self, db_session, sample_event):
        items, total = await EventRepository(db_session).get_paginated(EventQueryOptions(name="EVE"))

        assert total == 1
        assert items[0].name == "Annual Event"

    async def test_like_wildcards_in_filter_are_literal(self, db_session, sample_event):
        items, total = await EventRepository(db_session).get_paginated(EventQueryOptions(name="%"))

        assert total == 0
        assert items == []

    async def test_nonexistent_id_yields_empty_page(self, db_session, sample_event):
        items, total = await EventRepository(db_session).get_paginated(EventQueryOptions(id=999))

        assert (items, total) == ([], 0)

    async def test_zero_id_means_no_filter(self, db_session, sample_event):
        _, total = await EventRepository(db_session).get_paginated(EventQueryOptions(id=0))

        assert total == 1

    async def test_date_filter_matches_whole_day(self, db_session, sample_venue):
        await _seed_events(db_session, sample_venue, 5)

        items, total = await EventRepository(db_session).get_paginated(
            EventQueryOptions(date="2026-06-03")
        )

        assert total == 1
        assert items[0].name == "Event 02"

    async def test_sort_descending_by_name(self, db_session, sample_venue):
        await _seed_events(db_session, sample_venue, 4)

        items, _ = await EventRepository(db_session).get_paginated(
            EventQueryOptions(sort="name", order="desc")
        )

        assert [event.name for event in items] == ["Event 04", "Event 03", "Event 02", "Event 01"]

    async def test_invalid_sort_uses_newest_first(self, db_session, sample_venue):
        """Test an unknown sort field falls back to created_at DESC (id DESC on ties)."""
        await _seed_events(db_session, sample_venue, 4)

        items, _ = await EventRepository(db_session).get_paginated(
            EventQueryOptions(sort="drop table", order="asc")
        )

        assert [event.name for event in items] == ["Event 04", "Event 03", "Event 02", "Event 01"]

    async def test_total_counts_only_matching_rows(self, db_session, sample_venue):
        await _seed_events(db_session, sample_venue, 7)
        other = Venue(name="Elsewhere", address="1 Main", capacity=10, city="Dallas", state="TX", zip="75001")
        db_session.add(other)
        await db_session.commit()
        db_session.add(Event(name="Away", description="", date=datetime(2026, 1, 1, tzinfo=timezone.utc),
                             time=time(18, 0), venue_id=other.id))
        await db_session.commit()

        items, total = await EventRepository(db_session).get_paginated(
            EventQueryOptions(venue_id=other.id)
        )

        assert total == 1
        assert items[0].name == "Away"


@pytest.mark.unit
class TestSingleRowOperations:

    async def test_get_by_id(self, db_session, sample_event):
        event = await EventRepository(db_session).get_by_id(sample_event.id)

        assert event.name == "Annual Event"

    async def test_get_by_id_missing_raises_not_found(self, db_session):
        with pytest.raises(EventNotFoundError) as exc_info:
            await EventRepository(db_session).get_by_id(404)

        assert exc_info.value.status_code == 404
        assert exc_info.value.resource_id == 404

    async def test_update_changes_only_given_fields(self, db_session, sample_event):
        event = await EventRepository(db_session).update(sample_event.id, name="Renamed", description=None)

        assert event.name == "Renamed"
        assert event.description == "Yearly gathering"

    async def test_update_missing_raises_not_found(self, db_session):
        with pytest.raises(NotFoundError):
            await EventRepository(db_session).update(404, name="x")

    async def test_delete(self, db_session, sample_event):
        repo = EventRepository(db_session)

        await repo.delete(sample_event.id)

        assert await repo.exists(sample_event.id) is False

    async def test_delete_missing_raises_not_found(self, db_session):
        with pytest.raises(NotFoundError):
            await EventRepository(db_session).delete(404)
