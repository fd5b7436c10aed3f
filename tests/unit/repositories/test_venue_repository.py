import pytest

from ticketing_api.shared.core.exceptions import VenueNotFoundError
from ticketing_api.shared.models import Venue
from ticketing_api.shared.repositories.venue_repository import VenueRepository
from ticketing_api.shared.schemas.query_options import VenueQueryOptions


@pytest.fixture
async def venues(db_session):
    rows = [
        Venue(name="Moody Center", address="2001 Robert Dedman Dr", capacity=15000,
              city="Austin", state="TX", zip="78712"),
        Venue(name="Stubb's", address="801 Red River St", capacity=2200,
              city="Austin", state="TX", zip="78701"),
        Venue(name="Ryman Auditorium", address="116 5th Ave N", capacity=2362,
              city="Nashville", state="TN", zip="37219"),
    ]
    db_session.add_all(rows)
    await db_session.commit()
    return rows


@pytest.mark.unit
class TestVenueRepository:

    async def test_city_filter_is_substring_and_case_insensitive(self, db_session, venues):
        _, total = await VenueRepository(db_session).get_paginated(VenueQueryOptions(city="aus"))

        assert total == 2

    async def test_zip_is_exact_match(self, db_session, venues):
        items, total = await VenueRepository(db_session).get_paginated(VenueQueryOptions(zip="787"))

        assert total == 0
        assert items == []

    async def test_filters_are_combined_with_and(self, db_session, venues):
        items, total = await VenueRepository(db_session).get_paginated(
            VenueQueryOptions(city="Austin", capacity=2200)
        )

        assert total == 1
        assert items[0].name == "Stubb's"

    async def test_sort_by_capacity(self, db_session, venues):
        items, _ = await VenueRepository(db_session).get_paginated(
            VenueQueryOptions(sort="capacity", order="asc")
        )

        assert [venue.capacity for venue in items] == [2200, 2362, 15000]

    async def test_size_limits_page(self, db_session, venues):
        items, total = await VenueRepository(db_session).get_paginated(VenueQueryOptions(size=2))

        assert len(items) == 2
        assert total == 3

    async def test_missing_venue_raises_venue_not_found(self, db_session):
        with pytest.raises(VenueNotFoundError, match="Venue with id '77' not found"):
            await VenueRepository(db_session).get_by_id(77)
