import pytest

from ticketing_api.shared.core.exceptions import (
    ConflictError,
    InvalidStatusTransitionError,
    OrderNotFoundError,
    TicketNotFoundError,
)
from ticketing_api.shared.models.enums import OrderStatus
from ticketing_api.shared.schemas.order import OrderCreate
from ticketing_api.shared.schemas.query_options import OrderQueryOptions
from ticketing_api.shared.schemas.ticket import TicketCreate
from ticketing_api.shared.services.order_service import OrderService
from ticketing_api.shared.services.ticket_service import TicketService


@pytest.fixture
async def tickets(db_session, sample_event):
    vip = await TicketService(db_session).create_tickets(
        TicketCreate(event_id=sample_event.id, price=150, type="vip", count=2)
    )
    regular = await TicketService(db_session).create_tickets(
        TicketCreate(event_id=sample_event.id, price=40.5, type="regular", count=3)
    )
    return vip + regular


@pytest.fixture
def service(db_session) -> OrderService:
    return OrderService(db_session)


@pytest.mark.unit
class TestCreateOrder:

    async def test_claims_tickets_and_sums_price(self, service, buyer_user, tickets):
        ids = [tickets[0].id, tickets[2].id]

        order = await service.create_order(buyer_user.id, OrderCreate(ticket_ids=ids))

        assert order.status is OrderStatus.PENDING
        assert order.user_id == buyer_user.id
        assert order.total_price == pytest.approx(190.5)
        assert sorted(t.id for t in order.tickets) == sorted(ids)
        assert all(t.order_id == order.id for t in order.tickets)

    async def test_duplicate_ids_count_once(self, service, buyer_user, tickets):
        order = await service.create_order(
            buyer_user.id, OrderCreate(ticket_ids=[tickets[0].id, tickets[0].id])
        )

        assert order.total_price == pytest.approx(150)
        assert len(order.tickets) == 1

    async def test_unknown_ticket(self, service, buyer_user, tickets):
        with pytest.raises(TicketNotFoundError):
            await service.create_order(buyer_user.id, OrderCreate(ticket_ids=[tickets[0].id, "nope"]))

    async def test_ticket_already_sold(self, service, buyer_user, other_buyer, tickets):
        await service.create_order(buyer_user.id, OrderCreate(ticket_ids=[tickets[1].id]))

        with pytest.raises(ConflictError) as exc_info:
            await service.create_order(other_buyer.id, OrderCreate(ticket_ids=[tickets[1].id, tickets[3].id]))

        assert exc_info.value.details["ticket_ids"] == [tickets[1].id]


@pytest.mark.unit
class TestOrderVisibility:

    async def test_owner_and_admin_can_read(self, service, buyer_user, admin_user, tickets):
        order = await service.create_order(buyer_user.id, OrderCreate(ticket_ids=[tickets[0].id]))

        mine = await service.get_order(order.id, buyer_user.id)
        as_admin = await service.get_order(order.id, admin_user.id, is_admin=True)

        assert mine.id == as_admin.id == order.id

    async def test_other_buyer_sees_not_found(self, service, buyer_user, other_buyer, tickets):
        order = await service.create_order(buyer_user.id, OrderCreate(ticket_ids=[tickets[0].id]))

        with pytest.raises(OrderNotFoundError):
            await service.get_order(order.id, other_buyer.id)

    async def test_buyer_listing_is_scoped_to_self(self, service, buyer_user, other_buyer, tickets):
        await service.create_order(buyer_user.id, OrderCreate(ticket_ids=[tickets[0].id]))
        await service.create_order(other_buyer.id, OrderCreate(ticket_ids=[tickets[1].id]))

        page = await service.list_orders(OrderQueryOptions(user_id=other_buyer.id), buyer_user.id)

        assert page.paging.total_item == 1
        assert page.data[0].user_id == buyer_user.id

    async def test_admin_listing_sees_everyone(self, service, buyer_user, other_buyer, admin_user, tickets):
        await service.create_order(buyer_user.id, OrderCreate(ticket_ids=[tickets[0].id]))
        await service.create_order(other_buyer.id, OrderCreate(ticket_ids=[tickets[1].id]))

        page = await service.list_orders(OrderQueryOptions(), admin_user.id, is_admin=True)

        assert page.paging.total_item == 2


@pytest.mark.unit
class TestOrderTransitions:

    async def test_pay(self, service, buyer_user, tickets):
        order = await service.create_order(buyer_user.id, OrderCreate(ticket_ids=[tickets[0].id]))

        paid = await service.pay_order(order.id, buyer_user.id)

        assert paid.status is OrderStatus.PAID
        assert len(paid.tickets) == 1

    async def test_pay_twice(self, service, buyer_user, tickets):
        order = await service.create_order(buyer_user.id, OrderCreate(ticket_ids=[tickets[0].id]))
        await service.pay_order(order.id, buyer_user.id)

        with pytest.raises(InvalidStatusTransitionError):
            await service.pay_order(order.id, buyer_user.id)

    async def test_cancel_releases_tickets(self, service, buyer_user, other_buyer, tickets):
        order = await service.create_order(buyer_user.id, OrderCreate(ticket_ids=[tickets[0].id]))

        cancelled = await service.cancel_order(order.id, buyer_user.id)
        again = await service.create_order(other_buyer.id, OrderCreate(ticket_ids=[tickets[0].id]))

        assert cancelled.status is OrderStatus.CANCELLED
        assert cancelled.tickets == []
        assert again.tickets[0].id == tickets[0].id

    async def test_cannot_pay_cancelled_order(self, service, buyer_user, tickets):
        order = await service.create_order(buyer_user.id, OrderCreate(ticket_ids=[tickets[0].id]))
        await service.cancel_order(order.id, buyer_user.id)

        with pytest.raises(InvalidStatusTransitionError):
            await service.pay_order(order.id, buyer_user.id)

    async def test_other_buyer_cannot_cancel(self, service, buyer_user, other_buyer, tickets):
        order = await service.create_order(buyer_user.id, OrderCreate(ticket_ids=[tickets[0].id]))

        with pytest.raises(OrderNotFoundError):
            await service.cancel_order(order.id, other_buyer.id)
