"""
Ticket Handler

    POST /tickets        admin   issue `count` tickets for an event
    PUT  /tickets/{id}   admin   partial update
    GET  /tickets/{id}   public
    GET  /tickets        public  paginated search
"""

from fastapi import APIRouter, Depends, status

from ticketing_api.api.dependencies import AdminUser
from ticketing_api.api.dependencies.pagination import get_ticket_query
from ticketing_api.api.dependencies.services import get_ticket_service
from ticketing_api.shared.schemas.common import ApiResponse, PaginatedResponse
from ticketing_api.shared.schemas.query_options import TicketQueryOptions
from ticketing_api.shared.schemas.ticket import TicketCreate, TicketResponse, TicketUpdate
from ticketing_api.shared.services.ticket_service import TicketService


router = APIRouter()


@router.post(
    "",
    response_model=ApiResponse[list[TicketResponse]],
    status_code=status.HTTP_201_CREATED,
)
async def create_tickets(
    ticket_data: TicketCreate,
    admin: AdminUser,
    ticket_service: TicketService = Depends(get_ticket_service),
):
    """
    Issue tickets in bulk.

    Raises:
        400: count outside 1..100 or unknown type
        404: Event doesn't exist
    """
    return ApiResponse(data=await ticket_service.create_tickets(ticket_data))


@router.put("/{ticket_id}", response_model=ApiResponse[TicketResponse])
async def update_ticket(
    ticket_id: str,
    changes: TicketUpdate,
    admin: AdminUser,
    ticket_service: TicketService = Depends(get_ticket_service),
):
    return ApiResponse(data=await ticket_service.update_ticket(ticket_id, changes))


@router.get("/{ticket_id}", response_model=ApiResponse[TicketResponse])
async def get_ticket(
    ticket_id: str,
    ticket_service: TicketService = Depends(get_ticket_service),
):
    return ApiResponse(data=await ticket_service.get_ticket(ticket_id))


@router.get("", response_model=PaginatedResponse[TicketResponse])
async def list_tickets(
    options: TicketQueryOptions = Depends(get_ticket_query),
    ticket_service: TicketService = Depends(get_ticket_service),
):
    """
    Search tickets.

    Sort accepts snake_case or camelCase (seat_number / seatNumber).
    """
    return await ticket_service.list_tickets(options)
