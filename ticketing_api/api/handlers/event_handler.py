"""
Event Handler

    POST   /events          admin   create (venue must exist)
    PUT    /events/{id}     admin   partial update
    DELETE /events/{id}     admin   delete (cascades to tickets)
    GET    /events/{id}     public  cached read
    GET    /events          public  cached paginated search
"""

from fastapi import APIRouter, Depends, status

from ticketing_api.api.dependencies import AdminUser
from ticketing_api.api.dependencies.pagination import get_event_query
from ticketing_api.api.dependencies.services import get_event_service
from ticketing_api.shared.schemas.common import ApiResponse, MessageResponse, PaginatedResponse
from ticketing_api.shared.schemas.query_options import EventQueryOptions
from ticketing_api.shared.schemas.event import EventCreate, EventResponse, EventUpdate
from ticketing_api.shared.services.event_service import EventService


router = APIRouter()


@router.post(
    "",
    response_model=ApiResponse[EventResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_event(
    event_data: EventCreate,
    admin: AdminUser,
    event_service: EventService = Depends(get_event_service),
):
    return ApiResponse(data=await event_service.create_event(event_data))


@router.put("/{event_id}", response_model=ApiResponse[EventResponse])
async def update_event(
    event_id: int,
    changes: EventUpdate,
    admin: AdminUser,
    event_service: EventService = Depends(get_event_service),
):
    return ApiResponse(data=await event_service.update_event(event_id, changes))


@router.delete("/{event_id}", response_model=ApiResponse[MessageResponse])
async def delete_event(
    event_id: int,
    admin: AdminUser,
    event_service: EventService = Depends(get_event_service),
):
    await event_service.delete_event(event_id)
    return ApiResponse(data=MessageResponse(message=f"Event {event_id} deleted"))


@router.get("/{event_id}", response_model=ApiResponse[EventResponse])
async def get_event(
    event_id: int,
    event_service: EventService = Depends(get_event_service),
):
    """
    Get one event.

    Raises:
        404: No event with this id
    """
    return ApiResponse(data=await event_service.get_event(event_id))


@router.get("", response_model=PaginatedResponse[EventResponse])
async def list_events(
    options: EventQueryOptions = Depends(get_event_query),
    event_service: EventService = Depends(get_event_service),
):
    """
    Search events.

    Query params: id, name, description, date (YYYY-MM-DD), time, venue_id
    (filters); page, size, sort, order. `date` matches the whole day.
    """
    return await event_service.list_events(options)
