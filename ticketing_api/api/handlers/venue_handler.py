"""
Venue Handler

    POST   /venues          admin   create
    PUT    /venues/{id}     admin   partial update
    DELETE /venues/{id}     admin   delete (cascades to events and tickets)
    GET    /venues/{id}     public  cached read
    GET    /venues          public  cached paginated search
"""

from fastapi import APIRouter, Depends, status

from ticketing_api.api.dependencies import AdminUser
from ticketing_api.api.dependencies.pagination import get_venue_query
from ticketing_api.api.dependencies.services import get_venue_service
from ticketing_api.shared.schemas.common import ApiResponse, MessageResponse, PaginatedResponse
from ticketing_api.shared.schemas.query_options import VenueQueryOptions
from ticketing_api.shared.schemas.venue import VenueCreate, VenueResponse, VenueUpdate
from ticketing_api.shared.services.venue_service import VenueService


router = APIRouter()


@router.post(
    "",
    response_model=ApiResponse[VenueResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_venue(
    venue_data: VenueCreate,
    admin: AdminUser,
    venue_service: VenueService = Depends(get_venue_service),
):
    return ApiResponse(data=await venue_service.create_venue(venue_data))


@router.put("/{venue_id}", response_model=ApiResponse[VenueResponse])
async def update_venue(
    venue_id: int,
    changes: VenueUpdate,
    admin: AdminUser,
    venue_service: VenueService = Depends(get_venue_service),
):
    return ApiResponse(data=await venue_service.update_venue(venue_id, changes))


@router.delete("/{venue_id}", response_model=ApiResponse[MessageResponse])
async def delete_venue(
    venue_id: int,
    admin: AdminUser,
    venue_service: VenueService = Depends(get_venue_service),
):
    await venue_service.delete_venue(venue_id)
    return ApiResponse(data=MessageResponse(message=f"Venue {venue_id} deleted"))


@router.get("/{venue_id}", response_model=ApiResponse[VenueResponse])
async def get_venue(
    venue_id: int,
    venue_service: VenueService = Depends(get_venue_service),
):
    """
    Get one venue.

    Raises:
        404: No venue with this id
    """
    return ApiResponse(data=await venue_service.get_venue(venue_id))


@router.get("", response_model=PaginatedResponse[VenueResponse])
async def list_venues(
    options: VenueQueryOptions = Depends(get_venue_query),
    venue_service: VenueService = Depends(get_venue_service),
):
    """
    Search venues.

    Query params: id, name, address, capacity, city, state, zip (filters);
    page, size, sort, order. Text filters are case-insensitive substrings.
    """
    return await venue_service.list_venues(options)
