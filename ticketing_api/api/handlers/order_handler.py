"""
Order Handler

All routes require a logged-in user. Buyers act on their own orders
only; admins can see and act on any order.

    POST /orders              buy tickets (ticket_ids)
    GET  /orders/{id}
    GET  /orders              paginated, scoped to the caller unless admin
    POST /orders/{id}/pay     pending → paid
    POST /orders/{id}/cancel  pending → cancelled, tickets released
"""

from fastapi import APIRouter, Depends, status

from ticketing_api.api.dependencies import CurrentUser
from ticketing_api.api.dependencies.pagination import get_order_query
from ticketing_api.api.dependencies.services import get_order_service
from ticketing_api.shared.schemas.common import ApiResponse, PaginatedResponse
from ticketing_api.shared.schemas.order import OrderCreate, OrderResponse
from ticketing_api.shared.schemas.query_options import OrderQueryOptions
from ticketing_api.shared.services.order_service import OrderService


router = APIRouter()


@router.post(
    "",
    response_model=ApiResponse[OrderResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_order(
    order_data: OrderCreate,
    current_user: CurrentUser,
    order_service: OrderService = Depends(get_order_service),
):
    """
    Raises:
        404: A ticket id doesn't exist
        409: A ticket is already sold
    """
    return ApiResponse(data=await order_service.create_order(current_user["user_id"], order_data))


@router.get("/{order_id}", response_model=ApiResponse[OrderResponse])
async def get_order(
    order_id: int,
    current_user: CurrentUser,
    order_service: OrderService = Depends(get_order_service),
):
    order = await order_service.get_order(order_id, current_user["user_id"], current_user["is_admin"])
    return ApiResponse(data=order)


@router.get("", response_model=PaginatedResponse[OrderResponse])
async def list_orders(
    current_user: CurrentUser,
    options: OrderQueryOptions = Depends(get_order_query),
    order_service: OrderService = Depends(get_order_service),
):
    return await order_service.list_orders(options, current_user["user_id"], current_user["is_admin"])


@router.post("/{order_id}/pay", response_model=ApiResponse[OrderResponse])
async def pay_order(
    order_id: int,
    current_user: CurrentUser,
    order_service: OrderService = Depends(get_order_service),
):
    """
    Raises:
        409: Order isn't pending
    """
    order = await order_service.pay_order(order_id, current_user["user_id"], current_user["is_admin"])
    return ApiResponse(data=order)


@router.post("/{order_id}/cancel", response_model=ApiResponse[OrderResponse])
async def cancel_order(
    order_id: int,
    current_user: CurrentUser,
    order_service: OrderService = Depends(get_order_service),
):
    """
    Raises:
        409: Order isn't pending
    """
    order = await order_service.cancel_order(order_id, current_user["user_id"], current_user["is_admin"])
    return ApiResponse(data=order)
