"""
Order API endpoints
"""
from fastapi import APIRouter, Depends, HTTPException, Path, Request, status
from sqlalchemy.orm import Session
from typing import List

from order_service.database import get_db
from order_service.services.order_service import OrderService
from order_service.schemas.order import (
    OrderCreate,
    OrderStatusUpdate,
    OrderResponse,
    OrderDetailResponse
)

router = APIRouter(prefix="/orders", tags=["orders"])

# Largest value an INTEGER primary key holds
MAX_ID = 2147483647


def get_order_service(request: Request, db: Session = Depends(get_db)) -> OrderService:
    """Dependency to get OrderService instance"""
    return OrderService(db, request.app.state.settings)


@router.get("", response_model=List[OrderDetailResponse], summary="Get all orders")
def get_orders(service: OrderService = Depends(get_order_service)):
    """
    Retrieve all orders, newest first, each with its items
    """
    return service.get_all_orders()


@router.get("/{order_id}", response_model=OrderDetailResponse, summary="Get order by ID")
def get_order(
    order_id: int = Path(..., ge=1, le=MAX_ID, description="Order ID"),
    service: OrderService = Depends(get_order_service)
):
    """
    Retrieve a specific order with its items

    - **order_id**: Order ID
    """
    order = service.get_order_by_id(order_id)
    if not order:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Order not found"
        )
    return order


@router.post("", response_model=OrderDetailResponse, status_code=status.HTTP_201_CREATED, summary="Create order")
def create_order(
    order_data: OrderCreate,
    service: OrderService = Depends(get_order_service)
):
    """
    Create a new order with its items

    The total price is computed from the items; the order and all of its
    items are stored in a single transaction.

    - **customer_email**: Customer email (required)
    - **items**: List of `{game_name, price, quantity}` (at least one; quantity defaults to 1)
    """
    return service.create_order(order_data)


@router.put("/{order_id}/status", response_model=OrderResponse, summary="Update order status")
def update_order_status(
    status_data: OrderStatusUpdate,
    order_id: int = Path(..., ge=1, le=MAX_ID, description="Order ID"),
    service: OrderService = Depends(get_order_service)
):
    """
    Update order status

    - **order_id**: Order ID
    - **status**: New status
    """
    order = service.update_order_status(order_id, status_data.status)
    if not order:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Order not found"
        )
    return order
