"""
Schemas package
"""
from order_service.schemas.order import (
    OrderItemCreate,
    OrderCreate,
    OrderStatusUpdate,
    OrderItemResponse,
    OrderResponse,
    OrderDetailResponse
)

__all__ = [
    "OrderItemCreate",
    "OrderCreate",
    "OrderStatusUpdate",
    "OrderItemResponse",
    "OrderResponse",
    "OrderDetailResponse"
]
