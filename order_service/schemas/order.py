"""
Pydantic schemas for request/response validation
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import List
from datetime import datetime
from decimal import Decimal


class OrderItemCreate(BaseModel):
    """Schema for a requested order line item"""
    game_name: str = Field(..., min_length=1, max_length=255, description="Game name")
    price: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2, description="Unit price")
    quantity: int = Field(1, gt=0, le=2147483647, description="Quantity to order")


class OrderCreate(BaseModel):
    """Schema for creating a new order"""
    customer_email: str = Field(..., min_length=1, max_length=255, description="Customer email address")
    items: List[OrderItemCreate] = Field(..., min_length=1, description="Requested items")


class OrderStatusUpdate(BaseModel):
    """Schema for updating order status"""
    status: str = Field(..., min_length=1, max_length=50, description="Order status")


class OrderItemResponse(BaseModel):
    """Schema for order item response"""
    id: int
    order_id: int
    game_name: str
    price: Decimal
    quantity: int

    model_config = ConfigDict(from_attributes=True)


class OrderResponse(BaseModel):
    """Schema for order row response (without items)"""
    id: int
    customer_email: str
    total_price: Decimal
    status: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class OrderDetailResponse(OrderResponse):
    """Schema for order aggregate response (order with nested items)"""
    items: List[OrderItemResponse]
