"""
Models package
"""
from order_service.models.order import Order, OrderItem

__all__ = ["Order", "OrderItem"]
