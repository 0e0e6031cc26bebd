"""
Order Service - Business Logic Layer
"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from order_service.config import Settings, settings
from order_service.errors import OrderValidationError
from order_service.repositories.order_repository import OrderRepository
from order_service.schemas.order import OrderCreate, OrderResponse, OrderDetailResponse

logger = logging.getLogger(__name__)


class OrderService:
    """Service layer for order business logic"""

    def __init__(self, db: Session, config: Settings = settings):
        self.repository = OrderRepository(db)
        self.config = config

    def get_all_orders(self) -> List[OrderDetailResponse]:
        """Get all orders with nested items"""
        orders = self.repository.get_all()
        return [OrderDetailResponse.model_validate(o) for o in orders]

    def get_order_by_id(self, order_id: int) -> Optional[OrderDetailResponse]:
        """Get order with nested items by ID"""
        order = self.repository.get_by_id(order_id)
        if not order:
            return None
        return OrderDetailResponse.model_validate(order)

    def create_order(self, order_data: OrderCreate) -> OrderDetailResponse:
        """
        Create new order

        Steps:
        1. Validate customer and items
        2. Calculate total price
        3. Insert order and items in one transaction
        4. Read back the persisted items

        Args:
            order_data: Order creation data

        Returns:
            Created order with its items

        Raises:
            OrderValidationError: If the request is invalid
            PersistenceError: If the transaction was rolled back
        """
        order = self.repository.create_with_items(order_data.customer_email, order_data.items)
        logger.info(
            "Order %s created for %s: %d item(s), total %s",
            order.id, order.customer_email, len(order.items), order.total_price
        )
        return OrderDetailResponse.model_validate(order)

    def update_order_status(self, order_id: int, new_status: str) -> Optional[OrderResponse]:
        """
        Update order status

        Args:
            order_id: Order ID
            new_status: New status value

        Returns:
            Updated order (without items) or None if not found

        Raises:
            OrderValidationError: If statuses are restricted and the value is not allowed
        """
        if not self.repository.exists(order_id):
            return None

        if self.config.ORDER_STATUS_MODE == "closed" and new_status not in self.config.ALLOWED_ORDER_STATUSES:
            allowed = ", ".join(self.config.ALLOWED_ORDER_STATUSES)
            raise OrderValidationError(f"Invalid status '{new_status}'. Allowed: {allowed}")

        order = self.repository.update_status(order_id, new_status)
        if not order:
            return None

        logger.info("Order %s status changed to %s", order.id, order.status)
        return OrderResponse.model_validate(order)
