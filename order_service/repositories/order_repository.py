"""
Order Repository - Data Access Layer
"""
import logging
from decimal import Decimal
from typing import List, Optional, Sequence

from sqlalchemy import desc
from sqlalchemy.orm import Session, selectinload
from sqlalchemy.orm.attributes import set_committed_value

from order_service.errors import OrderValidationError, PersistenceError
from order_service.models.order import Order, OrderItem
from order_service.schemas.order import OrderItemCreate

logger = logging.getLogger(__name__)

# Limits of the INTEGER quantity and NUMERIC(10, 2) total_price columns
MAX_QUANTITY = 2147483647
MAX_TOTAL_PRICE = Decimal("99999999.99")


def validate_order_request(customer_email: str, items: Sequence[OrderItemCreate]) -> None:
    """
    Reject a malformed order request before any store access

    Raises:
        OrderValidationError: If the customer or any item is invalid
    """
    if not customer_email or not customer_email.strip():
        raise OrderValidationError("customer_email is required")
    if not items:
        raise OrderValidationError("Order must contain at least one item")

    for position, item in enumerate(items):
        if not item.game_name or not item.game_name.strip():
            raise OrderValidationError(f"items.{position}.game_name is required")
        if item.price is None or item.price <= 0:
            raise OrderValidationError(f"items.{position}.price must be positive")
        if item.quantity is None or item.quantity <= 0:
            raise OrderValidationError(f"items.{position}.quantity must be positive")
        if item.quantity > MAX_QUANTITY:
            raise OrderValidationError(f"items.{position}.quantity must not exceed {MAX_QUANTITY}")

    if calculate_total(items) > MAX_TOTAL_PRICE:
        raise OrderValidationError(f"Order total must not exceed {MAX_TOTAL_PRICE}")


def calculate_total(items: Sequence[OrderItemCreate]) -> Decimal:
    """Exact decimal sum of price x quantity over the requested items"""
    return sum((Decimal(item.price) * item.quantity for item in items), Decimal("0"))


class OrderRepository:
    """Repository for Order and OrderItem operations"""

    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> List[Order]:
        """Get all orders with their items, newest first"""
        return self.db.query(Order).options(
            selectinload(Order.items)
        ).order_by(desc(Order.created_at), desc(Order.id)).all()

    def get_by_id(self, order_id: int) -> Optional[Order]:
        """Get order with its items by ID"""
        return self.db.query(Order).options(
            selectinload(Order.items)
        ).filter(Order.id == order_id).first()

    def get_items(self, order_id: int) -> List[OrderItem]:
        """Get persisted items of an order"""
        return self.db.query(OrderItem).filter(
            OrderItem.order_id == order_id
        ).order_by(OrderItem.id).all()

    def create_with_items(self, customer_email: str, items: Sequence[OrderItemCreate]) -> Order:
        """
        Atomically create an order together with all of its items

        The order row is inserted first so its id is known, then one row
        per item in the caller's order. Everything is committed in a single
        transaction; any failure rolls the whole attempt back.

        Args:
            customer_email: Customer contact
            items: Requested items (at least one)

        Returns:
            Persisted order with its items attached

        Raises:
            OrderValidationError: If the request is invalid (store untouched)
            PersistenceError: If any insert or the commit fails
        """
        validate_order_request(customer_email, items)
        total_price = calculate_total(items)

        try:
            order = Order(customer_email=customer_email, total_price=total_price)
            self.db.add(order)
            self.db.flush()

            for item in items:
                self.db.add(OrderItem(
                    order_id=order.id,
                    game_name=item.game_name,
                    price=item.price,
                    quantity=item.quantity
                ))
                self.db.flush()

            self.db.commit()
        except Exception as e:
            self.db.rollback()
            logger.error("Order creation rolled back for %s: %s", customer_email, e)
            raise PersistenceError("Failed to create order") from e

        self.db.refresh(order)
        set_committed_value(order, "items", self.get_items(order.id))
        return order

    def update_status(self, order_id: int, new_status: str) -> Optional[Order]:
        """Update order status"""
        order = self.db.query(Order).filter(Order.id == order_id).first()
        if not order:
            return None

        order.status = new_status
        self.db.commit()
        self.db.refresh(order)
        return order

    def exists(self, order_id: int) -> bool:
        """Check whether an order with this ID exists"""
        return self.db.query(Order.id).filter(Order.id == order_id).first() is not None
