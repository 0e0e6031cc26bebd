"""
SQLAlchemy Order and OrderItem models
"""
from sqlalchemy import Column, Integer, String, Numeric, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from order_service.database import Base


class Order(Base):
    """Order database model"""

    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    customer_email = Column(String(255), nullable=False)
    total_price = Column(Numeric(10, 2), nullable=False)  # Computed once at creation
    status = Column(String(50), nullable=False, default="pending", server_default="pending")
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    items = relationship("OrderItem", back_populates="order", order_by="OrderItem.id")

    __table_args__ = (
        CheckConstraint("total_price >= 0", name="check_total_price_non_negative"),
    )

    def __repr__(self):
        return f"<Order(id={self.id}, customer_email='{self.customer_email}', total_price={self.total_price}, status='{self.status}')>"


class OrderItem(Base):
    """Order line item database model"""

    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    order_id = Column(Integer, ForeignKey("orders.id"), nullable=False, index=True)
    game_name = Column(String(255), nullable=False)  # Denormalized, no FK to games
    price = Column(Numeric(10, 2), nullable=False)
    quantity = Column(Integer, nullable=False, default=1, server_default="1")

    order = relationship("Order", back_populates="items")

    __table_args__ = (
        CheckConstraint("quantity > 0", name="check_item_quantity_positive"),
    )

    def __repr__(self):
        return f"<OrderItem(id={self.id}, order_id={self.order_id}, game_name='{self.game_name}', quantity={self.quantity})>"
