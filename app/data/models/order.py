import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, DateTime, Numeric, Text, JSON

from app.data.database import Base


class OrderModel(Base):
    __tablename__ = "orders"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), nullable=False, index=True)

    # snapshot pozycji z koszyka: productId, name, quantity, price, variantName
    products = Column(JSON, nullable=False)
    total_price = Column(Numeric(10, 2), nullable=False)
    delivery_address = Column(Text, nullable=True)
    payment_method = Column(String, nullable=True)
    paid_from_wallet = Column(Numeric(10, 2), nullable=False, default=0)

    status = Column(String, nullable=False, default="pending")
    expected_delivery = Column(DateTime(timezone=True), nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
