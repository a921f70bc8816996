import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, DateTime, Numeric, ForeignKey

from app.data.database import Base


class WalletTransactionModel(Base):
    """Append-only ledger portfela. Nigdy nie aktualizujemy ani nie usuwamy wpisow."""

    __tablename__ = "wallet_transactions"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)

    type = Column(String, nullable=False)  # credit, debit
    amount = Column(Numeric(10, 2), nullable=False)
    description = Column(String, nullable=False)
    order_id = Column(String(36), ForeignKey("orders.id"), nullable=True)
    status = Column(String, nullable=False, default="completed")

    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
