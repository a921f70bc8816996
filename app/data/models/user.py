import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, DateTime, Numeric

from app.data.database import Base


class UserModel(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    full_name = Column(String, nullable=False)

    # saldo portfela z prowizji partnerskich
    wallet_balance = Column(Numeric(10, 2), nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
