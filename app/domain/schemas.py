# app/domain/schemas.py
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.domain.money import Money, parse_amount


class CamelModel(BaseModel):
    """JSON na zewnatrz w camelCase, snake_case tez przyjmujemy."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class OrderStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    IN_TRANSIT = "in_transit"
    OUT_FOR_DELIVERY = "out_for_delivery"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"
    RETURNED = "returned"
    REFUNDED = "refunded"


# ----- cart -----

class SelectedPackage(CamelModel):
    """Snapshot wariantu produktu (np. opakowanie 10 szt.) z cena z chwili dodania."""

    name: str = Field(..., min_length=1)
    price: str = Field(..., min_length=1, description="Cena jako string dziesietny")

    @field_validator("price")
    @classmethod
    def price_is_amount(cls, v: str) -> str:
        # sprawdzamy, ale trzymamy oryginalny string ze snapshotu
        parse_amount(v, "selectedPackage.price")
        return v


class CartLineItem(CamelModel):
    id: str
    user_id: str
    product_id: str
    quantity: int
    selected_package: SelectedPackage


class AddToCartIn(CamelModel):
    user_id: str = Field(..., min_length=1)
    product_id: str = Field(..., min_length=1)
    quantity: int = Field(..., gt=0, description="Ilosc produktu (musi byc > 0)")
    selected_package: SelectedPackage


class UpdateCartItemIn(CamelModel):
    # <= 0 oznacza usuniecie pozycji
    quantity: int


class CartOut(CamelModel):
    success: bool = True
    cart: List[dict[str, Any]]


# ----- orders -----

class OrderProductIn(CamelModel):
    product_id: str = Field(..., min_length=1)
    name: str
    quantity: int = Field(..., ge=1)
    price: str
    variant_name: Optional[str] = None


class OrderCreate(CamelModel):
    user_id: str = Field(..., min_length=1)
    products: List[OrderProductIn] = Field(..., min_length=1)
    total_price: str
    delivery_address: str
    payment_method: str
    paid_from_wallet: str = "0"
    # zamowienie zawsze startuje jako pending
    status: Literal["pending"] = "pending"


class OrderOut(CamelModel):
    id: str
    user_id: str
    products: List[dict[str, Any]]
    total_price: Money
    delivery_address: Optional[str] = None
    payment_method: Optional[str] = None
    paid_from_wallet: Money
    status: OrderStatus
    expected_delivery: Optional[datetime] = None
    created_at: datetime
    updated_at: Optional[datetime] = None


class OrderStatusUpdate(CamelModel):
    status: OrderStatus


# ----- users & wallet -----

class UserCreate(CamelModel):
    id: Optional[str] = Field(None, min_length=1)
    full_name: str = Field(..., min_length=1, max_length=100)
    wallet_balance: Decimal = Field(Decimal("0"), ge=0)

    @field_validator("wallet_balance", mode="before")
    @classmethod
    def balance_fits_column(cls, v: Any) -> Decimal:
        return parse_amount(v, "walletBalance")


class UserRead(CamelModel):
    id: str
    full_name: str
    wallet_balance: Money


class WalletTransactionOut(CamelModel):
    id: str
    user_id: str
    type: str
    amount: Money
    description: str
    order_id: Optional[str] = None
    status: str
    created_at: datetime


class WalletOut(CamelModel):
    user_id: str
    balance: Money
    transactions: List[WalletTransactionOut]
