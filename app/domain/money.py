# app/domain/money.py
from decimal import Decimal, InvalidOperation
from typing import Annotated, Any

from pydantic import PlainSerializer

from app.domain.errors import InvalidAmount

CENT = Decimal("0.01")

# kolumny Numeric(10, 2): max 8 cyfr przed przecinkiem, 2 po
MAX_INTEGER_DIGITS = 8


def parse_amount(value: Any, field: str) -> Decimal:
    """Kwota jako Decimal, nigdy float. Musi byc skonczona, >= 0 i miescic sie w Numeric(10, 2)."""
    try:
        amount = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise InvalidAmount(f"{field} must be a decimal number, got {value!r}")

    if not amount.is_finite() or amount < 0:
        raise InvalidAmount(f"{field} must be a non-negative decimal, got {value!r}")

    if amount.adjusted() >= MAX_INTEGER_DIGITS:
        raise InvalidAmount(f"{field} is too large, got {value!r}")

    # "1.50" i "1.500" ok, "0.005" nie - baza by to zaokraglila
    if amount.quantize(CENT) != amount:
        raise InvalidAmount(f"{field} must have at most 2 decimal places, got {value!r}")

    return amount


def format_amount(amount: Decimal) -> str:
    # 1000.00 -> "1000", 99.90 -> "99.9"
    return format(amount.normalize(), "f")


# Decimal w pythonie, string bez zer ze skali kolumny w JSON-ie
Money = Annotated[Decimal, PlainSerializer(format_amount, return_type=str, when_used="json")]
