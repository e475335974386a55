# storefront/domain/money.py
from decimal import Decimal, ROUND_HALF_UP

CENT = Decimal("0.01")


def parse_price(price: str) -> Decimal:
    return Decimal(price)


def format_money(amount: Decimal) -> str:
    """Two decimal places, half-up, as a string ("200.00")."""
    return str(amount.quantize(CENT, rounding=ROUND_HALF_UP))


def line_total(unit_price: str, quantity: int) -> Decimal:
    return parse_price(unit_price) * quantity
