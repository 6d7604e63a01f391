"""
Field types shared by the per-version asset schemas.
"""

from decimal import Decimal
from typing import Annotated, Any

from pydantic import Field, PlainSerializer

from app.domain.asset import MONEY_DECIMAL_PLACES, MONEY_MAX_DIGITS

# Monetary amount: parsed exactly as Decimal, limited to what the store
# keeps, written to JSON as a number
MonetaryAmount = Annotated[
    Decimal,
    Field(max_digits=MONEY_MAX_DIGITS, decimal_places=MONEY_DECIMAL_PLACES),
    PlainSerializer(lambda v: float(v), return_type=float, when_used="json"),
]


def reject_non_numeric(v: Any) -> Any:
    """Refuse strings and booleans where a JSON number is expected."""
    if isinstance(v, (str, bool)):
        raise ValueError("Input should be a number")
    return v
