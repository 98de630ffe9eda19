"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from catalog.domain.exceptions import ValidationError

# Prices must stay below 10**13
_MAX_EXPONENT = 12


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal so a price typed as "49.99" is stored and shown as
    exactly that, never as a float approximation.
    """

    amount: Decimal
    currency: str = "EUR"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise TypeError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                "price", "negative", f"Money amount cannot be negative, got {self.amount}"
            )

    def __str__(self) -> str:
        return f"{self.amount:.2f}"

    @staticmethod
    def parse(raw: str | float | int | Decimal) -> Decimal:
        """Coerce a raw price to Decimal without applying any range rule."""
        if isinstance(raw, bool):
            raise ValidationError("price", "invalid", f"Invalid price: {raw!r}")
        try:
            amount = Decimal(str(raw).strip())
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError("price", "invalid", f"Invalid price: {raw!r}") from exc
        if not amount.is_finite() or amount.adjusted() > _MAX_EXPONENT:
            raise ValidationError("price", "invalid", f"Invalid price: {raw!r}")
        if amount.is_zero():
            # "-0" is still zero; drop the sign so it never renders as -0.00
            amount = amount.copy_abs()
        return amount

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        return Money(Money.parse(amount))
