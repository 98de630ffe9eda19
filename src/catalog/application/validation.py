"""Field-level validation rules applied before any mutation.

Creation accepts a price of zero; editing does not.
"""

from __future__ import annotations

from decimal import Decimal

from catalog.application.dto import ProductDraft, ProductEdit
from catalog.domain.exceptions import ValidationError
from catalog.domain.model.value_objects import Money


def validate_name(name: str | None) -> str:
    if not name or not name.strip():
        raise ValidationError("name", "empty", "Product name is required")
    return name.strip()


def validate_draft(draft: ProductDraft) -> tuple[str, Money]:
    """Check a creation draft. Returns the cleaned name and price."""
    name = validate_name(draft.name)
    amount = Money.parse(draft.price)
    if amount < Decimal("0"):
        raise ValidationError("price", "negative", "Price cannot be negative")
    return name, Money(amount)


def validate_edit(edit: ProductEdit) -> tuple[str, Money]:
    """Check an edit payload. Returns the cleaned name and price."""
    name = validate_name(edit.name)
    amount = Money.parse(edit.price)
    if amount <= Decimal("0"):
        raise ValidationError(
            "price", "non-positive", "Price must be greater than zero"
        )
    return name, Money(amount)
