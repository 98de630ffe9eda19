"""Data Transfer Objects: plain containers that cross layer boundaries.

Drafts and edits carry raw user input into the services; ProductDTO
carries a product back out without exposing the aggregate.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from catalog.domain.model.product import Product


@dataclass(frozen=True)
class ProductDraft:
    """Input: an unvalidated product to create."""

    name: str
    price: str | float | int | Decimal
    category_id: int


@dataclass(frozen=True)
class ProductEdit:
    """Input: the editable fields of an existing product."""

    name: str
    price: str | float | int | Decimal


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as displayed to the user."""

    id: int
    name: str
    price: str  # formatted, e.g. "49.99"
    image: str | None
    category: str

    @classmethod
    def from_product(cls, product: Product) -> ProductDTO:
        return cls(
            id=product.id,  # type: ignore[arg-type]
            name=product.name,
            price=str(product.price),
            image=product.image,
            category=product.category.name,
        )
