"""JSON record codecs for the catalog entities.

Products embed a snapshot of their category (id and name), so a
product record can be read without touching the category file.
"""

from __future__ import annotations

from decimal import Decimal

from catalog.domain.model.category import Category
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money
from catalog.infrastructure.persistence.json_repository import Record


def category_to_raw(category: Category) -> Record:
    return {"id": category.id, "name": category.name}


def category_to_domain(raw: Record) -> Category:
    return Category(id=raw["id"], name=raw["name"])


def product_to_raw(product: Product) -> Record:
    return {
        "id": product.id,
        "name": product.name,
        "price": str(product.price.amount),
        "currency": product.price.currency,
        "image": product.image,
        "category": category_to_raw(product.category),
    }


def product_to_domain(raw: Record) -> Product:
    return Product(
        id=raw["id"],
        name=raw["name"],
        price=Money(Decimal(raw["price"]), raw.get("currency", "EUR")),
        category=category_to_domain(raw["category"]),
        image=raw.get("image"),
    )
