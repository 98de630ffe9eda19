"""Product aggregate.

A product is born through the creation workflow of the product service,
changes only its name and price afterwards, and disappears on delete.
Its category and image reference are fixed once it has been created.
"""

from __future__ import annotations

from dataclasses import dataclass

from catalog.domain.model.category import Category
from catalog.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    This is an aggregate root. ``id`` stays None until the repository
    persists the product for the first time. ``image`` is the opaque
    reference returned by file storage, or None when no file was given.
    """

    id: int | None
    name: str
    price: Money
    category: Category
    image: str | None = None

    def apply_edit(self, name: str, price: Money) -> None:
        """Overwrite the editable fields, leaving category and image alone."""
        self.name = name
        self.price = price
