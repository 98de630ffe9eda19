"""Generic repository contract.

Defined in the domain layer so the domain never depends on
infrastructure. A single contract parameterised by entity and key
type serves every entity: ``Repository[Product, int]``,
``Repository[Category, int]``. Concrete implementations (JSON,
in-memory) live in the infrastructure layer and in the test fakes.

Absence is represented by ``None``, never raised. Callers decide
whether a missing entity is an error.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

E = TypeVar("E")
K = TypeVar("K")


class Repository(ABC, Generic[E, K]):

    @abstractmethod
    def find_by_id(self, entity_id: K) -> E | None:
        """Return the entity with this ID, or None if not found."""

    @abstractmethod
    def find_all(self) -> list[E]:
        """Return every stored entity (possibly an empty list)."""

    @abstractmethod
    def save(self, entity: E) -> E:
        """Insert a new entity or update an existing one.

        Returns the persisted form, with its identity assigned.
        """

    @abstractmethod
    def delete(self, entity: E) -> None:
        """Remove the entity from the store."""
