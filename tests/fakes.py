"""In-memory fakes for testing.

These implement the same abstract interfaces as the JSON repository and
local file storage but keep everything in memory. No file I/O, no side
effects. Each fake records the calls it receives so tests can assert
that a rejected request never reached it.
"""

from __future__ import annotations

import copy
from typing import Generic, TypeVar

from catalog.domain.exceptions import PersistenceError, StorageError
from catalog.domain.model.category import Category
from catalog.domain.repository.base import Repository
from catalog.domain.storage import FileStorage

E = TypeVar("E")


class FakeRepository(Repository[E, int], Generic[E]):

    def __init__(self, entities: list[E] | None = None) -> None:
        self._store: dict[int, E] = {}
        self.saved: list[E] = []
        self.deleted: list[E] = []
        self.fail_on_save = False
        for e in entities or []:
            self._store[e.id] = e  # type: ignore[attr-defined]

    def find_by_id(self, entity_id: int) -> E | None:
        # Copies mimic a real store: mutating a result does not persist it
        entity = self._store.get(entity_id)
        return copy.deepcopy(entity)

    def find_all(self) -> list[E]:
        return [copy.deepcopy(e) for e in self._store.values()]

    def save(self, entity: E) -> E:
        if self.fail_on_save:
            raise PersistenceError("disk full")
        if entity.id is None:  # type: ignore[attr-defined]
            entity.id = max(self._store, default=0) + 1  # type: ignore[attr-defined]
        self._store[entity.id] = copy.deepcopy(entity)  # type: ignore[attr-defined]
        self.saved.append(entity)
        return entity

    def delete(self, entity: E) -> None:
        self._store.pop(entity.id, None)  # type: ignore[attr-defined]
        self.deleted.append(entity)


class FakeFileStorage(FileStorage):

    def __init__(self, fail: bool = False) -> None:
        self.calls: list[tuple[bytes, str]] = []
        self._fail = fail

    def store(self, content: bytes, filename: str) -> str:
        self.calls.append((content, filename))
        if self._fail:
            raise StorageError("quota exceeded")
        return f"memory://{len(self.calls)}/{filename}"


def default_categories() -> list[Category]:
    return [Category(id=1, name="Furniture"), Category(id=2, name="Lighting")]
