"""JSON-file-backed implementation of the generic Repository.

One class serves every entity type. The entity-specific parts are the
two codec callables that convert between domain objects and JSON
records, plus the accessors for the integer identity.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Generic, TypeVar

import structlog

from catalog.domain.exceptions import PersistenceError
from catalog.domain.repository.base import Repository

logger = structlog.get_logger(__name__)

E = TypeVar("E")

Record = dict[str, Any]


class JsonRepository(Repository[E, int], Generic[E]):

    def __init__(
        self,
        file_path: Path,
        to_raw: Callable[[E], Record],
        to_domain: Callable[[Record], E],
        get_id: Callable[[E], int | None] = lambda e: e.id,  # type: ignore[attr-defined]
        set_id: Callable[[E, int], None] = lambda e, i: setattr(e, "id", i),
    ) -> None:
        self._file_path = file_path
        self._to_raw = to_raw
        self._to_domain = to_domain
        self._get_id = get_id
        self._set_id = set_id
        self._ensure_file()

    # --- Repository interface -------------------------------------------------

    def find_by_id(self, entity_id: int) -> E | None:
        for raw in self._load_raw():
            if raw["id"] == entity_id:
                return self._decode(raw)
        return None

    def find_all(self) -> list[E]:
        return [self._decode(raw) for raw in self._load_raw()]

    def save(self, entity: E) -> E:
        records = self._load_raw()
        if self._get_id(entity) is None:
            # Auto-assign ID based on existing records
            next_id = max((raw["id"] for raw in records), default=0) + 1
            self._set_id(entity, next_id)

        entity_id = self._get_id(entity)
        raw_entity = self._to_raw(entity)
        for i, raw in enumerate(records):
            if raw["id"] == entity_id:
                records[i] = raw_entity
                break
        else:
            records.append(raw_entity)

        self._persist_raw(records)
        return entity

    def delete(self, entity: E) -> None:
        entity_id = self._get_id(entity)
        records = [raw for raw in self._load_raw() if raw["id"] != entity_id]
        self._persist_raw(records)

    # --- Serialization --------------------------------------------------------

    def _decode(self, raw: Record) -> E:
        try:
            return self._to_domain(raw)
        except (KeyError, TypeError, ValueError, ArithmeticError) as exc:
            raise PersistenceError(
                f"Corrupt record in {self._file_path}: {raw!r}"
            ) from exc

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[Record]:
        try:
            records = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.error("repository.read_failed", path=str(self._file_path))
            raise PersistenceError(f"Cannot read {self._file_path}: {exc}") from exc
        if not isinstance(records, list):
            raise PersistenceError(f"Expected a JSON list in {self._file_path}")
        for raw in records:
            if not (
                isinstance(raw, dict)
                and isinstance(raw.get("id"), int)
                and not isinstance(raw["id"], bool)
            ):
                raise PersistenceError(
                    f"Corrupt record in {self._file_path}: {raw!r}"
                )
        return records

    def _persist_raw(self, records: list[Record]) -> None:
        try:
            self._file_path.write_text(
                json.dumps(records, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            logger.error("repository.write_failed", path=str(self._file_path))
            raise PersistenceError(f"Cannot write {self._file_path}: {exc}") from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            try:
                self._file_path.parent.mkdir(parents=True, exist_ok=True)
                self._file_path.write_text("[]", encoding="utf-8")
            except OSError as exc:
                raise PersistenceError(
                    f"Cannot create {self._file_path}: {exc}"
                ) from exc
