"""Application service: category lookups."""

from __future__ import annotations

import structlog

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.category import Category
from catalog.domain.repository.base import Repository

logger = structlog.get_logger(__name__)


class CategoryService:

    def __init__(self, category_repo: Repository[Category, int]) -> None:
        self._category_repo = category_repo

    def find_by_id(self, category_id: int) -> Category | None:
        return self._category_repo.find_by_id(category_id)

    def find_all(self) -> list[Category]:
        return self._category_repo.find_all()

    def add(self, name: str) -> Category:
        """Register a new category so products can reference it."""
        if not name or not name.strip():
            raise ValidationError("name", "empty", "Category name is required")

        category = self._category_repo.save(Category(id=None, name=name.strip()))
        logger.info("category.created", category_id=category.id, name=category.name)
        return category
