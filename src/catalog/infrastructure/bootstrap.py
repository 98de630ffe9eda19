"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from catalog.application.category_service import CategoryService
from catalog.application.product_service import ProductService
from catalog.domain.model.category import Category
from catalog.domain.model.product import Product
from catalog.infrastructure.config import Settings, get_settings
from catalog.infrastructure.persistence.codecs import (
    category_to_domain,
    category_to_raw,
    product_to_domain,
    product_to_raw,
)
from catalog.infrastructure.persistence.json_repository import JsonRepository
from catalog.infrastructure.storage.local_file_storage import LocalFileStorage


def product_repository(settings: Settings | None = None) -> JsonRepository[Product]:
    settings = settings or get_settings()
    return JsonRepository(settings.products_file, product_to_raw, product_to_domain)


def category_repository(settings: Settings | None = None) -> JsonRepository[Category]:
    settings = settings or get_settings()
    return JsonRepository(settings.categories_file, category_to_raw, category_to_domain)


def file_storage(settings: Settings | None = None) -> LocalFileStorage:
    settings = settings or get_settings()
    return LocalFileStorage(settings.upload_dir, settings.files_base_url)


def category_service(settings: Settings | None = None) -> CategoryService:
    return CategoryService(category_repository(settings))


def product_service(settings: Settings | None = None) -> ProductService:
    return ProductService(
        product_repo=product_repository(settings),
        category_service=category_service(settings),
        storage=file_storage(settings),
    )
