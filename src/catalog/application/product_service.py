"""Application service: product lifecycle.

Orchestrates validation, category resolution, optional file storage and
persistence. Every check runs before the first write, so a rejected
request leaves both the store and the file storage untouched.

Known limitation: the file is stored before the product is saved and
the two are not transactional. If the save fails afterwards, the stored
file stays behind. The service logs the orphaned reference and lets the
error propagate.
"""

from __future__ import annotations

import structlog

from catalog.application.category_service import CategoryService
from catalog.application.dto import ProductDraft, ProductEdit
from catalog.application.validation import validate_draft, validate_edit
from catalog.domain.exceptions import (
    CollaboratorError,
    EntityNotFoundError,
    UnresolvedReferenceError,
)
from catalog.domain.model.product import Product
from catalog.domain.model.uploaded_file import UploadedFile
from catalog.domain.repository.base import Repository
from catalog.domain.storage import FileStorage

logger = structlog.get_logger(__name__)


class ProductService:

    def __init__(
        self,
        product_repo: Repository[Product, int],
        category_service: CategoryService,
        storage: FileStorage,
    ) -> None:
        self._product_repo = product_repo
        self._category_service = category_service
        self._storage = storage

    # --- Queries --------------------------------------------------------------

    def find_all(self) -> list[Product]:
        """Return every product. An empty catalog is not an error here."""
        return self._product_repo.find_all()

    def find_by_id(self, product_id: int) -> Product | None:
        return self._product_repo.find_by_id(product_id)

    def get(self, product_id: int) -> Product:
        """Like find_by_id, but a missing product raises EntityNotFoundError."""
        product = self._product_repo.find_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(product_id)
        return product

    # --- Commands -------------------------------------------------------------

    def create(self, draft: ProductDraft, file: UploadedFile | None = None) -> Product:
        """Validate a draft, attach its category and image, and persist it.

        Raises:
            ValidationError: empty name or negative price.
            UnresolvedReferenceError: the category does not exist.
            StorageError / PersistenceError: a collaborator failed.
        """
        name, price = validate_draft(draft)

        category = self._category_service.find_by_id(draft.category_id)
        if category is None:
            logger.warning("product.category_missing", category_id=draft.category_id)
            raise UnresolvedReferenceError("category", draft.category_id)

        image: str | None = None
        if file is not None and not file.is_empty:
            image = self._storage.store(file.content, file.filename)
            logger.info("product.image_stored", image=image)

        product = Product(
            id=None, name=name, price=price, category=category, image=image
        )
        try:
            product = self._product_repo.save(product)
        except CollaboratorError:
            if image is not None:
                logger.warning("product.image_orphaned", image=image)
            raise

        logger.info(
            "product.created",
            product_id=product.id,
            category_id=category.id,
            has_image=image is not None,
        )
        return product

    def edit(self, product_id: int, edit: ProductEdit) -> Product:
        """Change the name and price of an existing product.

        Raises:
            ValidationError: empty name or a price that is not positive.
            EntityNotFoundError: no product with this ID.
        """
        name, price = validate_edit(edit)

        product = self._product_repo.find_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(product_id)

        product.apply_edit(name, price)
        product = self._product_repo.save(product)
        logger.info("product.updated", product_id=product_id)
        return product

    def delete(self, product_id: int) -> None:
        """Remove an existing product.

        Raises:
            EntityNotFoundError: no product with this ID.
        """
        product = self._product_repo.find_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(product_id)

        self._product_repo.delete(product)
        logger.info("product.deleted", product_id=product_id)
