"""Product service layer (Use Cases).

Orchestrates business logic for the Product aggregate, delegating
persistence to the injected ``IProductRepository``.

Business rules enforced here:
- Product names are unique (checked before insert).
- Update and delete require the product's password.
- ``status`` must be one of ``ProductStatus`` when supplied.

The duplicate-name and existence checks are check-then-act: two
concurrent requests can both pass the check.  No transaction spans them.
"""

from __future__ import annotations

import hmac
from typing import TYPE_CHECKING, Any, Dict, List, Optional

import structlog
from django.utils import timezone

from modules.products.dtos import is_blank
from modules.products.exceptions import (
    blank_field,
    invalid_product_status,
    password_mismatch,
    product_already_registered,
    product_not_found,
)
from modules.products.models import Product, ProductStatus

if TYPE_CHECKING:
    from modules.products.dtos import (
        CreateProductDTO,
        DeleteProductDTO,
        UpdateProductDTO,
    )
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_product(self, dto: CreateProductDTO) -> Product:
        """Create a new product with status ``FOR_SALE``.

        Raises:
            CatalogError: ``Already Registered`` if the name is taken.
        """
        log = logger.bind(name=dto.name)

        if self._repo.get_by_name(dto.name) is not None:
            log.warning("product.duplicate_name")
            raise product_already_registered()

        now = timezone.now()
        product = Product(
            name=dto.name,
            description=dto.description,
            manager=dto.manager,
            password=dto.password,
            status=ProductStatus.FOR_SALE,
            created_at=now,
            updated_at=now,
        )
        product = self._repo.save(product)
        log.info("product.created", product_id=str(product.id))
        return product

    def update_product(self, id: str, dto: UpdateProductDTO) -> Product:
        """Apply the supplied fields to an existing product.

        Raises:
            CatalogError: ``NotFound``, ``Blank / password``,
                ``Password Mismatch``, ``Invalid Product Status`` or
                ``Malformed Request``, checked in that order.
        """
        product = self._authorize(id, dto.password)

        if dto.status is not None and dto.status not in ProductStatus.values:
            logger.warning("product.invalid_status", product_id=str(id))
            raise invalid_product_status()

        changes = dto.changes()
        for field, value in changes.items():
            setattr(product, field, value)
        product.touch()

        product = self._repo.save(product)
        logger.info("product.updated", product_id=str(id), fields=sorted(changes))
        return product

    def delete_product(self, id: str, dto: DeleteProductDTO) -> None:
        """Permanently delete a product.

        Raises:
            CatalogError: ``NotFound``, ``Blank / password`` or
                ``Password Mismatch``.
        """
        self._authorize(id, dto.password)
        if not self._repo.delete(id):
            # Removed by a concurrent request after the existence check.
            raise product_not_found()
        logger.info("product.deleted", product_id=str(id))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self, filters: Optional[Dict[str, Any]] = None) -> List[Product]:
        """Return products ordered by creation time, newest first."""
        return self._repo.list(filters)

    def get_product(self, id: str) -> Product:
        """Retrieve a single product by ID.

        Raises:
            CatalogError: ``NotFound`` if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if product is None:
            raise product_not_found()
        return product

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _authorize(self, id: str, password: Any) -> Product:
        product = self.get_product(id)
        if is_blank(password):
            raise blank_field("password")
        if not isinstance(password, str) or not hmac.compare_digest(
            password.encode(), product.password.encode()
        ):
            logger.warning("product.password_mismatch", product_id=str(id))
            raise password_mismatch()
        return product
