"""Product model.

Business rules implemented:
- Every text field (name, description, manager, password) is required.
- ``status`` is one of ``FOR_SALE`` / ``SOLD_OUT`` and starts as ``FOR_SALE``.
- ``password`` is stored as given and only ever compared, never rendered.

Name uniqueness is checked by the service before insert; there is no
UNIQUE index on ``name``.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class ProductStatus(models.TextChoices):
    FOR_SALE = "FOR_SALE", "For sale"
    SOLD_OUT = "SOLD_OUT", "Sold out"


class Product(BaseModel):
    """A catalog entry guarded by its own plaintext password."""

    name = models.TextField()
    description = models.TextField()
    manager = models.TextField()
    password = models.TextField()
    status = models.CharField(
        max_length=20,
        choices=ProductStatus.choices,
        default=ProductStatus.FOR_SALE,
    )

    class Meta:
        db_table = "products"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["name"], name="products_name_idx"),
            models.Index(fields=["created_at"], name="products_created_at_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.status})"
