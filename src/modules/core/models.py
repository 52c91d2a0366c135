"""Base abstract model shared by the catalog's persisted entities.

``created_at`` / ``updated_at`` are plain columns rather than
``auto_now_add`` / ``auto_now``: the service layer stamps both values.
"""

from __future__ import annotations

from datetime import datetime

import uuid6
from django.db import models
from django.utils import timezone


class BaseModel(models.Model):
    """Abstract base with UUIDv7 PK and caller-managed timestamps."""

    id = models.UUIDField(
        primary_key=True,
        default=uuid6.uuid7,
        editable=False,
    )
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        abstract = True

    def touch(self, at: datetime | None = None) -> None:
        """Set ``updated_at`` to ``at`` (defaults to now)."""
        self.updated_at = at or timezone.now()
