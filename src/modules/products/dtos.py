"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF views) and the
Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for partial product updates.
- ``DeleteProductDTO``: password accompanying a deletion.

Request bodies go through ``from_payload`` rather than the constructor so
that a missing field surfaces as a field-specific ``Blank`` condition
instead of a generic pydantic error.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from modules.products.exceptions import blank_field, malformed_request


def is_blank(value: Any) -> bool:
    """``None``, empty/whitespace strings and other falsy values are blank."""
    if isinstance(value, str):
        return not value.strip()
    return not value


def _as_mapping(data: Any) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise malformed_request()
    return data


def _number_to_text(value: Any) -> Any:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    All four fields are required.  Text fields other than ``password`` are
    stripped of surrounding whitespace.
    """

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    name: str
    description: str
    manager: str
    password: str

    @field_validator("name", "description", "manager")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip()

    @classmethod
    def from_payload(cls, data: Any) -> CreateProductDTO:
        """Build from a request body, checking fields in declaration order.

        Raises:
            CatalogError: ``ValidationError / Blank / <field>`` for the
                first missing or empty field.
        """
        data = _as_mapping(data)
        for field in ("name", "description", "manager", "password"):
            if is_blank(data.get(field)):
                raise blank_field(field)
        return cls(
            name=data["name"],
            description=data["description"],
            manager=data["manager"],
            password=data["password"],
        )


class UpdateProductDTO(BaseModel):
    """Immutable DTO for product update requests.

    Fields hold the raw JSON values: the service checks existence and the
    password before anything else, so type problems in the other fields
    must not surface here.  Numbers become text and blank values become
    ``None`` (not supplied).  ``status`` is kept verbatim so the service can
    reject unknown values of any type.
    """

    model_config = ConfigDict(frozen=True)

    password: Any = None
    name: Any = None
    description: Any = None
    manager: Any = None
    status: Any = None

    @field_validator("name", "description", "manager")
    @classmethod
    def blank_text_to_none(cls, v: Any) -> Any:
        v = _number_to_text(v)
        if is_blank(v):
            return None
        return v.strip() if isinstance(v, str) else v

    @field_validator("password")
    @classmethod
    def blank_password_to_none(cls, v: Any) -> Any:
        v = _number_to_text(v)
        return None if is_blank(v) else v

    @classmethod
    def from_payload(cls, data: Any) -> UpdateProductDTO:
        data = _as_mapping(data)
        return cls(
            password=data.get("password"),
            name=data.get("name"),
            description=data.get("description"),
            manager=data.get("manager"),
            status=data.get("status"),
        )

    def changes(self) -> dict[str, str]:
        """Fields to apply to the product, ``password`` excluded.

        Raises:
            CatalogError: ``Malformed Request`` if a text field is not text.
        """
        changes = {}
        for field in ("name", "description", "manager"):
            value = getattr(self, field)
            if value is None:
                continue
            if not isinstance(value, str):
                raise malformed_request()
            changes[field] = value
        if self.status is not None:
            changes["status"] = self.status
        return changes


class DeleteProductDTO(BaseModel):
    """Immutable DTO for product deletion requests."""

    model_config = ConfigDict(frozen=True)

    password: Any = None

    @classmethod
    def from_payload(cls, data: Any) -> DeleteProductDTO:
        password = _number_to_text(_as_mapping(data).get("password"))
        return cls(password=None if is_blank(password) else password)
