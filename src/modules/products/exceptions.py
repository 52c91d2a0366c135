"""Product error conditions.

Raised by the DTO factories and the Service Layer when a request cannot be
fulfilled.  Each helper returns a ``CatalogError`` tagged with the matching
``Condition``; the DRF exception handler turns it into an error envelope.
"""

from __future__ import annotations

from modules.core.exceptions import CatalogError, Condition, ErrorKind, ErrorReason


def blank_field(field: str) -> CatalogError:
    """A required text field was missing or empty."""
    return CatalogError(Condition(ErrorKind.VALIDATION, ErrorReason.BLANK, field))


def product_already_registered() -> CatalogError:
    """Another product already uses the requested name."""
    return CatalogError(Condition(ErrorKind.VALIDATION, ErrorReason.ALREADY_REGISTERED))


def invalid_product_status() -> CatalogError:
    """The supplied status is not one of ``ProductStatus``."""
    return CatalogError(
        Condition(ErrorKind.VALIDATION, ErrorReason.INVALID_PRODUCT_STATUS)
    )


def password_mismatch() -> CatalogError:
    """The supplied password does not match the product's."""
    return CatalogError(Condition(ErrorKind.UNAUTHORIZED, ErrorReason.PASSWORD_MISMATCH))


def product_not_found() -> CatalogError:
    """The requested product does not exist."""
    return CatalogError(Condition(ErrorKind.NOT_FOUND))


def malformed_request() -> CatalogError:
    """The request body is not a JSON object, or a text field is not text."""
    return CatalogError(Condition(ErrorKind.VALIDATION, ErrorReason.MALFORMED_REQUEST))
