"""Error conditions and their translation into HTTP envelopes.

Every failure raised by the service layer is a ``CatalogError`` carrying a
``Condition`` (kind, reason, optional detail).  Views never catch errors:
DRF hands every exception to ``envelope_exception_handler`` which is the
only place an HTTP status and a user-facing message are chosen.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple

import structlog
from django.http import Http404
from pydantic import ValidationError as PydanticValidationError
from rest_framework import exceptions as drf_exceptions
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import set_rollback

from modules.core.responses import envelope

logger = structlog.get_logger(__name__)


class ErrorKind(str, Enum):
    VALIDATION = "ValidationError"
    UNAUTHORIZED = "UnauthorizedError"
    NOT_FOUND = "NotFound"
    UNCLASSIFIED = "Unclassified"


class ErrorReason(str, Enum):
    BLANK = "Blank"
    ALREADY_REGISTERED = "Already Registered"
    INVALID_PRODUCT_STATUS = "Invalid Product Status"
    PASSWORD_MISMATCH = "Password Mismatch"
    MALFORMED_REQUEST = "Malformed Request"


@dataclass(frozen=True)
class Condition:
    """Internal description of a failure before HTTP translation."""

    kind: ErrorKind
    reason: Optional[ErrorReason] = None
    detail: Optional[str] = None


class CatalogError(Exception):
    """Raised at the point of failure; carries a ``Condition``."""

    def __init__(self, condition: Condition) -> None:
        self.condition = condition
        parts = [condition.kind.value]
        if condition.reason is not None:
            parts.append(condition.reason.value)
        if condition.detail:
            parts.append(condition.detail)
        super().__init__(" / ".join(parts))


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------

BLANK_MESSAGES = {
    "name": "상품 이름을 입력해 주세요.",
    "description": "상품 설명을 입력해 주세요.",
    "manager": "담당자를 입력해 주세요.",
    "password": "비밀번호를 입력해 주세요.",
}

VALIDATION_MESSAGES = {
    ErrorReason.ALREADY_REGISTERED: "이미 등록 된 상품입니다.",
    ErrorReason.INVALID_PRODUCT_STATUS: "상품 상태는 [FOR_SALE, SOLD_OUT] 중 하나여야 합니다.",
    ErrorReason.MALFORMED_REQUEST: "요청 형식이 올바르지 않습니다.",
}

PASSWORD_MISMATCH_MESSAGE = "비밀번호가 일치하지 않습니다."
NOT_FOUND_MESSAGE = "상품이 존재하지 않습니다."
UNEXPECTED_MESSAGE = "예상치 못한 에러가 발생했습니다. 관리자에게 문의해 주세요."


def classify(condition: Condition) -> Tuple[int, str]:
    """Map a condition to ``(http_status, message)``."""
    if condition.kind is ErrorKind.VALIDATION:
        if condition.reason is ErrorReason.BLANK:
            message = BLANK_MESSAGES.get(condition.detail or "")
        else:
            message = VALIDATION_MESSAGES.get(condition.reason)
        return (
            status.HTTP_400_BAD_REQUEST,
            message or VALIDATION_MESSAGES[ErrorReason.MALFORMED_REQUEST],
        )

    if (
        condition.kind is ErrorKind.UNAUTHORIZED
        and condition.reason is ErrorReason.PASSWORD_MISMATCH
    ):
        return status.HTTP_401_UNAUTHORIZED, PASSWORD_MISMATCH_MESSAGE

    if condition.kind is ErrorKind.NOT_FOUND:
        return status.HTTP_404_NOT_FOUND, NOT_FOUND_MESSAGE

    return status.HTTP_500_INTERNAL_SERVER_ERROR, UNEXPECTED_MESSAGE


def to_condition(exc: Exception) -> Condition:
    """Derive a condition from any exception reaching the handler."""
    if isinstance(exc, CatalogError):
        return exc.condition
    if isinstance(exc, (Http404, drf_exceptions.NotFound)):
        return Condition(ErrorKind.NOT_FOUND)
    if isinstance(exc, (drf_exceptions.ParseError, PydanticValidationError)):
        return Condition(ErrorKind.VALIDATION, ErrorReason.MALFORMED_REQUEST)
    return Condition(ErrorKind.UNCLASSIFIED)


# ---------------------------------------------------------------------------
# DRF hook
# ---------------------------------------------------------------------------


def envelope_exception_handler(exc: Exception, context: dict[str, Any]) -> Response:
    """DRF ``EXCEPTION_HANDLER``: always answers with an error envelope."""
    condition = to_condition(exc)
    status_code, message = classify(condition)

    # Framework-level rejections (405, 415, ...) keep their own status.
    if condition.kind is ErrorKind.UNCLASSIFIED and isinstance(
        exc, drf_exceptions.APIException
    ):
        status_code = exc.status_code
        message = str(exc.detail)

    request = context.get("request")
    log = logger.bind(
        kind=condition.kind.value,
        reason=condition.reason.value if condition.reason else None,
        detail=condition.detail,
        status_code=status_code,
        method=getattr(request, "method", None),
        path=request.get_full_path() if request is not None else None,
    )
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        log.error("request_failed", error=repr(exc), exc_info=exc)
    else:
        # Pydantic messages echo the rejected input, which may be a password.
        error = str(exc) if isinstance(exc, CatalogError) else type(exc).__name__
        log.warning("request_failed", error=error)

    set_rollback()
    return envelope(status_code, message)
