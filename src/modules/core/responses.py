"""Uniform response envelope: ``{status, message, data}``."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from rest_framework.response import Response


class Envelope(BaseModel):
    """Body shape shared by every endpoint, success or failure."""

    model_config = ConfigDict(frozen=True)

    status: int
    message: str
    data: Any = None


def envelope(status: int, message: str, data: Any = None) -> Response:
    """Build a DRF ``Response`` whose HTTP status matches ``status``."""
    body = Envelope(status=status, message=message, data=data)
    return Response(body.model_dump(), status=status)
