"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.  Views never
catch errors: conditions raised by DTOs or the service propagate to
``modules.core.exceptions.envelope_exception_handler``.
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, extend_schema, inline_serializer
from rest_framework import serializers, status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.responses import envelope
from modules.products.dtos import CreateProductDTO, DeleteProductDTO, UpdateProductDTO
from modules.products.exceptions import malformed_request
from modules.products.filters import ProductFilter
from modules.products.models import ProductStatus
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import (
    ProductCreateRequestSerializer,
    ProductDeleteRequestSerializer,
    ProductSerializer,
    ProductUpdateRequestSerializer,
)
from modules.products.services import ProductService


def _enveloped(name: str, data: serializers.Field) -> serializers.Serializer:
    return inline_serializer(
        name=name,
        fields={
            "status": serializers.IntegerField(),
            "message": serializers.CharField(),
            "data": data,
        },
    )


_product_envelope = _enveloped("ProductEnvelope", ProductSerializer())
_update_schema = extend_schema(
    request=ProductUpdateRequestSerializer,
    responses={200: _product_envelope},
)


class ProductViewSet(ViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP); swap
    ``repository_class`` to run the same handlers against another store.
    """

    repository_class = ProductDjangoRepository

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=self.repository_class())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    @extend_schema(
        parameters=[
            OpenApiParameter("name", str, description="Case-insensitive substring."),
            OpenApiParameter("status", str, enum=ProductStatus.values),
        ],
        responses={
            200: _enveloped("ProductListEnvelope", ProductSerializer(many=True))
        },
    )
    def list(self, request: Request) -> Response:
        """GET /api/products"""
        filterset = ProductFilter(request.query_params)
        if not filterset.is_valid():
            raise malformed_request()

        products = self._service.list_products(filterset.lookups())
        return envelope(
            status.HTTP_200_OK,
            "상품 목록 조회에 성공했습니다.",
            ProductSerializer(products, many=True).data,
        )

    @extend_schema(responses={200: _product_envelope})
    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/products/{pk}"""
        product = self._service.get_product(pk)
        return envelope(
            status.HTTP_200_OK,
            "상품 상세 조회에 성공했습니다.",
            ProductSerializer(product).data,
        )

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(
        request=ProductCreateRequestSerializer,
        responses={201: _product_envelope},
    )
    def create(self, request: Request) -> Response:
        """POST /api/products"""
        dto = CreateProductDTO.from_payload(request.data)
        product = self._service.create_product(dto)
        return envelope(
            status.HTTP_201_CREATED,
            "상품 생성에 성공했습니다.",
            ProductSerializer(product).data,
        )

    @_update_schema
    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/products/{pk}"""
        dto = UpdateProductDTO.from_payload(request.data)
        product = self._service.update_product(pk, dto)
        return envelope(
            status.HTTP_200_OK,
            "상품 수정에 성공했습니다.",
            ProductSerializer(product).data,
        )

    @_update_schema
    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/products/{pk}"""
        return self.update(request, pk)

    @extend_schema(
        request=ProductDeleteRequestSerializer,
        responses={
            200: _enveloped(
                "ProductDeletedEnvelope",
                inline_serializer(
                    name="DeletedProduct", fields={"id": serializers.CharField()}
                ),
            )
        },
    )
    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/products/{pk}"""
        dto = DeleteProductDTO.from_payload(request.data)
        self._service.delete_product(pk, dto)
        return envelope(status.HTTP_200_OK, "상품 삭제에 성공했습니다.", {"id": pk})
