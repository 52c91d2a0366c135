"""Product DRF serializers for API output and schema documentation.

The serializer operates at the Interface layer (API views).
Business logic lives in the Service Layer, which receives Pydantic DTOs
from ``dtos.py``; the request serializers below only describe the bodies
for the OpenAPI schema.  ``password`` is never part of an output.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product, ProductStatus


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "description",
            "manager",
            "status",
            "createdAt",
            "updatedAt",
        ]


class ProductCreateRequestSerializer(serializers.Serializer):
    name = serializers.CharField()
    description = serializers.CharField()
    manager = serializers.CharField()
    password = serializers.CharField(write_only=True)


class ProductUpdateRequestSerializer(serializers.Serializer):
    password = serializers.CharField(write_only=True)
    name = serializers.CharField(required=False)
    description = serializers.CharField(required=False)
    manager = serializers.CharField(required=False)
    status = serializers.ChoiceField(choices=ProductStatus.choices, required=False)


class ProductDeleteRequestSerializer(serializers.Serializer):
    password = serializers.CharField(write_only=True)
