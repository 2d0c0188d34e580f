from decimal import Decimal
from rest_framework import serializers
from .models import Product


# =============================================================================
# Input Serializers
# =============================================================================

class ProductFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for menu filtering.

    Query Parameters:
        category (str): Exact category (case-insensitive)
        search (str): Search in name and description
    """

    category = serializers.CharField(max_length=100, required=False, allow_blank=True)
    search = serializers.CharField(max_length=200, required=False, allow_blank=True)


class ProductCreateSerializer(serializers.Serializer):
    """Validate input for adding a menu item."""

    name = serializers.CharField(max_length=200)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal('0.00'))
    description = serializers.CharField(required=False, allow_blank=True, default='')
    category = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')


class ProductUpdateSerializer(serializers.Serializer):
    """Validate input for editing a menu item."""

    name = serializers.CharField(max_length=200, required=False)
    price = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=Decimal('0.00'), required=False
    )
    description = serializers.CharField(required=False, allow_blank=True)
    category = serializers.CharField(max_length=100, required=False, allow_blank=True)


# =============================================================================
# Output Serializers
# =============================================================================

class ProductSerializer(serializers.ModelSerializer):
    """Menu item."""

    class Meta:
        model = Product
        fields = [
            'id',
            'name',
            'description',
            'price',
            'category',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields
