"""Catalog management service - administrative operations on menu items."""

from decimal import Decimal
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import Q, QuerySet

from apps.products.models import Product
from .exceptions import ProductNotFoundError, InvalidPriceError


def _validate_price(price: Decimal) -> None:
    if price < 0:
        raise InvalidPriceError("Price cannot be negative")


@transaction.atomic
def create_product(
    *,
    name: str,
    price: Decimal,
    description: str = '',
    category: str = '',
) -> Product:
    """
    Add an item to the menu.

    Raises:
        InvalidPriceError: If price is negative
    """
    _validate_price(price)

    return Product.objects.create(
        name=name.strip(),
        price=price,
        description=description,
        category=category.strip(),
    )


def get_product_by_id(*, product_id: UUID) -> Product:
    """
    Retrieve a product by ID.

    Raises:
        ProductNotFoundError: If product doesn't exist
    """
    try:
        return Product.objects.get(id=product_id)
    except Product.DoesNotExist:
        raise ProductNotFoundError("Product not found")


@transaction.atomic
def update_product(
    *,
    product_id: UUID,
    name: Optional[str] = None,
    price: Optional[Decimal] = None,
    description: Optional[str] = None,
    category: Optional[str] = None,
) -> Product:
    """
    Edit a menu item.

    Ledger entries keep their own reference to the product; a price change
    only affects purchases made afterwards.

    Raises:
        ProductNotFoundError: If product doesn't exist
        InvalidPriceError: If new price is negative
    """
    try:
        product = Product.objects.select_for_update().get(id=product_id)
    except Product.DoesNotExist:
        raise ProductNotFoundError("Product not found")

    update_fields = ['updated_at']

    if name is not None:
        product.name = name.strip()
        update_fields.append('name')

    if price is not None:
        _validate_price(price)
        product.price = price
        update_fields.append('price')

    if description is not None:
        product.description = description
        update_fields.append('description')

    if category is not None:
        product.category = category.strip()
        update_fields.append('category')

    product.save(update_fields=update_fields)
    return product


def list_products(*, category: str = '', search: str = '') -> QuerySet[Product]:
    """List menu items filtered by category and free-text search."""
    queryset = Product.objects.all()

    if category:
        queryset = queryset.filter(category__iexact=category)

    if search:
        queryset = queryset.filter(
            Q(name__icontains=search) |
            Q(description__icontains=search)
        )

    return queryset


def get_categories() -> list[str]:
    """Distinct non-empty categories on the menu, sorted."""
    return list(
        Product.objects.exclude(category='')
        .order_by('category')
        .values_list('category', flat=True)
        .distinct()
    )
