"""
Products services - Business logic layer.

Administrative operations for the coffee-shop menu.
"""

from .catalog_management import (
    create_product,
    get_product_by_id,
    update_product,
    list_products,
    get_categories,
)

from .exceptions import (
    ProductsServiceError,
    ProductNotFoundError,
    InvalidPriceError,
)

__all__ = [
    # Catalog Management Services
    'create_product',
    'get_product_by_id',
    'update_product',
    'list_products',
    'get_categories',
    # Exceptions
    'ProductsServiceError',
    'ProductNotFoundError',
    'InvalidPriceError',
]
