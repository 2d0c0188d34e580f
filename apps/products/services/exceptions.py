"""Domain exceptions for products app."""


class ProductsServiceError(Exception):
    """Base exception for all products service errors."""
    pass


class ProductNotFoundError(ProductsServiceError):
    """Product does not exist."""
    pass


class InvalidPriceError(ProductsServiceError):
    """Price must be zero or positive."""
    pass
