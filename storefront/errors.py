"""
Common Error Constants and Exceptions

Centralized error messages to avoid string duplication.
"""

# Product errors
ERROR_PRODUCT_NOT_FOUND = "Product not found"

# Cart errors
ERROR_INVALID_PROMO = "Invalid promo code"
ERROR_PROMO_LOCKED = "A promo code is already applied"
ERROR_UNKNOWN_ACTION = "Unknown cart action"
ERROR_CART_UNAVAILABLE = "Cart service unavailable"


class StorageError(RuntimeError):
    """Durable cart storage could not be read or written."""


class UnknownActionError(LookupError):
    """Cart action identifier is not in the dispatch table."""

    def __init__(self, action: str):
        super().__init__(f"{ERROR_UNKNOWN_ACTION}: {action}")
        self.action = action
