# models/errors.py
"""
Errors raised by the storefront core.

Promo errors are user-correctable: the session reports them to the
presentation layer as advisory messages and keeps cart/favorites intact.
"""

from utils.formatters import plain_number


class StorefrontError(Exception):
    """Base class for storefront business rule violations."""


class PromoError(StorefrontError):
    """A submitted promo code was rejected."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


class PromoNotFound(PromoError):
    def __init__(self, code: str):
        super().__init__(code, "Промокод не найден")


class PromoThresholdNotMet(PromoError):
    # carries the required minimum so the UI can show it
    def __init__(self, code: str, min_amount: float):
        super().__init__(code, f"Минимальная сумма заказа: {plain_number(min_amount)}₽")
        self.min_amount = min_amount


class ProductNotFound(StorefrontError, KeyError):
    def __init__(self, product_id: int):
        super().__init__(product_id)
        self.product_id = product_id

    def __str__(self):
        return f"Product not found: {self.product_id}"


class EmptyCartError(StorefrontError):
    def __init__(self):
        super().__init__("Cart is empty.")
