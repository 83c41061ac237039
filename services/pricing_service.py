# services/pricing_service.py

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, List, Optional

from models.cart import CartItem
from models.product import Product
from models.promo import PromoCode


class DiscountRule(ABC):
    #Abstract base class for per-unit discount rules.
    #Each rule gets a chance to modify the unit price.

    @abstractmethod
    def apply(self, product: Product, qty: int, unit_price: float) -> float:
        pass


class ProductDiscountRule(DiscountRule):
    # The product's own optional discount, e.g. discount=20 means 20% off.
    # No rounding here: amounts stay exact until they are displayed.

    def apply(self, product, qty, unit_price):
        if product.has_discount:
            return unit_price * (1 - product.discount / 100)
        return unit_price


@dataclass(frozen=True)
class PriceBreakdown:
    subtotal: float
    promo_discount: float
    total: float
    promo: Optional[PromoCode] = None


class PricingService:
    # The PricingService applies all registered unit rules in sequence,
    # then takes the promo percentage off the post-rule subtotal.
    # The promo never re-discounts the original undiscounted price.

    def __init__(self, rules: Iterable[DiscountRule] | None = None):
        self.rules: List[DiscountRule] = list(rules) if rules is not None else [ProductDiscountRule()]

    def add_rule(self, rule: DiscountRule):
        self.rules.append(rule)

    def effective_price(self, product: Product, qty: int = 1) -> float:
        # Return the unit price of one product after all rules.
        price = product.price

        for rule in self.rules:
            price = rule.apply(product, qty, price)
            # safety clamp
            if price < 0:
                price = 0.0

        return price

    def line_total(self, item: CartItem) -> float:
        return self.effective_price(item.product, item.quantity) * item.quantity

    def subtotal(self, items: Iterable[CartItem]) -> float:
        return sum((self.line_total(it) for it in items), 0.0)

    def compute(self, items: Iterable[CartItem], promo: PromoCode | None = None) -> PriceBreakdown:
        subtotal = self.subtotal(items)
        promo_discount = subtotal * promo.discount / 100 if promo else 0.0
        # discount <= 100% so the total stays within [0, subtotal]
        total = max(subtotal - promo_discount, 0.0)
        return PriceBreakdown(
            subtotal=subtotal,
            promo_discount=promo_discount,
            total=total,
            promo=promo,
        )
