# services/promo_service.py
"""
promo_service.py

Validates promo codes against the fixed registry.

Rules:
- lookup is case-insensitive (the submitted code is upper-cased);
- the current subtotal must reach the code's minimum amount;
- only one code is active at a time, a new one replaces the old.

A failed apply never touches the currently applied code.
"""

import logging
from typing import Iterable, List, Optional

from models.errors import PromoError, PromoNotFound, PromoThresholdNotMet
from models.events import EventBus, PromoApplied, PromoRejected
from models.promo import PromoCode
from utils.formatters import plain_number

logger = logging.getLogger("storefront.promo")


class PromoEngine:
    def __init__(self, registry: Iterable[PromoCode], bus: EventBus | None = None):
        self._registry = {p.code: p for p in registry}
        self.bus = bus or EventBus()
        self._applied: Optional[PromoCode] = None

    @property
    def applied(self) -> Optional[PromoCode]:
        return self._applied

    def codes(self) -> List[PromoCode]:
        return list(self._registry.values())

    def lookup(self, submitted_code: str) -> PromoCode:
        code = (submitted_code or "").strip().upper()
        promo = self._registry.get(code)
        if promo is None:
            raise PromoNotFound(code)
        return promo

    def apply(self, submitted_code: str, current_subtotal: float) -> PromoCode:
        try:
            promo = self.lookup(submitted_code)
            if not promo.is_eligible(current_subtotal):
                raise PromoThresholdNotMet(promo.code, promo.min_amount)
        except PromoError as e:
            logger.warning(f"Promo {submitted_code!r} rejected: {e.message}")
            self.bus.emit(PromoRejected(error=e))
            raise

        previous = self._applied
        self._applied = promo
        if previous and previous != promo:
            logger.info(f"Promo {previous.code} replaced by {promo.code}")
        logger.info(f"Promo {promo.code} applied ({plain_number(promo.discount)}%) at subtotal {current_subtotal:.2f}")
        self.bus.emit(PromoApplied(promo=promo))
        return promo

    def revalidate(self, current_subtotal: float) -> Optional[PromoCode]:
        # Drop the applied code if the cart no longer reaches its minimum.
        # Only used when the session is configured with revalidate_promo.
        promo = self._applied
        if promo is not None and not promo.is_eligible(current_subtotal):
            self._applied = None
            error = PromoThresholdNotMet(promo.code, promo.min_amount)
            logger.info(f"Promo {promo.code} dropped: subtotal {current_subtotal:.2f} below {plain_number(promo.min_amount)}")
            self.bus.emit(PromoRejected(error=error))
        return self._applied

    def clear(self):
        self._applied = None
