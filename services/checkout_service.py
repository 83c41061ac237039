# services/checkout_service.py

import logging
from datetime import datetime

from models.errors import EmptyCartError
from models.events import EventBus, OrderPlaced
from models.order import OrderLine, OrderSummary

logger = logging.getLogger("storefront.checkout")

class CheckoutService:
    # "Place order" is terminal for the storefront: it builds a summary
    # of what would be ordered and announces it. There is no payment step,
    # and the cart is deliberately left as it is.

    def __init__(self, pricing_service, bus: EventBus | None = None):
        self.pricing = pricing_service
        self.bus = bus or EventBus()

    def place_order(self, cart, promo=None) -> OrderSummary:
        if cart.is_empty():
            raise EmptyCartError()

        # Build order lines with pricing
        lines: list[OrderLine] = []
        items = cart.items()

        for it in items:
            unit_price = self.pricing.effective_price(it.product, it.quantity)
            lines.append(
                OrderLine(
                    product_id=it.product_id,
                    name=it.product.name,
                    quantity=it.quantity,
                    unit_price=unit_price,
                    line_total=unit_price * it.quantity,
                )
            )

        breakdown = self.pricing.compute(items, promo)
        summary = OrderSummary(
            created_at=datetime.now(),
            lines=lines,
            subtotal=breakdown.subtotal,
            promo_code=promo.code if promo else None,
            promo_discount=breakdown.promo_discount,
            total=breakdown.total,
        )

        logger.info(
            f"Order placed: {len(lines)} lines, {cart.item_count()} units, "
            f"subtotal={summary.subtotal:.2f} promo={summary.promo_code} total={summary.total:.2f}"
        )
        self.bus.emit(OrderPlaced(summary=summary))
        return summary
