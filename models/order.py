# models/order.py
from dataclasses import dataclass
from datetime import datetime
# Order summary produced by "place order". It is only a snapshot of
# the cart at that moment: nothing is charged or stored.
@dataclass
class OrderLine:
    product_id: int
    name: str
    quantity: int
    unit_price: float   # effective price after the product's own discount
    line_total: float

@dataclass
class OrderSummary:
    created_at: datetime
    lines: list[OrderLine]
    subtotal: float
    promo_code: str | None
    promo_discount: float
    total: float
