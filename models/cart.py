# models/cart.py
import logging
from dataclasses import dataclass

from models.events import EventBus, ItemAdded
from models.product import Product

logger = logging.getLogger("storefront.cart")
# Cart model representing the shopping cart of one session.
# One line per product id, kept in the order products were first added.
@dataclass
class CartItem:
    product: Product
    quantity: int = 1

    def __post_init__(self):
        if self.quantity <= 0:
            raise ValueError("The quantity must be a positive number.")

    @property
    def product_id(self) -> int:
        return self.product.id

class Cart:
    def __init__(self, bus: EventBus | None = None):
        # dicts keep insertion order, which is the display order
        self._items: dict[int, CartItem] = {}
        self.bus = bus or EventBus()

    def add_item(self, product: Product) -> CartItem:
        item = self._items.get(product.id)
        if item is None:
            item = CartItem(product, 1)
            self._items[product.id] = item
        else:
            item.quantity += 1

        logger.info(f"Cart add {product.id} ({product.name}) -> qty {item.quantity}")
        self.bus.emit(ItemAdded(product=product, quantity=item.quantity))
        return item

    def items(self) -> list[CartItem]:
        # snapshot: callers get copies, never the live lines
        return [CartItem(it.product, it.quantity) for it in self._items.values()]

    def item_count(self) -> int:
        return sum(it.quantity for it in self._items.values())

    def quantity_of(self, product_id: int) -> int:
        item = self._items.get(product_id)
        return item.quantity if item else 0

    def is_empty(self) -> bool:
        return not self._items

    def clear(self):
        self._items.clear()
        logger.info("Cart cleared")

    def __len__(self):
        return len(self._items)
