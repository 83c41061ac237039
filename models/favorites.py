# models/favorites.py
import logging

from models.events import EventBus, FavoriteToggled

logger = logging.getLogger("storefront.favorites")
# Favorites model: the set of product ids the shopper has marked.
class Favorites:
    def __init__(self, bus: EventBus | None = None):
        self._ids: dict[int, None] = {}   # ordered set, toggle order
        self.bus = bus or EventBus()

    def toggle(self, product_id: int) -> bool:
        if product_id in self._ids:
            del self._ids[product_id]
            added = False
        else:
            self._ids[product_id] = None
            added = True

        logger.info(f"Favorite {product_id} {'added' if added else 'removed'}")
        self.bus.emit(FavoriteToggled(product_id=product_id, added=added))
        return added

    def has(self, product_id: int) -> bool:
        return product_id in self._ids

    def count(self) -> int:
        return len(self._ids)

    def ids(self) -> list[int]:
        return list(self._ids)
