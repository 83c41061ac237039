# services/catalog_service.py
from typing import Iterable, List

from models.errors import ProductNotFound
from models.product import Product

ALL_CATEGORIES = "ALL"
# catalog_service.py holds the immutable product list of the storefront
# and the read-only queries the product grid needs (search and category tabs).
class Catalog:
    def __init__(self, products: Iterable[Product], all_label: str = ALL_CATEGORIES):
        self._products: tuple[Product, ...] = tuple(products)
        self.all_label = all_label
        self._by_id = {p.id: p for p in self._products}
        if len(self._by_id) != len(self._products):
            raise ValueError("Product ids must be unique.")

    def filter(self, query: str = "", category: str | None = None) -> List[Product]:
        # Case-insensitive substring search on the name, AND category match.
        # Empty query matches everything; None or the ALL label means any category.
        needle = (query or "").lower()
        any_category = category is None or category == self.all_label
        return [
            p for p in self._products
            if needle in p.name.lower()
            and (any_category or p.category == category)
        ]

    def categories(self) -> List[str]:
        # ALL first, then each category once in first-seen order
        seen = dict.fromkeys(p.category for p in self._products)
        return [self.all_label, *seen]

    def get(self, product_id: int) -> Product:
        try:
            return self._by_id[product_id]
        except KeyError:
            raise ProductNotFound(product_id) from None

    def products_by_ids(self, ids: Iterable[int]) -> List[Product]:
        # catalog order, unknown ids ignored
        wanted = set(ids)
        return [p for p in self._products if p.id in wanted]

    def __iter__(self):
        return iter(self._products)

    def __len__(self):
        return len(self._products)
