# services/session_service.py

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Type

from data.repository import DataRepository
from models.cart import Cart, CartItem
from models.events import Event, EventBus
from models.favorites import Favorites
from models.order import OrderSummary
from models.product import Product
from models.promo import PromoCode
from services.catalog_service import Catalog
from services.checkout_service import CheckoutService
from services.pricing_service import PriceBreakdown, PricingService
from services.promo_service import PromoEngine

logger = logging.getLogger("storefront.session")


class StorefrontSession:
    """
    One shopper's session: catalog, cart, favorites and promo code.

    This is the surface a rendering layer binds to. All state lives in
    memory and is lost with the object. Presentation code subscribes to
    events (ItemAdded, PromoApplied, PromoRejected, ...) instead of being
    called from inside the stores.

    apply_promo() raises PromoNotFound / PromoThresholdNotMet; callers are
    expected to show ``error.message`` and carry on.
    """

    def __init__(
        self,
        repo: DataRepository | None = None,
        pricing: PricingService | None = None,
        revalidate_promo: bool | None = None,
    ):
        # core services / data
        self.repo = repo or DataRepository()
        self.settings = self.repo.get_settings()
        if revalidate_promo is not None:
            self.settings["revalidate_promo"] = revalidate_promo

        self.bus = EventBus()
        self.catalog = Catalog(self.repo.get_products(), all_label=self.settings["all_category_label"])
        self.pricing = pricing or PricingService()
        self.promo = PromoEngine(self.repo.get_promo_codes(), bus=self.bus)
        self.checkout_service = CheckoutService(self.pricing, bus=self.bus)

        # One cart and one favorites set per session
        self.cart = Cart(bus=self.bus)
        self.favorites = Favorites(bus=self.bus)

        # page state: search box and category tab
        self.search_query = ""
        self.selected_category = self.catalog.all_label

        logger.info(
            f"Session started: {len(self.catalog)} products, "
            f"{len(self.promo.codes())} promo codes, revalidate_promo={self.settings['revalidate_promo']}"
        )

    def subscribe(self, event_type: Type[Event], handler: Callable[[Event], None]) -> None:
        self.bus.subscribe(event_type, handler)

    # catalog
    def categories(self) -> List[str]:
        return self.catalog.categories()

    def visible_products(self) -> List[Product]:
        return self.catalog.filter(self.search_query, self.selected_category)

    # cart
    def add_to_cart(self, product_id: int) -> CartItem:
        return self.cart.add_item(self.catalog.get(product_id))

    def cart_items(self) -> List[CartItem]:
        return self.cart.items()

    def cart_count(self) -> int:
        return self.cart.item_count()

    # favorites
    def toggle_favorite(self, product_id: int) -> bool:
        return self.favorites.toggle(product_id)

    def favorite_products(self) -> List[Product]:
        return self.catalog.products_by_ids(self.favorites.ids())

    # promo & pricing
    @property
    def applied_promo(self) -> Optional[PromoCode]:
        return self.promo.applied

    def subtotal(self) -> float:
        return self.pricing.subtotal(self.cart.items())

    def apply_promo(self, code: str) -> PromoCode:
        # validated against the subtotal at this moment
        return self.promo.apply(code, self.subtotal())

    def totals(self) -> PriceBreakdown:
        items = self.cart.items()
        if self.settings["revalidate_promo"]:
            self.promo.revalidate(self.pricing.subtotal(items))
        return self.pricing.compute(items, self.promo.applied)

    def place_order(self) -> OrderSummary:
        if self.settings["revalidate_promo"]:
            self.promo.revalidate(self.subtotal())
        return self.checkout_service.place_order(self.cart, self.promo.applied)

    def reset(self):
        # explicit session reset, nothing in the storefront calls this
        self.cart.clear()
        self.promo.clear()
        logger.info("Session reset")
