# models/events.py
"""
Typed outcome events emitted by the stores and the promo engine.

The presentation layer (toasts, badges, sheets) subscribes to an
EventBus; the stores never talk to it directly.

    bus = EventBus()
    bus.subscribe(ItemAdded, lambda e: print(e.message))
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Type

from utils.formatters import plain_number

logger = logging.getLogger("storefront.events")


@dataclass(frozen=True)
class Event:
    @property
    def message(self) -> str:
        return ""


@dataclass(frozen=True)
class ItemAdded(Event):
    product: Any
    quantity: int

    @property
    def message(self) -> str:
        return "Товар добавлен в корзину!"


@dataclass(frozen=True)
class FavoriteToggled(Event):
    product_id: int
    added: bool


@dataclass(frozen=True)
class PromoApplied(Event):
    promo: Any

    @property
    def message(self) -> str:
        return f"Промокод применён! Скидка {plain_number(self.promo.discount)}%"


@dataclass(frozen=True)
class PromoRejected(Event):
    error: Any   # a PromoError

    @property
    def message(self) -> str:
        return self.error.message


@dataclass(frozen=True)
class OrderPlaced(Event):
    summary: Any


Handler = Callable[[Event], None]


class EventBus:
    # Synchronous publish/subscribe. Handlers run inline in subscription
    # order, so every event is delivered before the mutating call returns.

    def __init__(self):
        self._handlers: Dict[Type[Event], List[Handler]] = defaultdict(list)

    def subscribe(self, event_type: Type[Event], handler: Handler) -> None:
        self._handlers[event_type].append(handler)

    def unsubscribe(self, event_type: Type[Event], handler: Handler) -> None:
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def emit(self, event: Event) -> None:
        # subscribers to the base Event class receive everything
        handlers = list(self._handlers.get(type(event), []))
        if type(event) is not Event:
            handlers += self._handlers.get(Event, [])

        for handler in handlers:
            try:
                handler(event)
            except Exception:
                # a broken subscriber must not undo a completed mutation
                logger.exception(f"Event handler failed for {type(event).__name__}")
