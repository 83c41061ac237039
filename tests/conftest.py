import json
import logging

import pytest

from data.repository import DataRepository
from models.events import Event, EventBus
from models.product import Product
from models.promo import PromoCode
from services.session_service import StorefrontSession


# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------

@pytest.fixture
def headphones() -> Product:
    return Product(id=1, name="Беспроводные наушники Premium", price=8990,
                   category="Электроника", rating=4.8, reviews=234, discount=20)


@pytest.fixture
def laptop() -> Product:
    return Product(id=2, name="Ноутбук Ultrabook", price=89990,
                   category="Компьютеры", rating=4.9, reviews=156)


@pytest.fixture
def mouse() -> Product:
    return Product(id=4, name="Беспроводная мышь", price=2990,
                   category="Аксессуары", rating=4.6, reviews=412)


@pytest.fixture
def registry() -> list[PromoCode]:
    return [
        PromoCode("WELCOME20", 20, 5000),
        PromoCode("SALE15", 15, 3000),
        PromoCode("MEGA30", 30, 10000),
    ]


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def recorded(bus):
    """Every event emitted on ``bus``, in order."""
    events = []
    bus.subscribe(Event, events.append)
    return events


# ---------------------------------------------------------------------------
# Sessions
# ---------------------------------------------------------------------------

@pytest.fixture
def repo() -> DataRepository:
    """The bundled seed data."""
    return DataRepository()


@pytest.fixture
def session(repo) -> StorefrontSession:
    return StorefrontSession(repo)


@pytest.fixture
def write_storage(tmp_path):
    """Write JSON files into a temporary storage dir and return a repo for it."""
    def _write(**files):
        for name, content in files.items():
            path = tmp_path / f"{name}.json"
            if isinstance(content, str):
                path.write_text(content, encoding="utf-8")
            else:
                path.write_text(json.dumps(content, ensure_ascii=False), encoding="utf-8")
        return DataRepository(tmp_path)
    return _write


@pytest.fixture
def clean_logger():
    """Detach whatever handlers setup_logger() attached during the test."""
    yield
    logger = logging.getLogger("storefront")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
