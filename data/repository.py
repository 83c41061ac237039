# data/repository.py
import json
import logging
from pathlib import Path

from models.product import Product
from models.promo import PromoCode

logger = logging.getLogger("storefront.repository")

DEFAULT_STORAGE_DIR = Path(__file__).resolve().parent / "storage"

DEFAULT_SETTINGS = {
    "currency_symbol": "₽",
    "all_category_label": "ALL",
    "revalidate_promo": False,
    "log_dir": "data/logs",
}

class DataRepository:
    # Read-only access to the seed data the session starts from.
    # The storefront never writes anything back: session state lives in memory.

    def __init__(self, storage_dir: Path | str | None = None):
        # base folder where all JSON data lives
        self.storage_dir = Path(storage_dir) if storage_dir else DEFAULT_STORAGE_DIR

    def _file_path(self, filename: str) -> Path:
        return self.storage_dir / filename

    def _read_json(self, filename: str, default):
        # Load JSON from disk. If the file does not exist or is empty/bad,
        # return the caller's default.
        path = self._file_path(filename)
        if not path.exists():
            logger.warning(f"{path} not found, using defaults")
            return default
        try:
            with open(path, "r", encoding="utf-8") as f:
                text = f.read().strip()
        except OSError as e:
            logger.warning(f"Cannot read {path}: {e}")
            return default
        if text == "":
            return default
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            logger.warning(f"{path} is not valid JSON ({e}), using defaults")
            return default

    def get_products(self) -> list[Product]:
        data = self._read_json("products.json", [])
        if not isinstance(data, list):
            # if corrupted format, recover gracefully
            logger.warning("products.json must hold a list, catalog is empty")
            return []
        return [Product.from_dict(d) for d in data]

    def get_promo_codes(self) -> list[PromoCode]:
        data = self._read_json("promo_codes.json", [])
        if not isinstance(data, list):
            logger.warning("promo_codes.json must hold a list, registry is empty")
            return []
        return [PromoCode.from_dict(d) for d in data]

    def get_settings(self) -> dict:
        # Returns settings merged over defaults.
        # If file missing or bad, return the default structure.
        data = self._read_json("settings.json", {})
        if not isinstance(data, dict):
            data = {}

        return {key: data.get(key, value) for key, value in DEFAULT_SETTINGS.items()}
