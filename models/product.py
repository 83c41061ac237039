# models/product.py
from dataclasses import dataclass
# Product model representing one item of the storefront catalog.
# Products are created once from the seed catalog and never change.
@dataclass(frozen=True)
class Product:
    id: int
    name: str
    price: float
    category: str
    rating: float = 0.0
    reviews: int = 0
    discount: float | None = None   # percent off, e.g. 20 = 20% off
    image: str = ""

    def __post_init__(self):
        if self.price <= 0:
            raise ValueError(f"Price must be a positive number: {self.price}")
        if not 0 <= self.rating <= 5:
            raise ValueError(f"Rating must be between 0 and 5: {self.rating}")
        if self.reviews < 0:
            raise ValueError("Review count cannot be negative.")
        if self.discount is not None and not 0 <= self.discount <= 100:
            raise ValueError(f"Discount must be between 0 and 100: {self.discount}")

    @property
    def has_discount(self) -> bool:
        # 0 and None both mean "no discount"
        return bool(self.discount)

    @classmethod
    def from_dict(cls, data: dict) -> "Product":
        return cls(
            id=int(data["id"]),
            name=data["name"],
            price=data["price"],
            category=data["category"],
            rating=data.get("rating", 0.0),
            reviews=data.get("reviews", 0),
            discount=data.get("discount"),
            image=data.get("image", ""),
        )
