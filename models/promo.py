# models/promo.py
from dataclasses import dataclass
# Promo code model. The registry of codes is fixed at start-up
# and codes are always stored in upper case.
@dataclass(frozen=True)
class PromoCode:
    code: str
    discount: float       # percent off the subtotal
    min_amount: float = 0.0

    def __post_init__(self):
        if not self.code or not self.code.strip():
            raise ValueError("Promo code cannot be empty.")
        if not 0 <= self.discount <= 100:
            raise ValueError(f"Promo discount must be between 0 and 100: {self.discount}")
        if self.min_amount < 0:
            raise ValueError("Minimum amount cannot be negative.")
        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "code", self.code.strip().upper())

    def is_eligible(self, subtotal: float) -> bool:
        return subtotal >= self.min_amount

    @classmethod
    def from_dict(cls, data: dict) -> "PromoCode":
        return cls(
            code=data["code"],
            discount=data["discount"],
            min_amount=data.get("min_amount", data.get("minAmount", 0.0)),
        )
