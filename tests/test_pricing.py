import pytest

from models.cart import Cart
from models.product import Product
from models.promo import PromoCode
from services.pricing_service import DiscountRule, PricingService, ProductDiscountRule


@pytest.fixture
def pricing() -> PricingService:
    return PricingService()


def _cart(*products) -> Cart:
    cart = Cart()
    for p in products:
        cart.add_item(p)
    return cart


class TestEffectivePrice:
    def test_discounted_product(self, pricing, headphones):
        assert pricing.effective_price(headphones) == pytest.approx(7192)

    def test_undiscounted_product(self, pricing, laptop):
        assert pricing.effective_price(laptop) == 89990

    def test_no_rounding_inside_the_calculator(self, pricing):
        p = Product(id=9, name="x", price=999, category="c", discount=15)
        assert pricing.effective_price(p) == pytest.approx(849.15)


class TestCompute:
    def test_empty_cart(self, pricing):
        totals = pricing.compute(Cart().items())
        assert (totals.subtotal, totals.promo_discount, totals.total) == (0, 0, 0)

    def test_subtotal_uses_effective_prices_and_quantities(self, pricing, headphones, mouse):
        cart = _cart(headphones, headphones, mouse)
        totals = pricing.compute(cart.items())
        assert totals.subtotal == pytest.approx(7192 * 2 + 2990)
        assert totals.promo_discount == 0
        assert totals.total == totals.subtotal

    def test_welcome20_on_discounted_headphones(self, pricing, headphones):
        promo = PromoCode("WELCOME20", 20, 5000)
        totals = pricing.compute(_cart(headphones).items(), promo)
        assert totals.subtotal == pytest.approx(7192)
        assert totals.promo_discount == pytest.approx(1438.40)
        assert totals.total == pytest.approx(5753.60)
        assert totals.promo is promo

    def test_promo_applies_to_post_item_discount_base(self, pricing, headphones):
        # 20% item discount then 20% promo: 36% off, not 40%
        totals = pricing.compute(_cart(headphones).items(), PromoCode("X", 20))
        assert totals.total == pytest.approx(8990 * 0.8 * 0.8)
        assert totals.total != pytest.approx(8990 * 0.6)

    @pytest.mark.parametrize("percent", [0, 15, 30, 100])
    def test_total_between_zero_and_subtotal(self, pricing, headphones, laptop, percent):
        totals = pricing.compute(_cart(headphones, laptop).items(), PromoCode("X", percent))
        assert 0 <= totals.total <= totals.subtotal
        assert totals.total == pytest.approx(totals.subtotal - totals.promo_discount)


class TestRules:
    def test_default_pipeline_is_product_discount(self, pricing):
        assert len(pricing.rules) == 1
        assert isinstance(pricing.rules[0], ProductDiscountRule)

    def test_extra_rules_stack_in_sequence(self, headphones):
        class FlatOff(DiscountRule):
            def apply(self, product, qty, unit_price):
                return unit_price - 1000

        pricing = PricingService()
        pricing.add_rule(FlatOff())
        assert pricing.effective_price(headphones) == pytest.approx(6192)

    def test_negative_price_is_clamped(self, mouse):
        class Huge(DiscountRule):
            def apply(self, product, qty, unit_price):
                return unit_price - 10_000

        pricing = PricingService([Huge()])
        assert pricing.effective_price(mouse) == 0.0
