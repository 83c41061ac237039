# main.py
import argparse

from data.repository import DataRepository
from models.errors import ProductNotFound, PromoError
from models.events import Event
from services.session_service import StorefrontSession
from utils.formatters import money, percent
from utils.logger import setup_logger

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Storefront session (headless)")
    parser.add_argument("--add", type=int, nargs="*", default=[], metavar="ID",
                        help="product ids to add to the cart, repeat an id to add it again")
    parser.add_argument("--favorite", type=int, nargs="*", default=[], metavar="ID")
    parser.add_argument("--promo", help="promo code to apply after adding items")
    parser.add_argument("--search", default="")
    parser.add_argument("--category", default=None)
    return parser.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)
    repo = DataRepository()
    logger = setup_logger(repo.get_settings()["log_dir"])
    session = StorefrontSession(repo)
    currency = session.settings["currency_symbol"]

    # toasts go to the console
    def show_toast(event):
        if event.message:
            print(f"* {event.message}")

    session.subscribe(Event, show_toast)

    session.search_query = args.search
    if args.category:
        session.selected_category = args.category

    print(" | ".join(session.categories()))
    for p in session.visible_products():
        badge = f" {percent(p.discount)}" if p.has_discount else ""
        print(f"[{p.id}] {p.name} ({p.category}) {money(session.pricing.effective_price(p), currency)}{badge}")

    for product_id in args.add:
        try:
            session.add_to_cart(product_id)
        except ProductNotFound as e:
            logger.warning(f"CLI: cart add skipped: {e}")
            print(f"! Товар {product_id} не найден")
    for product_id in args.favorite:
        session.toggle_favorite(product_id)

    if args.promo:
        try:
            session.apply_promo(args.promo)
        except PromoError as e:
            logger.info(f"CLI: promo rejected: {e.message}")

    totals = session.totals()
    print(f"Items: {session.cart_count()}  Favorites: {session.favorites.count()}")
    print(f"Subtotal: {money(totals.subtotal, currency)}")
    if totals.promo_discount > 0:
        print(f"Promo {totals.promo.code}: -{money(totals.promo_discount, currency)}")
    print(f"Total: {money(totals.total, currency)}")


if __name__ == "__main__":
    main()
