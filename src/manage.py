"""Boutique management CLI.

The store runs on Protean's in-memory provider, so each command seeds the
sample catalogue into a fresh domain before doing its work.

Usage:
    python src/manage.py catalogue                  # List the sample catalogue
    python src/manage.py catalogue --category shoes # List one category
    python src/manage.py demo                       # Walk through a checkout
"""

import argparse
import asyncio


def _init_domain():
    from boutique.domain import boutique

    boutique.init()
    return boutique


def list_catalogue(category=None):
    from boutique.catalogue.listing import all_products, products_in_category
    from boutique.catalogue.seed import seed_catalogue

    domain = _init_domain()
    with domain.domain_context():
        seed_catalogue()
        products = products_in_category(category) if category else all_products()
        for product in products:
            print(f"{product.id}  {product.name:<24} {product.category:<12} KSh {product.price:>6}  stock {product.stock}")


def _print_link(url):
    print(f"WhatsApp link: {url}")
    return True


async def _walk_through_checkout(storefront, customer_id, product_ids):
    storefront.identities.sign_in(customer_id)
    await storefront.add_to_cart(product_ids[0], 2)
    await storefront.add_to_cart(product_ids[3], 1)
    print(f"Cart: {storefront.cart.count()} items, KSh {storefront.cart.total()}")
    return await storefront.checkout.checkout()


def run_demo(open_browser=False):
    from boutique.catalogue.seed import seed_catalogue
    from boutique.config import StorefrontSettings
    from boutique.identity.registration import RegisterCustomer
    from boutique.notifications.channel.whatsapp import WhatsAppLinkSink
    from boutique.ordering.cart.snapshot import MemorySnapshotStore
    from boutique.ordering.order.status import all_orders
    from boutique.storefront import build_storefront

    domain = _init_domain()
    with domain.domain_context():
        product_ids = seed_catalogue()
        customer_id = domain.process(
            RegisterCustomer(
                name="Jane Wanjiku",
                email="jane@example.com",
                phone="+254712345678",
                address="123 Nairobi St, Kenya",
            ),
            asynchronous=False,
        )

        settings = StorefrontSettings.load(domain)
        sink = None
        if not open_browser:
            sink = WhatsAppLinkSink(phone=settings.whatsapp_number, opener=_print_link)
        storefront = build_storefront(settings, snapshots=MemorySnapshotStore(), sink=sink)

        receipt = asyncio.run(_walk_through_checkout(storefront, customer_id, product_ids))
        if receipt is None:
            print("Checkout failed.")
            return

        print(f"Order {receipt.order_id} placed, total KSh {receipt.grand_total}")
        for warning in receipt.warnings:
            print(f"  warning: {warning}")
        for order in all_orders():
            print(f"{order.id}  {order.status:<10} {len(order.lines)} lines  KSh {order.grand_total}")


def main():
    parser = argparse.ArgumentParser(description="Boutique management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    catalogue_parser = subparsers.add_parser("catalogue", help="List the sample catalogue")
    catalogue_parser.add_argument("--category", help="Only list products in this category")

    demo_parser = subparsers.add_parser("demo", help="Seed the store and place a sample order")
    demo_parser.add_argument(
        "--open-browser",
        action="store_true",
        help="Open the WhatsApp link in a browser instead of printing it",
    )

    args = parser.parse_args()

    if args.command == "catalogue":
        list_catalogue(args.category)
    elif args.command == "demo":
        run_demo(open_browser=args.open_browser)


if __name__ == "__main__":
    main()
