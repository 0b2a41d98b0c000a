"""Shared BDD fixtures and step definitions for the cart and checkout."""

import pytest
from pytest_bdd import given, parsers, then, when

from boutique.catalogue.product import ProductSnapshot
from boutique.ordering.cart.cart import CartStore


def _product_id(name):
    return "prod-" + name.lower().replace(" ", "-")


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def shelf():
    """Products known to the scenario, by name."""
    return {}


@pytest.fixture()
def current_cart(cart):
    """Holder for the cart in play; a restart swaps in a freshly restored one."""
    return {"cart": cart}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a product "{name}" priced {price:d} with {stock:d} in stock'))
def product_on_shelf(shelf, catalog, name, price, stock):
    product = ProductSnapshot(product_id=_product_id(name), name=name, price=price, category="", stock=stock)
    shelf[name] = product
    catalog.put(product)


@given(parsers.cfparse('the shopper has added {qty:d} of "{name}"'))
def shopper_has_added(current_cart, shelf, qty, name):
    current_cart["cart"].add_item(shelf[name], qty)


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('the shopper adds {qty:d} of "{name}"'))
def shopper_adds(current_cart, shelf, notices, qty, name):
    notices.reset()
    current_cart["cart"].add_item(shelf[name], qty)


@when("the storefront restarts")
def storefront_restarts(current_cart, snapshots, notices):
    current_cart["cart"] = CartStore(snapshots, notices)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the cart holds {qty:d} of "{name}"'))
def cart_holds(current_cart, shelf, qty, name):
    assert current_cart["cart"].quantity_of(shelf[name].product_id) == qty


@then(parsers.cfparse("the cart total is {total:d}"))
def cart_total_is(current_cart, total):
    assert current_cart["cart"].total() == total


@then(parsers.cfparse("the cart has {count:d} line"))
@then(parsers.cfparse("the cart has {count:d} lines"))
def cart_has_lines(current_cart, count):
    assert len(current_cart["cart"].lines) == count


@then("the cart is empty")
def cart_is_empty(current_cart):
    assert current_cart["cart"].is_empty


@then(parsers.cfparse('the shopper is told "{title}"'))
def shopper_is_told(notices, title):
    assert title in notices.titles
