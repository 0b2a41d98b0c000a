"""Tests for the shopping cart store."""

import json

import pytest
from protean.exceptions import ValidationError

from boutique.ordering.cart.cart import CartStore
from boutique.ordering.cart.snapshot import MemorySnapshotStore


class TestAddItem:
    def test_new_product_creates_a_line(self, cart, dress, notices):
        decision = cart.add_item(dress, 2)

        assert decision.quantity == 2
        assert decision.was_capped is False
        assert cart.quantity_of(dress.product_id) == 2
        assert notices.titles == ["Added to cart"]

    def test_default_quantity_is_one(self, cart, dress):
        cart.add_item(dress)
        assert cart.quantity_of(dress.product_id) == 1

    def test_repeated_adds_merge_into_one_line(self, cart, dress, notices):
        cart.add_item(dress, 2)
        cart.add_item(dress, 3)

        assert len(cart.lines) == 1
        assert cart.quantity_of(dress.product_id) == 5
        assert notices.titles == ["Added to cart"]

    def test_merge_is_capped_at_stock(self, cart, dress, notices):
        cart.add_item(dress, 13)
        decision = cart.add_item(dress, 3)

        assert decision.quantity == 15
        assert decision.was_capped is True
        assert cart.quantity_of(dress.product_id) == 15
        assert notices.notices[-1].title == "Stock limit reached"
        assert notices.notices[-1].description == "Only 15 items are available."

    def test_out_of_stock_product_is_not_added(self, cart, make_product, notices):
        sold_out = make_product(product_id="prod-boots", name="Leather Ankle Boots", stock=0)

        decision = cart.add_item(sold_out, 1)

        assert decision.quantity == 0
        assert cart.is_empty
        assert notices.titles == ["Stock limit reached"]

    def test_stock_dropping_to_zero_removes_existing_line(self, cart, make_product):
        cart.add_item(make_product(stock=5), 2)
        cart.add_item(make_product(stock=0), 1)

        assert cart.get("prod-dress") is None

    def test_add_refreshes_the_stored_snapshot(self, cart, make_product):
        cart.add_item(make_product(price=2500), 1)
        cart.add_item(make_product(price=2700), 1)

        assert cart.get("prod-dress").product.price == 2700
        assert cart.total() == 5400

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_quantity_below_one_is_rejected(self, cart, dress, quantity):
        with pytest.raises(ValidationError):
            cart.add_item(dress, quantity)
        assert cart.is_empty

    def test_every_add_is_persisted(self, cart, dress, snapshots):
        cart.add_item(dress, 1)
        cart.add_item(dress, 1)
        assert snapshots.writes == 2


class TestRemoveItem:
    def test_remove_existing_line(self, cart, dress, necklace, notices):
        cart.add_item(dress, 1)
        cart.add_item(necklace, 1)

        cart.remove_item(dress.product_id)

        assert cart.get(dress.product_id) is None
        assert cart.quantity_of(necklace.product_id) == 1
        assert notices.titles[-1] == "Removed from cart"

    def test_removing_unknown_product_is_a_silent_no_op(self, cart, dress, notices, snapshots):
        cart.add_item(dress, 1)
        notices.reset()

        cart.remove_item("prod-unknown")

        assert cart.quantity_of(dress.product_id) == 1
        assert notices.notices == []
        assert snapshots.writes == 2


class TestSetQuantity:
    def test_replaces_the_quantity(self, cart, dress):
        cart.add_item(dress, 5)
        decision = cart.set_quantity(dress.product_id, 2)

        assert decision.quantity == 2
        assert cart.quantity_of(dress.product_id) == 2

    def test_is_clamped_to_stored_stock(self, cart, dress, notices):
        cart.add_item(dress, 1)
        decision = cart.set_quantity(dress.product_id, 40)

        assert decision.was_capped is True
        assert cart.quantity_of(dress.product_id) == 15
        assert notices.titles[-1] == "Stock limit reached"

    @pytest.mark.parametrize("quantity", [0, -3])
    def test_below_one_removes_the_line(self, cart, dress, quantity):
        cart.add_item(dress, 2)

        assert cart.set_quantity(dress.product_id, quantity) is None
        assert cart.get(dress.product_id) is None

    def test_unknown_product_is_ignored(self, cart, dress):
        cart.add_item(dress, 1)

        assert cart.set_quantity("prod-unknown", 3) is None
        assert len(cart.lines) == 1


class TestTotals:
    def test_empty_cart(self, cart):
        assert cart.is_empty
        assert cart.total() == 0
        assert cart.count() == 0

    def test_total_and_count(self, cart, dress, necklace):
        cart.add_item(dress, 2)
        cart.add_item(necklace, 1)

        assert cart.total() == 2 * 2500 + 1200
        assert cart.count() == 3

    def test_clear_empties_the_cart(self, cart, dress, snapshots):
        cart.add_item(dress, 2)
        cart.clear()

        assert cart.is_empty
        assert json.loads(snapshots.load("cart")) == []


class TestSnapshots:
    def test_cart_is_restored_from_its_snapshot(self, snapshots, dress, necklace):
        first = CartStore(snapshots)
        first.add_item(dress, 2)
        first.add_item(necklace, 1)

        restored = CartStore(snapshots)

        assert restored.quantity_of(dress.product_id) == 2
        assert restored.quantity_of(necklace.product_id) == 1
        assert restored.get(dress.product_id).product.price == 2500
        assert restored.total() == first.total()

    def test_snapshot_is_a_json_list_of_lines(self, cart, dress):
        cart.add_item(dress, 2)

        data = json.loads(cart.snapshot())

        assert data == [
            {
                "product": {
                    "product_id": "prod-dress",
                    "name": "Floral Summer Dress",
                    "price": 2500,
                    "category": "dresses",
                    "stock": 15,
                },
                "quantity": 2,
            }
        ]

    def test_snapshot_is_saved_under_the_given_key(self, snapshots, dress):
        cart = CartStore(snapshots, key="cart-jane")
        cart.add_item(dress, 1)

        assert snapshots.load("cart-jane") is not None
        assert snapshots.load("cart") is None

    @pytest.mark.parametrize(
        "blob",
        [
            "not json at all",
            '{"product": "not a list"}',
            '[{"quantity": 1}]',
            '[{"product": {"product_id": "p1"}, "quantity": 1}]',
            '[{"product": {"product_id": "p1", "name": "Dress", "price": 10, "stock": 3}, "quantity": 0}]',
        ],
    )
    def test_unreadable_snapshot_starts_an_empty_cart(self, blob):
        cart = CartStore(MemorySnapshotStore({"cart": blob}))
        assert cart.is_empty

    def test_missing_snapshot_starts_an_empty_cart(self):
        assert CartStore(MemorySnapshotStore()).is_empty
