"""Tests for the on-disk cart snapshot store."""

import pytest

from boutique.ordering.cart.cart import CartStore
from boutique.ordering.cart.snapshot import FileSnapshotStore, MemorySnapshotStore


class TestFileSnapshotStore:
    def test_missing_key_loads_none(self, tmp_path):
        assert FileSnapshotStore(tmp_path).load("cart") is None

    def test_save_then_load(self, tmp_path):
        store = FileSnapshotStore(tmp_path)
        store.save("cart", '[{"quantity": 1}]')

        assert store.load("cart") == '[{"quantity": 1}]'
        assert (tmp_path / "cart.json").exists()

    def test_save_replaces_previous_value(self, tmp_path):
        store = FileSnapshotStore(tmp_path)
        store.save("cart", "[]")
        store.save("cart", '["second"]')

        assert store.load("cart") == '["second"]'
        assert not (tmp_path / "cart.tmp").exists()

    def test_directory_is_created(self, tmp_path):
        directory = tmp_path / "nested" / "carts"
        FileSnapshotStore(directory).save("cart", "[]")

        assert directory.is_dir()

    def test_unsafe_key_characters_stay_inside_the_directory(self, tmp_path):
        store = FileSnapshotStore(tmp_path)
        store.save("../cart/jane", "[]")

        assert store.load("../cart/jane") == "[]"
        assert [path.parent for path in tmp_path.iterdir()] == [tmp_path]

    def test_snapshot_survives_a_new_store_instance(self, tmp_path):
        FileSnapshotStore(tmp_path).save("cart", "[1]")
        assert FileSnapshotStore(tmp_path).load("cart") == "[1]"


class TestMemorySnapshotStore:
    def test_initial_blobs(self):
        assert MemorySnapshotStore({"cart": "[]"}).load("cart") == "[]"

    @pytest.mark.parametrize("saves", [1, 3])
    def test_counts_writes(self, saves):
        store = MemorySnapshotStore()
        for _ in range(saves):
            store.save("cart", "[]")
        assert store.writes == saves


class TestCartOverFileSnapshots:
    def test_undecodable_file_restores_an_empty_cart(self, tmp_path):
        (tmp_path / "cart.json").write_bytes(b"\xff\xfe[garbage")

        cart = CartStore(FileSnapshotStore(tmp_path))

        assert cart.is_empty
        assert cart.count() == 0

    def test_cart_survives_a_restart(self, tmp_path, dress):
        CartStore(FileSnapshotStore(tmp_path)).add_item(dress, 2)

        assert CartStore(FileSnapshotStore(tmp_path)).quantity_of(dress.product_id) == 2
