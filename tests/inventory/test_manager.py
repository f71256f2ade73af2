"""Tests for InventoryManager business rules."""

from decimal import Decimal

import pytest
from invtrack.inventory import InventoryManager, Product, RejectReason


@pytest.fixture
def manager() -> InventoryManager:
    return InventoryManager()


def snapshot(m: InventoryManager) -> list[dict]:
    return m.list_products().to_dict()


class TestAdd:
    """Tests for add / add_product validation."""

    @pytest.mark.parametrize("product_id", [0, -1, -100])
    def test_non_positive_id_rejected(self, manager, product_id):
        outcome = manager.add(product_id, "Widget", 1, Decimal("1.00"))

        assert not outcome
        assert outcome.reason == RejectReason.INVALID_IDENTIFIER
        assert len(manager) == 0

    def test_distinct_ids_listed_in_ascending_order(self, manager):
        for pid in (7, 2, 9, 1):
            assert manager.add(pid, f"item-{pid}", 1, Decimal("1.00"))

        assert manager.list_products().ids == (1, 2, 7, 9)

    def test_duplicate_id_rejected_and_original_untouched(self, manager):
        assert manager.add(1, "Widget", 5, Decimal("2.00"))

        outcome = manager.add(1, "Other", 1, Decimal("1.00"))

        assert not outcome
        assert outcome.reason == RejectReason.INVALID_IDENTIFIER
        stored = manager.get(1)
        assert stored == Product(1, "Widget", 5, Decimal("2.00"))

    def test_negative_quantity_rejected(self, manager):
        outcome = manager.add(1, "Widget", -1, Decimal("1.00"))

        assert outcome.reason == RejectReason.NEGATIVE_VALUE
        assert len(manager) == 0

    def test_negative_price_rejected(self, manager):
        outcome = manager.add(1, "Widget", 1, Decimal("-0.01"))

        assert outcome.reason == RejectReason.NEGATIVE_VALUE
        assert 1 not in manager

    def test_identifier_checked_before_values(self, manager):
        outcome = manager.add(0, "Widget", -1, Decimal("-1"))
        assert outcome.reason == RejectReason.INVALID_IDENTIFIER

    def test_zero_quantity_and_price_accepted(self, manager):
        assert manager.add(3, "Freebie", 0, Decimal("0"))
        assert manager.get(3).total_value == Decimal("0")

    def test_add_product_accepts_record(self, manager):
        p = Product(product_id=4, name="", quantity=2, unit_price=Decimal("3.00"))
        assert manager.add_product(p)
        assert manager.get(4) is p


class TestRemove:
    """Tests for remove."""

    def test_missing_id_rejected_and_size_unchanged(self, manager):
        manager.add(1, "Widget", 1, Decimal("1.00"))

        outcome = manager.remove(2)

        assert not outcome
        assert outcome.reason == RejectReason.NOT_FOUND
        assert len(manager) == 1

    def test_existing_id_removed(self, manager):
        manager.add(1, "Widget", 1, Decimal("1.00"))
        manager.add(2, "Gadget", 1, Decimal("1.00"))

        assert manager.remove(1)

        assert len(manager) == 1
        assert manager.list_products().ids == (2,)

    def test_removed_id_can_be_added_again(self, manager):
        manager.add(1, "Widget", 1, Decimal("1.00"))
        manager.remove(1)

        assert manager.add(1, "Reborn", 2, Decimal("1.00"))
        assert manager.get(1).name == "Reborn"


class TestUpdateQuantity:
    """Tests for update_quantity."""

    def test_negative_quantity_rejected_and_stored_value_kept(self, manager):
        manager.add(1, "Widget", 5, Decimal("2.00"))

        outcome = manager.update_quantity(1, -3)

        assert outcome.reason == RejectReason.NEGATIVE_VALUE
        assert manager.get(1).quantity == 5

    def test_only_quantity_changes(self, manager):
        manager.add(1, "Widget", 5, Decimal("2.00"))

        assert manager.update_quantity(1, 0)

        stored = manager.get(1)
        assert stored.quantity == 0
        assert stored.name == "Widget"
        assert stored.unit_price == Decimal("2.00")

    def test_previous_record_not_mutated(self, manager):
        manager.add(1, "Widget", 5, Decimal("2.00"))
        before = manager.get(1)

        manager.update_quantity(1, 42)

        assert before.quantity == 5
        assert manager.get(1).quantity == 42

    def test_missing_id_on_empty_inventory(self, manager):
        outcome = manager.update_quantity(99, 5)

        assert not outcome
        assert outcome.reason == RejectReason.NOT_FOUND

    def test_update_keeps_first_seen_position(self, manager):
        manager.add(2, "B", 1, Decimal("1"))
        manager.add(1, "A", 1, Decimal("1"))
        manager.update_quantity(2, 9)

        assert [p.product_id for p in manager] == [2, 1]
        assert manager.list_products().ids == (1, 2)


class TestQueries:
    """Tests for list_products and total_inventory_value."""

    def test_empty_listing(self, manager):
        listing = manager.list_products()
        assert listing.is_empty

    def test_listing_is_a_snapshot(self, manager):
        manager.add(1, "Widget", 1, Decimal("1.00"))
        listing = manager.list_products()

        manager.add(2, "Gadget", 1, Decimal("1.00"))

        assert listing.ids == (1,)
        assert len(manager) == 2

    def test_total_empty_is_zero(self, manager):
        assert manager.total_inventory_value() == Decimal("0")

    def test_total_sums_all_products(self, manager):
        manager.add(1, "A", 3, Decimal("2.50"))
        manager.add(2, "B", 1, Decimal("10.00"))

        assert manager.total_inventory_value() == Decimal("17.50")

    def test_widget_scenario(self, manager):
        assert manager.add(1, "Widget", 5, Decimal("2.00"))
        assert not manager.add(1, "Other", 1, Decimal("1.00"))

        assert snapshot(manager) == [
            {
                "id": 1,
                "name": "Widget",
                "quantity": 5,
                "unit_price": Decimal("2.00"),
                "total_value": Decimal("10.00"),
            }
        ]
        assert manager.total_inventory_value() == Decimal("10.00")

    def test_managers_do_not_share_state(self):
        a = InventoryManager()
        b = InventoryManager()
        a.add(1, "Widget", 1, Decimal("1"))

        assert len(b) == 0

    def test_iteration_is_a_copy(self, manager):
        manager.add(1, "A", 1, Decimal("1"))
        manager.add(2, "B", 1, Decimal("1"))

        for product in manager:
            manager.remove(product.product_id)

        assert len(manager) == 0
