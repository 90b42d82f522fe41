"""Unit tests for WarehouseService."""

import pytest

from records.models.domain import ElectronicItem
from records.services.warehouse_service import WarehouseService


class TestWarehouseService:
    """Test WarehouseService stock operations."""

    @pytest.fixture
    def manager(self):
        manager = WarehouseService()
        manager.seed_data()
        return manager

    def test_seed_data(self, manager):
        assert [i.name for i in manager.electronics.get_all()] == ["Laptop", "Smartphone"]
        assert [i.name for i in manager.groceries.get_all()] == ["Milk", "Bread"]

    def test_categories_share_ids_independently(self, manager):
        assert manager.electronics.get_by_id(1).name == "Laptop"
        assert manager.groceries.get_by_id(1).name == "Milk"

    def test_print_all_items(self, manager, capsys):
        manager.print_all_items(manager.groceries)

        out = capsys.readouterr().out
        assert "ID: 1, Name: Milk, Quantity: 50" in out
        assert "ID: 2, Name: Bread, Quantity: 30" in out

    def test_increase_stock(self, manager, capsys):
        assert manager.increase_stock(manager.electronics, 1, 5) is True

        assert manager.electronics.get_by_id(1).quantity == 15
        assert "[Info] Stock updated for Laptop" in capsys.readouterr().out

    def test_increase_stock_missing_item(self, manager, capsys):
        assert manager.increase_stock(manager.electronics, 99, 5) is False
        assert "[Error] Error updating stock: Item with ID 99 not found." in capsys.readouterr().out

    def test_increase_stock_below_zero_rejected(self, manager, capsys):
        assert manager.increase_stock(manager.electronics, 1, -20) is False

        assert manager.electronics.get_by_id(1).quantity == 10
        assert "Quantity cannot be negative." in capsys.readouterr().out

    def test_remove_item(self, manager, capsys):
        assert manager.remove_item_by_id(manager.groceries, 2) is True

        assert 2 not in manager.groceries
        assert "[Info] Item with ID 2 removed." in capsys.readouterr().out

    def test_remove_missing_item(self, manager, capsys):
        assert manager.remove_item_by_id(manager.groceries, 99) is False

        assert len(manager.groceries) == 2
        assert "[Error] Error removing item: Item with ID 99 not found." in capsys.readouterr().out

    def test_add_after_remove_reuses_id(self, manager):
        manager.remove_item_by_id(manager.electronics, 1)
        manager.electronics.add(ElectronicItem(1, "Tablet", 15, "Apple", 12))

        assert manager.electronics.get_by_id(1).brand == "Apple"
