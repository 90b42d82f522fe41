"""Warehouse service - electronics and grocery stock."""

from datetime import datetime, timedelta
from typing import Optional

from records.console import print_error, print_info
from records.exceptions import RecordsError
from records.models.domain import ElectronicItem, GroceryItem
from records.repositories.keyed_repository import KeyedRepository


class WarehouseService:
    """
    Service for warehouse stock management.

    Keeps one repository per product category. Stock operations report
    repository errors and return False instead of raising.
    """

    def __init__(
        self,
        electronics: Optional[KeyedRepository[ElectronicItem]] = None,
        groceries: Optional[KeyedRepository[GroceryItem]] = None,
    ):
        self.electronics = electronics if electronics is not None else KeyedRepository()
        self.groceries = groceries if groceries is not None else KeyedRepository()

    def seed_data(self, now: Optional[datetime] = None) -> None:
        now = now or datetime.now()
        self.electronics.add(ElectronicItem(1, "Laptop", 10, "Dell", 24))
        self.electronics.add(ElectronicItem(2, "Smartphone", 25, "Samsung", 12))

        self.groceries.add(GroceryItem(1, "Milk", 50, now + timedelta(days=7)))
        self.groceries.add(GroceryItem(2, "Bread", 30, now + timedelta(days=3)))

    @staticmethod
    def print_all_items(repo: KeyedRepository) -> None:
        for item in repo.get_all():
            print(f"ID: {item.id}, Name: {item.name}, Quantity: {item.quantity}")

    @staticmethod
    def increase_stock(repo: KeyedRepository, id: int, quantity: int) -> bool:
        """Add quantity to an item's stock level."""
        try:
            current = repo.get_by_id(id)
            repo.update_quantity(id, current.quantity + quantity)
        except RecordsError as e:
            print_error(f"Error updating stock: {e}")
            return False

        print_info(f"Stock updated for {current.name}")
        return True

    @staticmethod
    def remove_item_by_id(repo: KeyedRepository, id: int) -> bool:
        try:
            repo.remove(id)
        except RecordsError as e:
            print_error(f"Error removing item: {e}")
            return False

        print_info(f"Item with ID {id} removed.")
        return True
