"""Inventory service - seed, persist and reload the inventory log."""

from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import List, Optional, Union

from records.config import get_inventory_file
from records.console import print_error, print_info, print_warning
from records.exceptions import IOFailureError
from records.models.dto import InventoryItem
from records.repositories.file_log import FileBackedLog, LoadResult


class InventoryService:
    """
    Service for the inventory logger program.

    Responsibilities:
    - Seed sample records
    - Save/load the log and report the outcome with a severity tag
    - Print the current log

    Save and load failures are reported and returned, never raised, so a
    caller can carry on with whatever is in memory.
    """

    def __init__(
        self,
        path: Union[str, Path, None] = None,
        inventory_log: Optional[FileBackedLog[InventoryItem]] = None,
    ):
        if inventory_log is None:
            inventory_log = FileBackedLog(InventoryItem, path or get_inventory_file())
        self.inventory_log = inventory_log

    def seed_sample_data(self, now: Optional[datetime] = None) -> None:
        """Add four sample items dated relative to now (UTC)."""
        now = now or datetime.now(timezone.utc)
        self.inventory_log.add(InventoryItem(id=1, name="USB-C Cable", quantity=120, date_added=now))
        self.inventory_log.add(InventoryItem(id=2, name="Wireless Mouse", quantity=45, date_added=now - timedelta(minutes=30)))
        self.inventory_log.add(InventoryItem(id=3, name='LED Monitor 24"', quantity=12, date_added=now - timedelta(hours=5)))
        self.inventory_log.add(InventoryItem(id=4, name="Keyboard Mechanical", quantity=20, date_added=now - timedelta(days=1)))

    def add_item(self, item: InventoryItem) -> None:
        self.inventory_log.add(item)

    def save_data(self) -> bool:
        """Save the log. Returns False (after reporting) if writing failed."""
        try:
            self.inventory_log.save()
        except IOFailureError as e:
            print_error(str(e))
            return False

        count = len(self.inventory_log)
        print_info(f"Saved {count} item(s) to '{self.inventory_log.path.resolve()}'.")
        return True

    def load_data(self) -> Optional[LoadResult]:
        """Load the log. Returns None (after reporting) if reading failed."""
        path = self.inventory_log.path
        try:
            result = self.inventory_log.load()
        except IOFailureError as e:
            print_error(str(e))
            return None

        if result is LoadResult.ABSENT:
            print_warning(f"File '{path}' not found, starting with an empty log.")
        elif result is LoadResult.EMPTY:
            print_info(f"File '{path}' is empty, loaded 0 items.")
        elif result is LoadResult.INVALID:
            print_error(f"{self.inventory_log.last_error}")
            print_warning(f"No items could be loaded from '{path}', starting with an empty log.")
        else:
            print_info(f"Loaded {len(self.inventory_log)} item(s) from '{path.resolve()}'.")
        return result

    def get_all_items(self) -> List[InventoryItem]:
        return self.inventory_log.get_all()

    def print_all_items(self) -> None:
        items = self.inventory_log.get_all()
        if not items:
            print_info("No inventory items to display.")
            return

        print("Inventory items:")
        for item in items:
            print(
                f"- ID: {item.id}, Name: {item.name}, Quantity: {item.quantity}, "
                f"DateAdded: {item.date_added:%Y-%m-%d %H:%M:%SZ}"
            )
