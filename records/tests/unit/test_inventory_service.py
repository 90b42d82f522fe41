"""Unit tests for InventoryService."""

import json
import pytest
from datetime import datetime, timedelta, timezone
from unittest.mock import Mock

from records.exceptions import IOFailureError
from records.models.dto import InventoryItem
from records.repositories.file_log import LoadResult
from records.services.inventory_service import InventoryService

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


class TestInventoryService:
    """Test InventoryService save/load reporting."""

    @pytest.fixture
    def log_path(self, tmp_path):
        return tmp_path / "inventory.json"

    def test_seed_sample_data(self, log_path):
        service = InventoryService(log_path)
        service.seed_sample_data(now=NOW)

        items = service.get_all_items()
        assert [i.id for i in items] == [1, 2, 3, 4]
        assert items[0].name == "USB-C Cable"
        assert items[1].date_added == NOW - timedelta(minutes=30)
        assert items[3].date_added == NOW - timedelta(days=1)

    def test_default_path_from_environment(self, mock_env_vars):
        service = InventoryService()
        assert service.inventory_log.path == mock_env_vars["inventory_file"]

    def test_save_reports_count_and_path(self, log_path, capsys):
        service = InventoryService(log_path)
        service.seed_sample_data(now=NOW)

        assert service.save_data() is True

        out = capsys.readouterr().out
        assert f"[Info] Saved 4 item(s) to '{log_path.resolve()}'." in out
        assert len(json.loads(log_path.read_text(encoding="utf-8"))) == 4

    def test_save_failure_reported(self, tmp_path, capsys):
        service = InventoryService(tmp_path / "no_such_dir" / "inventory.json")
        service.seed_sample_data(now=NOW)

        assert service.save_data() is False

        out = capsys.readouterr().out
        assert "[Error] Could not write" in out
        assert len(service.get_all_items()) == 4

    def test_save_then_load_in_new_session(self, log_path, capsys):
        first = InventoryService(log_path)
        first.seed_sample_data(now=NOW)
        first.save_data()

        second = InventoryService(log_path)
        result = second.load_data()

        assert result is LoadResult.LOADED
        assert second.get_all_items() == first.get_all_items()
        assert "[Info] Loaded 4 item(s)" in capsys.readouterr().out

    def test_load_missing_file_warns(self, log_path, capsys):
        service = InventoryService(log_path)

        assert service.load_data() is LoadResult.ABSENT
        assert service.get_all_items() == []
        assert "[Warning] File" in capsys.readouterr().out

    def test_load_empty_file_informs(self, log_path, capsys):
        log_path.write_text("", encoding="utf-8")
        service = InventoryService(log_path)

        assert service.load_data() is LoadResult.EMPTY
        assert "is empty, loaded 0 items" in capsys.readouterr().out

    def test_load_corrupt_file_reports_error(self, log_path, capsys):
        log_path.write_text("[{]", encoding="utf-8")
        service = InventoryService(log_path)
        service.add_item(InventoryItem(id=9, name="stale", quantity=1, date_added=NOW))

        assert service.load_data() is LoadResult.INVALID

        out = capsys.readouterr().out
        assert "[Error] Failed to parse" in out
        assert "[Warning] No items could be loaded" in out
        assert service.get_all_items() == []

    def test_load_read_failure_reported(self, capsys):
        mock_log = Mock()
        mock_log.load.side_effect = IOFailureError("inventory.json", "Could not read 'inventory.json': denied")

        service = InventoryService(inventory_log=mock_log)

        assert service.load_data() is None
        assert "[Error] Could not read 'inventory.json': denied" in capsys.readouterr().out

    def test_print_all_items(self, log_path, capsys):
        service = InventoryService(log_path)
        service.seed_sample_data(now=NOW)

        service.print_all_items()

        out = capsys.readouterr().out
        assert "Inventory items:" in out
        assert "- ID: 1, Name: USB-C Cable, Quantity: 120, DateAdded: 2026-10-19 12:00:00Z" in out
        assert out.count("- ID:") == 4

    def test_print_all_items_empty(self, log_path, capsys):
        InventoryService(log_path).print_all_items()
        assert "[Info] No inventory items to display." in capsys.readouterr().out
