"""Command-line entry point for the record-keeping programs.

Usage:
    records inventory [PATH]             # seed, save, reload and print the inventory log
    records warehouse                    # warehouse stock demo with error handling
    records healthcare --patient-id 2    # patients and one patient's prescriptions
    records finance                      # process sample transactions
    records grades --input students.txt --output report.txt
    records all                          # every program except grades
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Union

from records import config
from records.console import print_error, print_fatal, print_header, print_step
from records.exceptions import DuplicateKeyError, InvalidValueError, ParseFailureError
from records.models.domain import ElectronicItem
from records.services.finance_service import FinanceService, format_currency
from records.services.grading_service import GradingService
from records.services.healthcare_service import HealthcareService
from records.services.inventory_service import InventoryService
from records.services.warehouse_service import WarehouseService


def _given_path(value: Union[str, Path, None]) -> Optional[Path]:
    """Path from an argument, or None when it was left out or blank."""
    if value is None or not str(value).strip():
        return None
    return Path(value)


def run_inventory(path: Union[str, Path, None] = None) -> int:
    path = _given_path(path) or config.get_inventory_file()

    app = InventoryService(path)
    print_step("Seeding sample data...")
    app.seed_sample_data()
    print_step("Saving data to file...")
    app.save_data()

    # a fresh service stands in for a new session with nothing in memory
    print()
    print_step("Simulating new session and loading data from file...")
    new_app = InventoryService(path)
    new_app.load_data()

    print()
    print_step("Printing loaded items:")
    new_app.print_all_items()
    return 0


def run_warehouse() -> int:
    manager = WarehouseService()
    manager.seed_data()

    print_header("Grocery Items:")
    manager.print_all_items(manager.groceries)

    print_header("Electronic Items:")
    manager.print_all_items(manager.electronics)
    print()

    try:
        manager.electronics.add(ElectronicItem(1, "Tablet", 15, "Apple", 12))
    except DuplicateKeyError as e:
        print_error(str(e))

    manager.remove_item_by_id(manager.groceries, 99)

    try:
        manager.electronics.update_quantity(2, -5)
    except InvalidValueError as e:
        print_error(str(e))
    return 0


def run_healthcare(patient_id: int = 2) -> int:
    app = HealthcareService()
    app.seed_data()
    app.build_prescription_map()

    print("All Patients:")
    app.print_all_patients()

    print_header(f"Prescriptions for Patient ID {patient_id}:")
    app.print_prescriptions_for_patient(patient_id)
    return 0


def run_finance() -> int:
    service = FinanceService()
    account = service.run()
    print(f"Final balance for {account.account_number}: {format_currency(account.balance)}")
    return 0


def run_grades(
    input_path: Union[str, Path, None] = None,
    output_path: Union[str, Path, None] = None,
) -> int:
    input_path = _given_path(input_path) or config.get_students_file()
    output_path = _given_path(output_path) or config.get_report_file()
    processor = GradingService()

    try:
        students = processor.read_students_from_file(input_path)
    except FileNotFoundError:
        print_error(f"The input file was not found: {input_path}")
        return 1
    except ParseFailureError as e:
        print_error(str(e))
        return 1

    processor.write_report_to_file(students, output_path)
    return 0


def run_all() -> int:
    status = 0
    for title, program in (
        ("Inventory", run_inventory),
        ("Warehouse", run_warehouse),
        ("Healthcare", run_healthcare),
        ("Finance", run_finance),
    ):
        print_header(f"=== {title} ===")
        status = program() or status
    return status


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="records", description="Record-keeping demo programs")
    sub = parser.add_subparsers(dest="program", required=True)

    inventory = sub.add_parser("inventory", help="Inventory log save/load demo")
    inventory.add_argument("path", nargs="?", default=None,
                           help="Inventory file (default: $RECORDS_INVENTORY_FILE or inventory.json)")

    sub.add_parser("warehouse", help="Warehouse stock demo")

    healthcare = sub.add_parser("healthcare", help="Patient and prescription demo")
    healthcare.add_argument("--patient-id", type=int, default=2, help="Patient to list prescriptions for")

    sub.add_parser("finance", help="Transaction processing demo")

    grades = sub.add_parser("grades", help="Student grade report")
    grades.add_argument("--input", default=None, help="Student results file")
    grades.add_argument("--output", default=None, help="Report output file")

    sub.add_parser("all", help="Run every demo except grades")
    return parser


def _dispatch(args: argparse.Namespace) -> int:
    if args.program == "inventory":
        return run_inventory(args.path)
    if args.program == "warehouse":
        return run_warehouse()
    if args.program == "healthcare":
        return run_healthcare(args.patient_id)
    if args.program == "finance":
        return run_finance()
    if args.program == "grades":
        return run_grades(args.input, args.output)
    return run_all()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        return _dispatch(args)
    except Exception as e:
        print_fatal(f"Unhandled exception: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
