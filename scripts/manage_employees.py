"""Manage the employee data file from the command line.

Usage:
    python scripts/manage_employees.py add salaried --id E1 --name Ana --department Sales --salary 1000
    python scripts/manage_employees.py add hourly --id E2 --name Bo --department Ops --rate 10 --hours 20
    python scripts/manage_employees.py add manager --id E3 --name Cy --department Ops --salary 2000 --bonus 300
    python scripts/manage_employees.py remove E2
    python scripts/manage_employees.py find --id E1
    python scripts/manage_employees.py find --name ana
    python scripts/manage_employees.py list
    python scripts/manage_employees.py report

Exit codes: 0 success, 1 record absent or duplicate, 2 invalid input,
3 storage failure.
"""

from __future__ import annotations

import argparse
import sys
from typing import Any

from staffroll.core.config import AppSettings
from staffroll.core.exceptions import DecodeError, StorageError, ValidationError
from staffroll.core.logging_config import setup_logging
from staffroll.models.employee import EmployeeKind, employee_from_field_map
from staffroll.models.reports import build_payroll_report, describe_employee, render_payroll_report
from staffroll.persistence import create_repository
from staffroll.persistence.employee_repository import EmployeeRepository

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_INVALID = 2
EXIT_ERROR = 3

# CLI option -> field-map key, per variant
_VARIANT_OPTIONS: dict[str, dict[str, str]] = {
    EmployeeKind.SALARIED: {"salary": "monthly_salary"},
    EmployeeKind.HOURLY: {"rate": "hourly_rate", "hours": "hours_worked"},
    EmployeeKind.MANAGER: {"salary": "monthly_salary", "bonus": "bonus"},
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Manage Staffroll employee records")
    parser.add_argument("--data-file", default=None, help="Data file path (overrides STAFFROLL_STORAGE_DATA_FILE)")
    parser.add_argument("--log-level", default=None, help="Logging level (e.g. DEBUG)")
    sub = parser.add_subparsers(dest="command", required=True)

    add = sub.add_parser("add", help="Add an employee")
    add_sub = add.add_subparsers(dest="kind", required=True)
    for kind, options in _VARIANT_OPTIONS.items():
        variant = add_sub.add_parser(str(kind), help=f"Add a {kind} employee")
        variant.add_argument("--id", required=True, dest="employee_id")
        variant.add_argument("--name", required=True)
        variant.add_argument("--department", required=True)
        for option in options:
            variant.add_argument(f"--{option}", required=True)

    remove = sub.add_parser("remove", help="Remove an employee by ID")
    remove.add_argument("employee_id")

    find = sub.add_parser("find", help="Find employees by ID or name")
    group = find.add_mutually_exclusive_group(required=True)
    group.add_argument("--id", dest="employee_id")
    group.add_argument("--name")

    sub.add_parser("list", help="List all employees")
    sub.add_parser("report", help="Print the payroll report")
    return parser


def _field_map_from_args(args: argparse.Namespace) -> dict[str, Any]:
    data: dict[str, Any] = {
        "type": args.kind,
        "employee_id": args.employee_id,
        "name": args.name,
        "department": args.department,
    }
    for option, key in _VARIANT_OPTIONS[args.kind].items():
        data[key] = getattr(args, option)
    return data


def run(args: argparse.Namespace, repository: EmployeeRepository, settings: AppSettings) -> int:
    currency = settings.report.currency_symbol

    if args.command == "add":
        employee = employee_from_field_map(_field_map_from_args(args))
        if not repository.add(employee):
            print(f"Employee ID {employee.employee_id} already exists.")
            return EXIT_NOT_FOUND
        print(f"Employee {employee.name} added successfully!")
        return EXIT_OK

    if args.command == "remove":
        if not repository.remove(args.employee_id):
            print(f"Employee ID {args.employee_id} not found.")
            return EXIT_NOT_FOUND
        print(f"Employee {args.employee_id} removed successfully!")
        return EXIT_OK

    if args.command == "find":
        if args.employee_id is not None:
            employee = repository.find_by_id(args.employee_id)
            found = [] if employee is None else [employee]
        else:
            found = repository.find_by_name(args.name)
        if not found:
            print("No matching employees found.")
            return EXIT_NOT_FOUND
        for employee in found:
            print(describe_employee(employee, currency))
        return EXIT_OK

    if args.command == "list":
        if not len(repository):
            print("No employees in the system.")
        for employee in repository.list_all():
            print(describe_employee(employee, currency))
        return EXIT_OK

    report = build_payroll_report(repository.list_all())
    print(render_payroll_report(report, currency, settings.report.width))
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    settings = AppSettings()
    if args.data_file:
        storage = settings.storage.model_copy(update={"backend": "file", "data_file": args.data_file})
        settings = settings.model_copy(update={"storage": storage})
    setup_logging(args.log_level or settings.log_level)

    try:
        repository = create_repository(settings)
        return run(args, repository, settings)
    except (ValidationError, DecodeError) as exc:
        print(f"Invalid input: {exc}", file=sys.stderr)
        return EXIT_INVALID
    except StorageError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
