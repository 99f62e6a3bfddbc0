"""Payroll report models and plain-text rendering."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from pydantic import BaseModel, Field

from staffroll.models.employee import Employee, HourlyEmployee, Manager, SalariedEmployee


class PayrollLine(BaseModel):
    """One employee's row in the payroll report."""

    employee_id: str
    name: str
    kind: str
    pay: Decimal = Decimal("0")


class PayrollReport(BaseModel):
    """Per-employee pay plus the grand total."""

    lines: list[PayrollLine] = Field(default_factory=list)
    total: Decimal = Decimal("0")

    @property
    def is_empty(self) -> bool:
        return not self.lines


def build_payroll_report(employees: Iterable[Employee]) -> PayrollReport:
    lines = [
        PayrollLine(
            employee_id=e.employee_id,
            name=e.name,
            kind=e.type.title(),
            pay=e.compute_pay(),
        )
        for e in employees
    ]
    return PayrollReport(lines=lines, total=sum((line.pay for line in lines), Decimal("0")))


def format_money(amount: Decimal, currency_symbol: str = "₹") -> str:
    """``1234.5`` -> ``₹1,234.50``."""
    return f"{currency_symbol}{amount:,.2f}"


def describe_employee(employee: Employee, currency_symbol: str = "₹") -> str:
    """Single-line summary used when listing or finding employees."""
    text = f"ID: {employee.employee_id}, Name: {employee.name}, Dept: {employee.department}"
    if isinstance(employee, SalariedEmployee):
        text += f", Monthly Salary: {format_money(employee.monthly_salary, currency_symbol)}"
    elif isinstance(employee, HourlyEmployee):
        text += (
            f", Hourly Rate: {format_money(employee.hourly_rate, currency_symbol)}"
            f", Hours Worked: {employee.hours_worked:.2f}"
            f", Monthly Pay: {format_money(employee.compute_pay(), currency_symbol)}"
        )
    elif isinstance(employee, Manager):
        text += (
            f", Monthly Salary: {format_money(employee.monthly_salary, currency_symbol)}"
            f", Bonus: {format_money(employee.bonus, currency_symbol)}"
            f", Total Salary: {format_money(employee.compute_pay(), currency_symbol)}"
        )
    return text


def render_payroll_report(report: PayrollReport, currency_symbol: str = "₹", width: int = 60) -> str:
    """Fixed-width payroll table."""
    if report.is_empty:
        return "No employees in the system."

    rows = [
        "Payroll Report:",
        "=" * width,
        f"{'ID':<8} {'Name':<20} {'Type':<15} {'Salary':>15}",
        "-" * width,
    ]
    for line in report.lines:
        rows.append(
            f"{line.employee_id:<8} {line.name:<20} {line.kind:<15} "
            f"{format_money(line.pay, currency_symbol):>15}"
        )
    rows.append("=" * width)
    rows.append(f"Total Payroll: {format_money(report.total, currency_symbol)}")
    return "\n".join(rows)
