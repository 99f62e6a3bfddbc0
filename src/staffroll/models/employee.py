"""Employee record variants: salaried, hourly and managerial staff.

Each variant is a pydantic model tagged by its ``type`` literal. Field
validators run at construction and again on every attribute assignment
(``validate_assignment``), so a record never holds an invalid value.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from enum import StrEnum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from staffroll.core.exceptions import DecodeError, UnknownVariantError, ValidationError
from staffroll.core.types import FieldMap, FieldValue

_DIGIT = re.compile(r"\d")
# A record is persisted as one line.
_LINE_BREAK = re.compile(r"[\r\n]")


class EmployeeKind(StrEnum):
    SALARIED = "salaried"
    HOURLY = "hourly"
    MANAGER = "manager"


def _to_amount(field: str, value: Any) -> Decimal:
    """Coerce *value* to a finite, non-negative Decimal or raise ValidationError."""
    if isinstance(value, bool):
        raise ValidationError(field, "must be a number")
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value).strip())
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(field, f"must be a number, got {value!r}") from exc
    if not amount.is_finite():
        raise ValidationError(field, "must be a finite number")
    if amount < 0:
        raise ValidationError(field, "cannot be negative")
    return amount


def salaried_pay(monthly_salary: Decimal) -> Decimal:
    """Pay rule for a fixed monthly amount."""
    return monthly_salary


def hourly_pay(hourly_rate: Decimal, hours_worked: Decimal) -> Decimal:
    """Pay rule for hourly staff: rate times hours in the period."""
    return hourly_rate * hours_worked


# ---------------------------------------------------------------------------
# Shared field groups
# ---------------------------------------------------------------------------

class _EmployeeFields(BaseModel):
    """Identity fields every variant carries."""

    model_config = {"validate_assignment": True, "str_strip_whitespace": True}

    employee_id: str = Field(frozen=True)
    name: str
    department: str

    @field_validator("employee_id", mode="before")
    @classmethod
    def check_employee_id(cls, value: Any) -> Any:
        if not isinstance(value, str) or not value.strip():
            raise ValidationError("employee_id", "must be non-empty text")
        if _LINE_BREAK.search(value.strip()):
            raise ValidationError("employee_id", "cannot contain line breaks")
        return value

    @field_validator("name", "department", mode="before")
    @classmethod
    def check_text(cls, value: Any, info: ValidationInfo) -> Any:
        if not isinstance(value, str):
            raise ValidationError(info.field_name, "must be text")
        if _DIGIT.search(value):
            raise ValidationError(info.field_name, "cannot contain numbers")
        if _LINE_BREAK.search(value.strip()):
            raise ValidationError(info.field_name, "cannot contain line breaks")
        return value

    def to_field_map(self) -> FieldMap:
        """Encode as an ordered field map with ``type`` first."""
        data: FieldMap = {"type": self.type}  # type: ignore[attr-defined]
        data.update(self.model_dump())
        return data


class _MonthlySalaryFields(_EmployeeFields):
    """Fixed monthly pay, shared by salaried staff and managers."""

    monthly_salary: Decimal

    @field_validator("monthly_salary", mode="before")
    @classmethod
    def check_monthly_salary(cls, value: Any) -> Decimal:
        return _to_amount("monthly_salary", value)


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------

class SalariedEmployee(_MonthlySalaryFields):
    """Full-time employee paid a fixed monthly amount."""

    type: Literal["salaried"] = "salaried"

    def compute_pay(self) -> Decimal:
        return salaried_pay(self.monthly_salary)


class HourlyEmployee(_EmployeeFields):
    """Part-time employee paid per hour worked in the period."""

    hourly_rate: Decimal
    hours_worked: Decimal
    type: Literal["hourly"] = "hourly"

    @field_validator("hourly_rate", "hours_worked", mode="before")
    @classmethod
    def check_amounts(cls, value: Any, info: ValidationInfo) -> Decimal:
        return _to_amount(info.field_name, value)

    def compute_pay(self) -> Decimal:
        return hourly_pay(self.hourly_rate, self.hours_worked)


class Manager(_MonthlySalaryFields):
    """Salaried pay plus a bonus."""

    bonus: Decimal
    type: Literal["manager"] = "manager"

    @field_validator("bonus", mode="before")
    @classmethod
    def check_bonus(cls, value: Any) -> Decimal:
        return _to_amount("bonus", value)

    def compute_pay(self) -> Decimal:
        return salaried_pay(self.monthly_salary) + self.bonus


Employee = Annotated[
    Union[SalariedEmployee, HourlyEmployee, Manager],
    Field(discriminator="type"),
]

# Fields that may be changed after construction, per variant.
MUTABLE_FIELDS: dict[str, tuple[str, ...]] = {
    EmployeeKind.SALARIED: ("name", "department", "monthly_salary"),
    EmployeeKind.HOURLY: ("name", "department", "hourly_rate", "hours_worked"),
    EmployeeKind.MANAGER: ("name", "department", "monthly_salary", "bonus"),
}


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------

def _require(data: Mapping[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise DecodeError(f"Missing required field {key!r}") from None


def _text_field(data: Mapping[str, Any], key: str) -> str:
    value = _require(data, key)
    if isinstance(value, bool):
        raise DecodeError(f"Field {key!r} must be text, got {value!r}")
    if isinstance(value, str):
        return value
    if isinstance(value, (Decimal, int, float)):
        # The line codec turns numeric-looking text into numbers.
        return str(value)
    raise DecodeError(f"Field {key!r} must be text, got {type(value).__name__}")


def _decimal_field(data: Mapping[str, Any], key: str) -> Decimal:
    value = _require(data, key)
    if isinstance(value, bool):
        raise DecodeError(f"Field {key!r} must be a number, got {value!r}")
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, (int, float, str)):
        try:
            number = Decimal(str(value).strip())
        except InvalidOperation:
            raise DecodeError(f"Field {key!r} is not a number: {value!r}") from None
    else:
        raise DecodeError(f"Field {key!r} must be a number, got {type(value).__name__}")
    if not number.is_finite():
        raise DecodeError(f"Field {key!r} is not a finite number: {value!r}")
    return number


def employee_from_field_map(data: Mapping[str, FieldValue]) -> Employee:
    """Build the record variant named by ``data["type"]``.

    Raises:
        UnknownVariantError: ``type`` is absent or not a known variant.
        DecodeError: A required field is missing or cannot be converted.
        ValidationError: A converted value breaks the record's invariants.
    """
    kind = data.get("type")
    if kind is None:
        raise UnknownVariantError(None)

    match kind:
        case EmployeeKind.SALARIED:
            return SalariedEmployee(
                employee_id=_text_field(data, "employee_id"),
                name=_text_field(data, "name"),
                department=_text_field(data, "department"),
                monthly_salary=_decimal_field(data, "monthly_salary"),
            )
        case EmployeeKind.HOURLY:
            return HourlyEmployee(
                employee_id=_text_field(data, "employee_id"),
                name=_text_field(data, "name"),
                department=_text_field(data, "department"),
                hourly_rate=_decimal_field(data, "hourly_rate"),
                hours_worked=_decimal_field(data, "hours_worked"),
            )
        case EmployeeKind.MANAGER:
            return Manager(
                employee_id=_text_field(data, "employee_id"),
                name=_text_field(data, "name"),
                department=_text_field(data, "department"),
                monthly_salary=_decimal_field(data, "monthly_salary"),
                bonus=_decimal_field(data, "bonus"),
            )
        case _:
            raise UnknownVariantError(kind)
