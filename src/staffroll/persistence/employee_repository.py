"""Employee repository: an in-memory collection written through to a text store."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator, ValuesView
from decimal import Decimal
from typing import Any

from pydantic import BaseModel

from staffroll.core.exceptions import StaffrollError, ValidationError
from staffroll.core.protocols import ITextStore
from staffroll.core.types import EmployeeId
from staffroll.models.employee import MUTABLE_FIELDS, Employee, employee_from_field_map
from staffroll.persistence.file_backend import LocalTextStore
from staffroll.persistence.line_codec import decode_line, encode_line

logger = logging.getLogger(__name__)


class SkippedLine(BaseModel):
    """A backing-store line that could not be loaded."""

    line_number: int
    line: str
    reason: str


class EmployeeRepository:
    """Owns the employee collection keyed by identifier.

    The collection is loaded from *store* on construction, and the whole
    collection is rewritten to *store* after every successful mutation.
    Read-only operations never touch the store.
    """

    def __init__(self, store: ITextStore) -> None:
        self._store = store
        self._employees: dict[EmployeeId, Employee] = {}
        self.skipped_lines: list[SkippedLine] = []
        self.load()

    @classmethod
    def open(cls, path: str | os.PathLike[str], encoding: str = "utf-8") -> EmployeeRepository:
        """Repository over a local data file."""
        return cls(LocalTextStore(path, encoding=encoding))

    @property
    def store(self) -> ITextStore:
        return self._store

    # ---- persistence ----

    def load(self) -> int:
        """(Re)load the collection from the store.

        Lines that fail to decode are logged and skipped. Returns the number
        of records loaded.

        Raises:
            StorageError: The store exists but could not be read. The
                current collection is left as it was.
        """
        employees: dict[EmployeeId, Employee] = {}
        skipped: list[SkippedLine] = []

        if not self._store.exists():
            logger.info("No data at %s, starting with an empty repository", self._store.location)
            self._replace(employees, skipped)
            return 0

        text = self._store.read()
        for line_number, line in enumerate(text.split("\n"), start=1):
            if not line.strip():
                continue
            try:
                employee = employee_from_field_map(decode_line(line))
            except StaffrollError as exc:
                logger.warning("Skipping line %d of %s: %s", line_number, self._store.location, exc)
                skipped.append(
                    SkippedLine(line_number=line_number, line=line, reason=str(exc))
                )
                continue
            employees[employee.employee_id] = employee

        self._replace(employees, skipped)
        logger.info(
            "Loaded %d employees from %s (%d lines skipped)",
            len(employees), self._store.location, len(skipped),
        )
        return len(employees)

    def _replace(self, employees: dict[EmployeeId, Employee], skipped: list[SkippedLine]) -> None:
        # Same dict object, so views from list_all() stay live.
        self._employees.clear()
        self._employees.update(employees)
        self.skipped_lines = skipped

    def save(self) -> None:
        """Overwrite the store with every record, one line each.

        Raises:
            StorageError: The store could not be written. The in-memory
                collection keeps whatever change preceded the save.
        """
        data = "".join(f"{encode_line(e.to_field_map())}\n" for e in self._employees.values())
        self._store.write(data)
        logger.debug("Saved %d employees to %s", len(self._employees), self._store.location)

    # ---- mutations ----

    def add(self, employee: Employee) -> bool:
        """Insert a copy of *employee*. Returns False if its identifier is taken."""
        if employee.employee_id in self._employees:
            return False
        self._employees[employee.employee_id] = employee.model_copy()
        self.save()
        return True

    def remove(self, employee_id: EmployeeId) -> bool:
        """Delete the record with *employee_id*. Returns False if absent."""
        if employee_id not in self._employees:
            return False
        del self._employees[employee_id]
        self.save()
        return True

    def update(self, employee_id: EmployeeId, /, **changes: Any) -> bool:
        """Apply *changes* to a record and persist it. Returns False if absent.

        All changes are validated against a copy first; the stored record is
        replaced only when every change is accepted.

        This is the only mutation path that reaches the store: records handed
        out by the queries are copies or read-only views, and assigning to
        them is never persisted.

        Raises:
            ValidationError: A field is unknown, immutable, or given an
                invalid value.
        """
        current = self._employees.get(employee_id)
        if current is None:
            return False

        allowed = MUTABLE_FIELDS[current.type]
        candidate = current.model_copy()
        for field, value in changes.items():
            if field not in allowed:
                raise ValidationError(field, f"cannot be changed on a {current.type} record")
            setattr(candidate, field, value)

        self._employees[employee_id] = candidate
        self.save()
        return True

    # ---- queries ----

    def find_by_id(self, employee_id: EmployeeId) -> Employee | None:
        employee = self._employees.get(employee_id)
        return None if employee is None else employee.model_copy()

    def find_by_name(self, fragment: str) -> list[Employee]:
        """Records whose name contains *fragment*, ignoring case."""
        needle = fragment.casefold()
        return [e.model_copy() for e in self._employees.values() if needle in e.name.casefold()]

    def total_payroll(self) -> Decimal:
        return sum((e.compute_pay() for e in self._employees.values()), Decimal("0"))

    def list_all(self) -> ValuesView[Employee]:
        """Live, read-only view of all records in collection order; iterable any number of times."""
        return self._employees.values()

    def __len__(self) -> int:
        return len(self._employees)

    def __iter__(self) -> Iterator[Employee]:
        return iter(self._employees.values())

    def __contains__(self, employee_id: object) -> bool:
        return employee_id in self._employees
