"""Type aliases used across Staffroll."""

from __future__ import annotations

from decimal import Decimal

EmployeeId = str
FieldValue = Decimal | str
FieldMap = dict[str, FieldValue]
