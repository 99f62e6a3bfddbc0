"""Line-oriented text codec for persisted employee records.

One record per line, shaped like a mapping literal::

    {type=salaried, employee_id=E1, name=Ana, department=Sales, monthly_salary=1000}

Values are written as-is. Delimiters inside text values are not escaped, and
numeric-looking text is read back as a number; both are format limitations
kept for compatibility with existing data files.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from decimal import Decimal

from staffroll.core.exceptions import MalformedLineError
from staffroll.core.types import FieldMap, FieldValue

OPEN = "{"
CLOSE = "}"
ENTRY_DELIMITER = ", "
KEY_VALUE_SEPARATOR = "="

_NUMBER = re.compile(r"-?[0-9]+(?:\.[0-9]+)?")


def encode_line(field_map: Mapping[str, FieldValue]) -> str:
    """Render a field map as a single line, without a trailing newline."""
    entries = (f"{key}{KEY_VALUE_SEPARATOR}{value}" for key, value in field_map.items())
    return f"{OPEN}{ENTRY_DELIMITER.join(entries)}{CLOSE}"


def _sniff(value: str) -> FieldValue:
    if _NUMBER.fullmatch(value):
        return Decimal(value)
    return value


def decode_line(line: str) -> FieldMap:
    """Parse one persisted line back into a field map.

    Raises:
        MalformedLineError: The line is empty, lacks the bracket pair, or has
            an entry without a ``key=value`` shape.
    """
    text = line.strip()
    if not text:
        raise MalformedLineError(line, "empty line")
    if len(text) < 2 or not text.startswith(OPEN) or not text.endswith(CLOSE):
        raise MalformedLineError(line, f"expected {OPEN!r} ... {CLOSE!r}")

    content = text[1:-1]
    field_map: FieldMap = {}
    if not content.strip():
        return field_map

    for entry in content.split(ENTRY_DELIMITER):
        key, sep, value = entry.partition(KEY_VALUE_SEPARATOR)
        key = key.strip()
        if not sep:
            raise MalformedLineError(line, f"entry {entry!r} has no {KEY_VALUE_SEPARATOR!r}")
        if not key:
            raise MalformedLineError(line, f"entry {entry!r} has an empty key")
        field_map[key] = _sniff(value.strip())
    return field_map
