"""Staffroll exception hierarchy."""

from __future__ import annotations


class StaffrollError(Exception):
    """Base exception for all Staffroll errors."""


class ValidationError(StaffrollError):
    """A record field was given a value that breaks its invariants.

    Always recoverable: raised before a record is admitted or changed.
    """

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(f"{field}: {message}")


class DecodeError(StaffrollError):
    """A field-map could not be turned back into a record."""


class UnknownVariantError(DecodeError):
    """The ``type`` discriminator is absent or names no known variant."""

    def __init__(self, kind: object) -> None:
        self.kind = kind
        if kind is None:
            super().__init__("Field map has no 'type' discriminator")
        else:
            super().__init__(f"Unknown employee type: {kind!r}")


class MalformedLineError(DecodeError):
    """A persisted line does not have the ``{key=value, ...}`` shape."""

    def __init__(self, line: str, reason: str) -> None:
        self.line = line
        self.reason = reason
        super().__init__(f"Malformed line {line!r}: {reason}")


class StorageError(StaffrollError):
    """Reading or writing the backing text store failed."""
