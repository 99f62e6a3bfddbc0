"""In-memory backend for unit tests."""

from __future__ import annotations

from staffroll.core.exceptions import StorageError


class MemoryTextStore:
    """String-backed ITextStore for unit tests.

    ``None`` content means the resource does not exist yet.
    """

    def __init__(self, initial: str | None = None) -> None:
        self._data = initial
        self.write_count = 0

    @property
    def location(self) -> str:
        return "memory://employees"

    @property
    def data(self) -> str | None:
        return self._data

    def exists(self) -> bool:
        return self._data is not None

    def read(self) -> str:
        if self._data is None:
            raise StorageError(f"No data at {self.location}")
        return self._data

    def write(self, data: str) -> None:
        self._data = data
        self.write_count += 1
