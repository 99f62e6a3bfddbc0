"""Local file backend implementing ITextStore."""

from __future__ import annotations

import os
from pathlib import Path

from staffroll.core.exceptions import StorageError


class LocalTextStore:
    """Production ITextStore backed by a file on the local filesystem."""

    def __init__(self, path: str | os.PathLike[str], encoding: str = "utf-8") -> None:
        self._path = Path(path)
        self._encoding = encoding

    @property
    def location(self) -> str:
        return str(self._path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def read(self) -> str:
        try:
            return self._path.read_text(encoding=self._encoding)
        except OSError as exc:
            raise StorageError(f"Read failed for {self.location!r}: {exc}") from exc

    def write(self, data: str) -> None:
        tmp = self._path.with_name(f".{self._path.name}.tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(data, encoding=self._encoding)
            tmp.replace(self._path)
        except OSError as exc:
            raise StorageError(f"Write failed for {self.location!r}: {exc}") from exc
