"""Protocol interfaces for Staffroll abstractions.

Structural typing, no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


# ---------------------------------------------------------------------------
# Persistence: Text Store
# ---------------------------------------------------------------------------

@runtime_checkable
class ITextStore(Protocol):
    """A single durable text resource the repository reads and overwrites."""

    @property
    def location(self) -> str: ...

    def exists(self) -> bool: ...

    def read(self) -> str: ...

    def write(self, data: str) -> None: ...
