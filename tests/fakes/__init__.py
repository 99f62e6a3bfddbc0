"""Shared test doubles, re-exported from the memory backends."""

from __future__ import annotations

from staffroll.persistence.memory_backend import MemoryTextStore

__all__ = ["MemoryTextStore"]
