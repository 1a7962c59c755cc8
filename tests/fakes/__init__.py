"""Shared test doubles — re-export memory backends."""

from __future__ import annotations

from dynaswitch.persistence.memory_backend import MemoryRecordStore, MemoryTableAdmin

__all__ = ["MemoryRecordStore", "MemoryTableAdmin"]
