"""Protocol interfaces for the DynaSwitch persistence seams.

Services depend on these Protocols only; the DynamoDB and in-memory
backends satisfy them structurally.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


# ---------------------------------------------------------------------------
# Persistence: Record Store
# ---------------------------------------------------------------------------

@runtime_checkable
class IRecordStore(Protocol):
    """Single-table key-value access keyed by ``Email``."""

    def get(self, email: str) -> dict[str, Any] | None: ...

    def put(self, item: dict[str, Any]) -> None: ...

    def update(self, email: str, changes: dict[str, Any]) -> dict[str, Any]: ...

    def delete(self, email: str) -> None: ...

    def scan(self) -> list[dict[str, Any]]: ...


# ---------------------------------------------------------------------------
# Persistence: Table Admin
# ---------------------------------------------------------------------------

@runtime_checkable
class ITableAdmin(Protocol):
    """Table-level operations requiring admin permissions."""

    def list_tables(self, limit: int = 1) -> list[str]: ...

    def create_table(
        self, table_name: str, partition_key_name: str, partition_key_type: str
    ) -> dict[str, Any]: ...
