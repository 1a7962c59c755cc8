"""In-memory backends for unit tests — dict-backed fakes."""

from __future__ import annotations

from typing import Any

from dynaswitch.core.exceptions import ConflictError, DynaSwitchError, NotFoundError


class MemoryRecordStore:
    """Dict-backed IRecordStore for unit tests."""

    def __init__(self) -> None:
        self._items: dict[str, dict[str, Any]] = {}

    def get(self, email: str) -> dict[str, Any] | None:
        item = self._items.get(email)
        return dict(item) if item is not None else None

    def put(self, item: dict[str, Any]) -> None:
        self._items[item["Email"]] = dict(item)

    def update(self, email: str, changes: dict[str, Any]) -> dict[str, Any]:
        if email not in self._items:
            raise NotFoundError("Item not found or condition failed.")
        self._items[email].update(changes)
        return dict(self._items[email])

    def delete(self, email: str) -> None:
        self._items.pop(email, None)

    def scan(self) -> list[dict[str, Any]]:
        return [dict(item) for item in self._items.values()]


class MemoryTableAdmin:
    """Dict-backed ITableAdmin that records every call it receives."""

    def __init__(self, fail_with: DynaSwitchError | None = None) -> None:
        self.tables: dict[str, dict[str, Any]] = {}
        self.calls: list[str] = []
        self._fail_with = fail_with

    def list_tables(self, limit: int = 1) -> list[str]:
        self.calls.append("list_tables")
        if self._fail_with is not None:
            raise self._fail_with
        return list(self.tables)[:limit]

    def create_table(
        self, table_name: str, partition_key_name: str, partition_key_type: str
    ) -> dict[str, Any]:
        self.calls.append("create_table")
        if self._fail_with is not None:
            raise self._fail_with
        if table_name in self.tables:
            raise ConflictError("Table already exists.", detail=f"Table already exists: {table_name}")
        desc = {
            "TableName": table_name,
            "KeySchema": [{"AttributeName": partition_key_name, "KeyType": "HASH"}],
            "AttributeDefinitions": [
                {"AttributeName": partition_key_name, "AttributeType": partition_key_type},
            ],
            "TableStatus": "CREATING",
            "BillingModeSummary": {"BillingMode": "PAY_PER_REQUEST"},
        }
        self.tables[table_name] = desc
        return desc
