"""Record operations against the fixed record table."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

from dynaswitch.core.exceptions import NotFoundError, ValidationError
from dynaswitch.core.protocols import IRecordStore
from dynaswitch.models.record import Record


def utc_now_iso() -> str:
    """Current instant as ISO-8601 with millisecond precision, e.g. 2024-05-01T10:00:00.000Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class RecordService:
    """Single-item and whole-table operations on records keyed by Email."""

    def __init__(self, store: IRecordStore, clock: Callable[[], str] = utc_now_iso) -> None:
        self._store = store
        self._clock = clock

    def fetch_by_key(self, email: str) -> dict[str, Any]:
        item = self._store.get(email)
        if item is None:
            raise NotFoundError("Item not found")
        return item

    def create(self, email: str | None, nama: str | None, nohp: str | None) -> dict[str, Any]:
        """Write a new record, overwriting any record with the same Email."""
        if not email or not nama or not nohp:
            raise ValidationError("Email, Nama, and Nohp are required.")
        now = self._clock()
        item = Record(Email=email, Nama=nama, Nohp=nohp, createdAt=now, updatedAt=now).model_dump()
        self._store.put(item)
        return item

    def update(self, email: str, nama: str | None = None, nohp: str | None = None) -> dict[str, Any]:
        """Refresh updatedAt and set whichever of Nama/Nohp is non-empty."""
        if not email:
            raise ValidationError("Email is required for update.")
        changes: dict[str, Any] = {"updatedAt": self._clock()}
        if nama:
            changes["Nama"] = nama
        if nohp:
            changes["Nohp"] = nohp
        return self._store.update(email, changes)

    def delete(self, email: str) -> None:
        self._store.delete(email)

    def scan_all(self) -> list[dict[str, Any]]:
        return self._store.scan()
