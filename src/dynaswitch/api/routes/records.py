"""Record CRUD endpoints on the configured table."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from dynaswitch.api.dependencies import get_record_service
from dynaswitch.models.record import Message, RecordCreate, RecordCreated, RecordUpdate, RecordUpdated
from dynaswitch.services.records import RecordService

router = APIRouter(prefix="/api/tests", tags=["records"])


@router.get("")
def list_records(records: RecordService = Depends(get_record_service)) -> list[dict[str, Any]]:
    """Return every record from a single, unpaginated scan."""
    return records.scan_all()


@router.get("/{email}")
def get_record(email: str, records: RecordService = Depends(get_record_service)) -> dict[str, Any]:
    return records.fetch_by_key(email)


@router.post("", status_code=201)
def create_record(
    body: RecordCreate, records: RecordService = Depends(get_record_service)
) -> RecordCreated:
    item = records.create(body.Email, body.Nama, body.Nohp)
    return RecordCreated(message="Item added successfully", item=item)


@router.patch("/{email}")
def update_record(
    email: str,
    body: RecordUpdate | None = None,
    records: RecordService = Depends(get_record_service),
) -> RecordUpdated:
    body = body or RecordUpdate()
    updated = records.update(email, nama=body.Nama, nohp=body.Nohp)
    return RecordUpdated(message=f"Item with Email: {email} updated.", updatedItem=updated)


@router.delete("/{email}")
def delete_record(email: str, records: RecordService = Depends(get_record_service)) -> Message:
    records.delete(email)
    return Message(message=f"Item with Email: {email} deleted.")
