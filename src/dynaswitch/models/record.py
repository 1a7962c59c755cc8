"""Record request and response bodies.

Field names match the attributes stored in the DynamoDB table, so the
same names appear in JSON bodies and in the items themselves.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, field_validator


def _number_as_text(value: Any) -> Any:
    # Phone numbers often arrive as JSON numbers; they are stored as strings.
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


class RecordCreate(BaseModel):
    """Body of ``POST /api/tests``. Presence is checked by RecordService."""

    Email: Optional[str] = None
    Nama: Optional[str] = None
    Nohp: Optional[str] = None

    nohp_as_text = field_validator("Nohp", mode="before")(_number_as_text)


class RecordUpdate(BaseModel):
    """Body of ``PATCH /api/tests/{email}``. Empty values are skipped."""

    Nama: Optional[str] = None
    Nohp: Optional[str] = None

    nohp_as_text = field_validator("Nohp", mode="before")(_number_as_text)


class Record(BaseModel):
    """A stored record."""

    Email: str
    Nama: str = ""
    Nohp: str = ""
    createdAt: str = ""
    updatedAt: str = ""


class RecordCreated(BaseModel):
    message: str
    item: dict[str, Any]


class RecordUpdated(BaseModel):
    message: str
    updatedItem: dict[str, Any]


class Message(BaseModel):
    message: str
