"""Admin request and response bodies."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel

KEY_TYPES = ("S", "N", "B")


class CreateTableRequest(BaseModel):
    """Body of ``POST /api/admin/create-table``."""

    tableName: Optional[str] = None
    partitionKeyName: Optional[str] = None
    partitionKeyType: Optional[str] = None


class AdminCheckResult(BaseModel):
    isAdmin: bool
    message: str
    error: Optional[str] = None


class TableCreated(BaseModel):
    message: str
    tableDescription: dict[str, Any]
