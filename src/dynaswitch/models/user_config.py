"""UserConfig: one configured set of DynamoDB credentials."""

from __future__ import annotations

from pydantic import BaseModel, Field


class UserConfig(BaseModel):
    """Immutable credential entry for a configured identifier."""

    model_config = {"frozen": True}

    identifier: str
    access_key_id: str = ""
    secret_access_key: str = Field(default="", repr=False)
    region: str = ""
    display_name: str = ""
    is_admin: bool = False
