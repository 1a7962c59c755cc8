"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class DynamoDBConfig(BaseSettings):
    """DynamoDB configuration."""

    model_config = {"env_prefix": "DYNAMODB_", "env_file": ".env", "extra": "ignore"}

    table_name: str = ""
    endpoint_url: str | None = None  # LocalStack override


class UserCredentialsConfig(BaseSettings):
    """Credentials for one configured identifier.

    Loaded with a per-identifier prefix, e.g.
    ``UserCredentialsConfig(_env_prefix="alice_")`` reads
    ``alice_AWS_ACCESS_KEY_ID``, ``alice_AWS_SECRET_ACCESS_KEY``,
    ``alice_AWS_REGION``, ``alice_DISPLAY_NAME`` and ``alice_IS_ADMIN``.
    """

    model_config = {"env_file": ".env", "extra": "ignore"}

    aws_access_key_id: str = ""
    aws_secret_access_key: str = Field(default="", repr=False)
    aws_region: str = ""
    display_name: str = ""
    is_admin: bool = False

    @field_validator("is_admin", mode="before")
    @classmethod
    def only_true_grants_admin(cls, value: object) -> bool:
        """Only the literal string "true" (any case) turns the admin flag on."""
        if isinstance(value, bool):
            return value
        return str(value).strip().lower() == "true"


class AppSettings(BaseSettings):
    """Root application settings."""

    model_config = {"env_prefix": "APP_", "env_file": ".env", "extra": "ignore"}

    users: str = ""  # comma-separated identifiers
    secret: str = Field(default="", repr=False)
    environment: Literal["development", "production"] = "development"
    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "console"
    host: str = "0.0.0.0"
    port: int = 3000

    dynamodb: DynamoDBConfig = Field(default_factory=DynamoDBConfig)

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def user_identifiers(self) -> list[str]:
        """Configured identifiers in order, trimmed, first occurrence wins."""
        seen: list[str] = []
        for raw in self.users.split(","):
            ident = raw.strip()
            if ident and ident not in seen:
                seen.append(ident)
        return seen
