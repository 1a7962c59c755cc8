"""Per-request DynamoDB client construction from registry credentials."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError

from dynaswitch.core.exceptions import ConfigurationError
from dynaswitch.credentials.registry import CredentialRegistry
from dynaswitch.models.user_config import UserConfig


@dataclass(frozen=True)
class UserClients:
    """DynamoDB handles bound to one identifier's credentials.

    ``resource`` is the document-style interface used for item access;
    ``client`` is its low-level client, used for table administration.
    """

    identifier: str
    user: UserConfig
    resource: Any

    @property
    def client(self) -> Any:
        return self.resource.meta.client


class ClientFactory:
    """Builds a fresh set of DynamoDB handles for every request."""

    def __init__(self, registry: CredentialRegistry, endpoint_url: str | None = None) -> None:
        self._registry = registry
        self._endpoint_url = endpoint_url

    def create(self, identifier: str | None) -> UserClients:
        user = self._registry.lookup(identifier)
        if identifier is None or user is None:
            raise ConfigurationError("User configuration not found or no user in session.")

        session = boto3.Session(
            aws_access_key_id=user.access_key_id or None,
            aws_secret_access_key=user.secret_access_key or None,
            region_name=user.region or None,
        )
        kwargs: dict = {}
        if self._endpoint_url:
            kwargs["endpoint_url"] = self._endpoint_url
        try:
            resource = session.resource("dynamodb", **kwargs)
        except BotoCoreError as exc:
            raise ConfigurationError(
                f"Could not build a DynamoDB client for user {identifier!r}.", detail=str(exc),
            ) from exc
        return UserClients(identifier=identifier, user=user, resource=resource)
