"""Pluggable persistence backends behind Protocol interfaces."""

from __future__ import annotations

from dynaswitch.core.config import AppSettings
from dynaswitch.core.exceptions import ConfigurationError
from dynaswitch.credentials.client_factory import UserClients
from dynaswitch.persistence.dynamodb_backend import DynamoDBRecordStore, DynamoDBTableAdmin


def create_record_store(clients: UserClients, settings: AppSettings) -> DynamoDBRecordStore:
    """Bind the configured record table to a user's DynamoDB resource."""
    table_name = settings.dynamodb.table_name
    if not table_name:
        raise ConfigurationError("DYNAMODB_TABLE_NAME is not configured.")
    return DynamoDBRecordStore(clients.resource, table_name)


def create_table_admin(clients: UserClients) -> DynamoDBTableAdmin:
    return DynamoDBTableAdmin(clients.client)
