"""DynamoDB backends implementing IRecordStore and ITableAdmin."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from dynaswitch.core.exceptions import (
    ConflictError,
    DynaSwitchError,
    ForbiddenError,
    NotFoundError,
    RemoteStoreError,
)

KEY_ATTRIBUTE = "Email"

# Item access: only the conditional update has its own outcome.
RECORD_ERRORS: dict[str, type[DynaSwitchError]] = {
    "ConditionalCheckFailedException": NotFoundError,
}

ADMIN_ERRORS: dict[str, type[DynaSwitchError]] = {
    "ResourceInUseException": ConflictError,
    "AccessDeniedException": ForbiddenError,
}


def _decode_decimals(item: dict[str, Any]) -> dict[str, Any]:
    """Convert Decimal values in a DynamoDB item to int/float."""
    out: dict[str, Any] = {}
    for k, v in item.items():
        if isinstance(v, Decimal):
            out[k] = int(v) if v == int(v) else float(v)
        elif isinstance(v, dict):
            out[k] = _decode_decimals(v)
        elif isinstance(v, list):
            out[k] = [
                _decode_decimals(i) if isinstance(i, dict)
                else (int(i) if isinstance(i, Decimal) and i == int(i) else float(i) if isinstance(i, Decimal) else i)
                for i in v
            ]
        else:
            out[k] = v
    return out


def translate_error(
    exc: Exception,
    message: str,
    codes: dict[str, type[DynaSwitchError]] = RECORD_ERRORS,
) -> DynaSwitchError:
    """Map a botocore failure onto the DynaSwitch exception hierarchy.

    Error codes missing from ``codes`` become RemoteStoreError.
    """
    if isinstance(exc, ClientError):
        code = exc.response.get("Error", {}).get("Code", "")
        detail = exc.response.get("Error", {}).get("Message") or str(exc)
        return codes.get(code, RemoteStoreError)(message, detail=detail)
    return RemoteStoreError(message, detail=str(exc))


class DynamoDBRecordStore:
    """Production IRecordStore backed by a single DynamoDB table."""

    def __init__(self, resource: Any, table_name: str) -> None:
        self._table_name = table_name
        self._table = resource.Table(table_name)

    def get(self, email: str) -> dict[str, Any] | None:
        try:
            resp = self._table.get_item(Key={KEY_ATTRIBUTE: email})
        except (ClientError, BotoCoreError) as exc:
            raise translate_error(exc, "Error getting item") from exc
        item = resp.get("Item")
        return _decode_decimals(item) if item else None

    def put(self, item: dict[str, Any]) -> None:
        try:
            self._table.put_item(Item=item)
        except (ClientError, BotoCoreError) as exc:
            raise translate_error(exc, "Error adding item") from exc

    def update(self, email: str, changes: dict[str, Any]) -> dict[str, Any]:
        """Set ``changes`` on an existing item and return all new attributes.

        Raises NotFoundError when no item exists for ``email``.
        """
        names: dict[str, str] = {}
        values: dict[str, Any] = {}
        clauses: list[str] = []
        for i, (attr, value) in enumerate(changes.items()):
            names[f"#a{i}"] = attr
            values[f":v{i}"] = value
            clauses.append(f"#a{i} = :v{i}")

        try:
            resp = self._table.update_item(
                Key={KEY_ATTRIBUTE: email},
                UpdateExpression="SET " + ", ".join(clauses),
                ConditionExpression=f"attribute_exists({KEY_ATTRIBUTE})",
                ExpressionAttributeNames=names,
                ExpressionAttributeValues=values,
                ReturnValues="ALL_NEW",
            )
        except (ClientError, BotoCoreError) as exc:
            raise translate_error(exc, "Failed to update item.") from exc
        return _decode_decimals(resp.get("Attributes", {}))

    def delete(self, email: str) -> None:
        try:
            self._table.delete_item(Key={KEY_ATTRIBUTE: email})
        except (ClientError, BotoCoreError) as exc:
            raise translate_error(exc, "Error deleting item") from exc

    def scan(self) -> list[dict[str, Any]]:
        """Return the first scan page only."""
        try:
            resp = self._table.scan()
        except (ClientError, BotoCoreError) as exc:
            raise translate_error(exc, "Error scanning items") from exc
        return [_decode_decimals(item) for item in resp.get("Items", [])]


class DynamoDBTableAdmin:
    """Production ITableAdmin backed by the low-level DynamoDB client."""

    def __init__(self, client: Any) -> None:
        self._client = client

    def list_tables(self, limit: int = 1) -> list[str]:
        try:
            resp = self._client.list_tables(Limit=limit)
        except (ClientError, BotoCoreError) as exc:
            raise translate_error(exc, "Failed to list tables.", ADMIN_ERRORS) from exc
        return resp.get("TableNames", [])

    def create_table(
        self, table_name: str, partition_key_name: str, partition_key_type: str
    ) -> dict[str, Any]:
        try:
            resp = self._client.create_table(
                TableName=table_name,
                AttributeDefinitions=[
                    {"AttributeName": partition_key_name, "AttributeType": partition_key_type},
                ],
                KeySchema=[{"AttributeName": partition_key_name, "KeyType": "HASH"}],
                BillingMode="PAY_PER_REQUEST",
            )
        except (ClientError, BotoCoreError) as exc:
            raise translate_error(exc, "Failed to create table.", ADMIN_ERRORS) from exc
        return _decode_decimals(resp.get("TableDescription", {}))
