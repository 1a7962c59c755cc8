"""Create the record table and optionally seed sample records.

Usage:
    python scripts/seed_dynamodb.py --endpoint-url http://localhost:4566 --table-name tests --with-samples
"""

from __future__ import annotations

import argparse
from datetime import datetime, timezone
from typing import Any

import boto3

KEY_ATTRIBUTE = "Email"

SAMPLE_RECORDS: list[dict[str, str]] = [
    {"Email": "andi@example.com", "Nama": "Andi", "Nohp": "081200000001"},
    {"Email": "budi@example.com", "Nama": "Budi", "Nohp": "081200000002"},
    {"Email": "citra@example.com", "Nama": "Citra", "Nohp": "081200000003"},
]


def create_table(ddb: Any, table_name: str) -> bool:
    """Create the record table. Returns False if it already exists."""
    client = ddb.meta.client
    existing = client.list_tables().get("TableNames", [])
    if table_name in existing:
        print(f"  Table {table_name} already exists, skipping")
        return False
    client.create_table(
        TableName=table_name,
        KeySchema=[{"AttributeName": KEY_ATTRIBUTE, "KeyType": "HASH"}],
        AttributeDefinitions=[{"AttributeName": KEY_ATTRIBUTE, "AttributeType": "S"}],
        BillingMode="PAY_PER_REQUEST",
    )
    client.get_waiter("table_exists").wait(TableName=table_name)
    print(f"  Created table {table_name}")
    return True


def seed_records(ddb: Any, table_name: str) -> int:
    """Write SAMPLE_RECORDS with fresh timestamps. Returns the number written."""
    now = datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    tbl = ddb.Table(table_name)
    with tbl.batch_writer() as batch:
        for record in SAMPLE_RECORDS:
            batch.put_item(Item={**record, "createdAt": now, "updatedAt": now})
    print(f"  Seeded {len(SAMPLE_RECORDS)} records")
    return len(SAMPLE_RECORDS)


def main() -> None:
    parser = argparse.ArgumentParser(description="Create and seed the DynaSwitch record table")
    parser.add_argument("--endpoint-url", default=None, help="DynamoDB endpoint (e.g. http://localhost:4566)")
    parser.add_argument("--table-name", default="tests", help="Record table name")
    parser.add_argument("--region", default="us-east-1", help="AWS region")
    parser.add_argument("--with-samples", action="store_true", help="Write sample records")
    args = parser.parse_args()

    kwargs: dict[str, Any] = {"region_name": args.region}
    if args.endpoint_url:
        kwargs["endpoint_url"] = args.endpoint_url

    ddb = boto3.resource("dynamodb", **kwargs)

    print("Creating table...")
    create_table(ddb, args.table_name)

    if args.with_samples:
        print("Seeding records...")
        seed_records(ddb, args.table_name)

    print("Done!")


if __name__ == "__main__":
    main()
