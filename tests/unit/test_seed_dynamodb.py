"""Tests for the DynamoDB seed script."""

from __future__ import annotations

import sys
from pathlib import Path

import boto3
import pytest
from moto import mock_aws

# Make scripts/ importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent / "scripts"))

from seed_dynamodb import SAMPLE_RECORDS, create_table, seed_records  # noqa: E402


@pytest.fixture
def ddb():
    with mock_aws():
        yield boto3.resource("dynamodb", region_name="us-east-1")


class TestCreateTable:
    def test_creates_record_table(self, ddb):
        assert create_table(ddb, "tests") is True
        desc = ddb.meta.client.describe_table(TableName="tests")["Table"]
        assert desc["KeySchema"] == [{"AttributeName": "Email", "KeyType": "HASH"}]

    def test_idempotent_skips_existing(self, ddb):
        create_table(ddb, "tests")
        assert create_table(ddb, "tests") is False
        assert ddb.meta.client.list_tables()["TableNames"] == ["tests"]


class TestSeedRecords:
    def test_seeds_samples_with_timestamps(self, ddb):
        create_table(ddb, "tests")
        assert seed_records(ddb, "tests") == len(SAMPLE_RECORDS)

        items = ddb.Table("tests").scan()["Items"]
        assert len(items) == len(SAMPLE_RECORDS)
        assert all(i["createdAt"] == i["updatedAt"] for i in items)
