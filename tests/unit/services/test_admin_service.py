"""Tests for AdminService against the in-memory table admin."""

from __future__ import annotations

import pytest

from dynaswitch.core.exceptions import (
    ConflictError,
    ForbiddenError,
    RemoteStoreError,
    ValidationError,
)
from dynaswitch.models.user_config import UserConfig
from dynaswitch.services.admin import AdminService
from tests.fakes import MemoryTableAdmin

ADMIN = UserConfig(identifier="alice", is_admin=True)
REGULAR = UserConfig(identifier="bob")


class TestCheckAdmin:
    def test_non_admin_never_calls_remote(self):
        tables = MemoryTableAdmin()
        result = AdminService(REGULAR, tables).check_admin()

        assert result.isAdmin is False
        assert result.message == "Current user is not configured as admin."
        assert tables.calls == []

    def test_admin_with_working_access(self):
        tables = MemoryTableAdmin()
        result = AdminService(ADMIN, tables).check_admin()

        assert result.isAdmin is True
        assert tables.calls == ["list_tables"]

    def test_admin_without_remote_permission_reports_negative(self):
        tables = MemoryTableAdmin(fail_with=ForbiddenError("Failed to list tables.", detail="not authorized"))
        result = AdminService(ADMIN, tables).check_admin()

        assert result.isAdmin is False
        assert result.error == "not authorized"


class TestCreateTable:
    def test_creates_table(self):
        tables = MemoryTableAdmin()
        desc = AdminService(ADMIN, tables).create_table("orders", "OrderId", "S")

        assert desc["TableName"] == "orders"
        assert desc["KeySchema"] == [{"AttributeName": "OrderId", "KeyType": "HASH"}]
        assert desc["BillingModeSummary"]["BillingMode"] == "PAY_PER_REQUEST"

    @pytest.mark.parametrize("args", [
        (None, "OrderId", "S"),
        ("orders", "", "S"),
        ("orders", "OrderId", None),
    ])
    def test_missing_argument_raises_validation(self, args):
        with pytest.raises(ValidationError):
            AdminService(ADMIN, MemoryTableAdmin()).create_table(*args)

    def test_missing_argument_checked_before_admin_flag(self):
        with pytest.raises(ValidationError):
            AdminService(REGULAR, MemoryTableAdmin()).create_table("orders", None, "S")

    def test_unknown_key_type_raises_validation(self):
        with pytest.raises(ValidationError):
            AdminService(ADMIN, MemoryTableAdmin()).create_table("orders", "OrderId", "X")

    def test_non_admin_is_forbidden_without_remote_call(self):
        tables = MemoryTableAdmin()
        with pytest.raises(ForbiddenError):
            AdminService(REGULAR, tables).create_table("orders", "OrderId", "S")
        assert tables.calls == []

    def test_admin_flag_checked_before_key_type(self):
        tables = MemoryTableAdmin()
        with pytest.raises(ForbiddenError):
            AdminService(REGULAR, tables).create_table("orders", "OrderId", "X")
        assert tables.calls == []

    def test_existing_table_is_conflict(self):
        service = AdminService(ADMIN, MemoryTableAdmin())
        service.create_table("orders", "OrderId", "S")
        with pytest.raises(ConflictError, match="orders"):
            service.create_table("orders", "OrderId", "S")

    def test_remote_access_denied_is_forbidden(self):
        tables = MemoryTableAdmin(fail_with=ForbiddenError("Failed to create table.", detail="denied"))
        with pytest.raises(ForbiddenError, match="Access Denied") as excinfo:
            AdminService(ADMIN, tables).create_table("orders", "OrderId", "S")
        assert excinfo.value.detail == "denied"

    def test_other_remote_errors_propagate(self):
        tables = MemoryTableAdmin(fail_with=RemoteStoreError("Failed to create table.", detail="boom"))
        with pytest.raises(RemoteStoreError):
            AdminService(ADMIN, tables).create_table("orders", "OrderId", "S")
