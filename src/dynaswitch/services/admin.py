"""Admin operations gated on the identifier's configured admin flag."""

from __future__ import annotations

from typing import Any

from dynaswitch.core.exceptions import (
    ConflictError,
    DynaSwitchError,
    ForbiddenError,
    ValidationError,
)
from dynaswitch.core.protocols import ITableAdmin
from dynaswitch.models.admin import KEY_TYPES, AdminCheckResult
from dynaswitch.models.user_config import UserConfig
from dynaswitch.observability.logging import get_logger

logger = get_logger(__name__)


def require_table_fields(
    table_name: str | None,
    partition_key_name: str | None,
    partition_key_type: str | None,
) -> None:
    if not table_name or not partition_key_name or not partition_key_type:
        raise ValidationError("Table name, partition key name, and type are required.")


class AdminService:
    """Table listing and creation for identifiers flagged ``is_admin``.

    The flag comes from the credential registry. Whether the credentials
    actually carry admin-level permissions is only known once DynamoDB
    answers.
    """

    def __init__(self, user: UserConfig, tables: ITableAdmin) -> None:
        self._user = user
        self._tables = tables

    def check_admin(self) -> AdminCheckResult:
        if not self._user.is_admin:
            return AdminCheckResult(isAdmin=False, message="Current user is not configured as admin.")
        try:
            self._tables.list_tables(limit=1)
        except DynaSwitchError as exc:
            logger.warning("admin_check_failed", identifier=self._user.identifier,
                           error=exc.detail or exc.message)
            return AdminCheckResult(
                isAdmin=False,
                message="Admin check failed or user does not have permissions.",
                error=exc.detail or exc.message,
            )
        return AdminCheckResult(isAdmin=True, message="Backend has admin capabilities for the current user.")

    def create_table(
        self,
        table_name: str | None,
        partition_key_name: str | None,
        partition_key_type: str | None,
    ) -> dict[str, Any]:
        """Create an on-demand table with a single hash key.

        Raises:
            ValidationError: an argument is missing or the key type is not S/N/B.
            ForbiddenError: the identifier is not flagged admin, or DynamoDB denied access.
            ConflictError: the table already exists.
        """
        require_table_fields(table_name, partition_key_name, partition_key_type)
        if not self._user.is_admin:
            raise ForbiddenError("Current user does not have admin privileges configured.")
        if partition_key_type not in KEY_TYPES:
            raise ValidationError(f"Partition key type must be one of {', '.join(KEY_TYPES)}.")

        logger.info("table_create_requested", identifier=self._user.identifier, table_name=table_name)
        try:
            return self._tables.create_table(table_name, partition_key_name, partition_key_type)
        except ForbiddenError as exc:
            raise ForbiddenError(
                "Access Denied: Check IAM permissions for table creation.", detail=exc.detail,
            ) from exc
        except ConflictError as exc:
            raise ConflictError(f"Table '{table_name}' already exists.", detail=exc.detail) from exc
        except DynaSwitchError:
            logger.error("table_create_failed", identifier=self._user.identifier, table_name=table_name)
            raise
