"""Admin endpoints: capability check and table creation."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from dynaswitch.api.dependencies import (
    build_admin_service,
    get_client_factory,
    get_request_context,
)
from dynaswitch.core.exceptions import ConfigurationError
from dynaswitch.credentials.client_factory import ClientFactory
from dynaswitch.credentials.session import RequestContext
from dynaswitch.models.admin import AdminCheckResult, CreateTableRequest, TableCreated
from dynaswitch.observability.logging import get_logger
from dynaswitch.services.admin import require_table_fields

logger = get_logger(__name__)

router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.get("/check", response_model=AdminCheckResult, response_model_exclude_none=True)
def check_admin(
    ctx: RequestContext = Depends(get_request_context),
    factory: ClientFactory = Depends(get_client_factory),
):
    """Report whether the session user has working admin-level access."""
    try:
        clients = factory.create(ctx.identifier)
    except ConfigurationError as exc:
        logger.warning("admin_check_failed", identifier=ctx.identifier, error=exc.message)
        result = AdminCheckResult(
            isAdmin=False,
            message="Admin check failed or user does not have permissions.",
            error=exc.message,
        )
        return JSONResponse(status_code=500, content=result.model_dump(exclude_none=True))
    return build_admin_service(clients).check_admin()


@router.post("/create-table")
def create_table(
    body: CreateTableRequest,
    ctx: RequestContext = Depends(get_request_context),
    factory: ClientFactory = Depends(get_client_factory),
) -> TableCreated:
    require_table_fields(body.tableName, body.partitionKeyName, body.partitionKeyType)
    admin = build_admin_service(factory.create(ctx.identifier))
    description = admin.create_table(body.tableName, body.partitionKeyName, body.partitionKeyType)
    return TableCreated(
        message=f"Table '{body.tableName}' creation initiated.",
        tableDescription=description,
    )
