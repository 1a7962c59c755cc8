"""Health check endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from dynaswitch.api.dependencies import get_registry
from dynaswitch.credentials.registry import CredentialRegistry

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}


@router.get("/ready")
async def ready(registry: CredentialRegistry = Depends(get_registry)) -> JSONResponse:
    if not len(registry):
        return JSONResponse(status_code=503, content={"status": "not_ready", "users": 0})
    return JSONResponse(content={"status": "ready", "users": len(registry)})
