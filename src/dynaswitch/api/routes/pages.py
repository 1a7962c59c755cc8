"""Landing page and user switching."""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from dynaswitch.api.dependencies import (
    get_registry,
    get_request_context,
    get_session_resolver,
    get_settings,
)
from dynaswitch.core.config import AppSettings
from dynaswitch.credentials.registry import CredentialRegistry
from dynaswitch.credentials.session import RequestContext, SessionResolver

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse)
def index(
    request: Request,
    ctx: RequestContext = Depends(get_request_context),
    registry: CredentialRegistry = Depends(get_registry),
    settings: AppSettings = Depends(get_settings),
) -> HTMLResponse:
    available = []
    for ident in registry.list():
        user = registry.lookup(ident)
        available.append({"identifier": ident, "display_name": user.display_name if user else ident})

    return templates.TemplateResponse(request, "index.html", {
        "current_identifier": ctx.identifier,
        "current_display_name": ctx.user.display_name if ctx.user else "N/A",
        "is_current_admin": ctx.is_admin,
        "available_users": available,
        "table_name": settings.dynamodb.table_name,
    })


@router.post("/switch_user/{user_id}")
def switch_user(
    user_id: str,
    request: Request,
    resolver: SessionResolver = Depends(get_session_resolver),
) -> RedirectResponse:
    """Switch the session user. Unknown identifiers are ignored."""
    resolver.switch(request.session, user_id)
    return RedirectResponse(url="/", status_code=302)
