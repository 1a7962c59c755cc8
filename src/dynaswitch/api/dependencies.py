"""FastAPI dependencies threading per-request state into handlers.

Long-lived objects (settings, registry, resolver, client factory) live on
``app.state``; everything derived from the session is rebuilt per request.
"""

from __future__ import annotations

from fastapi import Depends, Request

from dynaswitch.core.config import AppSettings
from dynaswitch.credentials.client_factory import ClientFactory, UserClients
from dynaswitch.credentials.registry import CredentialRegistry
from dynaswitch.credentials.session import RequestContext, SessionResolver
from dynaswitch.persistence import create_record_store, create_table_admin
from dynaswitch.services.admin import AdminService
from dynaswitch.services.records import RecordService


def get_settings(request: Request) -> AppSettings:
    return request.app.state.settings


def get_registry(request: Request) -> CredentialRegistry:
    return request.app.state.registry


def get_session_resolver(request: Request) -> SessionResolver:
    return request.app.state.session_resolver


def get_client_factory(request: Request) -> ClientFactory:
    return request.app.state.client_factory


def get_request_context(
    request: Request,
    resolver: SessionResolver = Depends(get_session_resolver),
) -> RequestContext:
    """Resolve the active identifier, initializing the session if needed."""
    return resolver.context(request.session)


def get_user_clients(
    ctx: RequestContext = Depends(get_request_context),
    factory: ClientFactory = Depends(get_client_factory),
) -> UserClients:
    return factory.create(ctx.identifier)


def build_admin_service(clients: UserClients) -> AdminService:
    return AdminService(clients.user, create_table_admin(clients))


def get_record_service(
    clients: UserClients = Depends(get_user_clients),
    settings: AppSettings = Depends(get_settings),
) -> RecordService:
    return RecordService(create_record_store(clients, settings))
