"""Session resolution: which identifier a request runs as.

The session itself is a mutable mapping owned by the session middleware
(a signed cookie). Only one key is used, holding the active identifier.
"""

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Any

from dynaswitch.credentials.registry import CredentialRegistry
from dynaswitch.models.user_config import UserConfig
from dynaswitch.observability.logging import get_logger

logger = get_logger(__name__)

SESSION_USER_KEY = "user"


@dataclass(frozen=True)
class RequestContext:
    """Per-request view of the session, passed explicitly to handlers."""

    identifier: str | None
    user: UserConfig | None

    @property
    def is_admin(self) -> bool:
        return self.user is not None and self.user.is_admin


class SessionResolver:
    """Resolves and switches the active identifier stored in a session."""

    def __init__(self, registry: CredentialRegistry) -> None:
        self._registry = registry

    def resolve(self, session: MutableMapping[str, Any]) -> str | None:
        """Return the session's identifier, initializing it to the default.

        An identifier not present in the registry is overwritten with the
        default (or removed when there is none).
        """
        current = session.get(SESSION_USER_KEY)
        if current is not None and current in self._registry:
            return current

        default = self._registry.default_identifier()
        if default is None:
            session.pop(SESSION_USER_KEY, None)
            return None
        if current is not None:
            logger.warning("stale_session_user_replaced", stale=current, default=default)
        session[SESSION_USER_KEY] = default
        return default

    def switch(self, session: MutableMapping[str, Any], identifier: str) -> bool:
        """Make ``identifier`` active if it is configured.

        Unknown identifiers leave the session untouched. Returns whether the
        switch happened.
        """
        if identifier not in self._registry:
            logger.warning("invalid_user_switch", requested=identifier,
                           current=session.get(SESSION_USER_KEY))
            return False
        session[SESSION_USER_KEY] = identifier
        logger.info("user_switched", identifier=identifier)
        return True

    def context(self, session: MutableMapping[str, Any]) -> RequestContext:
        identifier = self.resolve(session)
        return RequestContext(identifier=identifier, user=self._registry.lookup(identifier))
