"""Credential registry: identifier -> UserConfig, built once at startup."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from dynaswitch.core.config import AppSettings, UserCredentialsConfig
from dynaswitch.models.user_config import UserConfig


class CredentialRegistry:
    """Read-only mapping of configured identifiers to their credentials.

    Identifiers keep the order they were configured in; the first one is
    the default identifier handed to new sessions.
    """

    def __init__(self, users: Iterable[UserConfig]) -> None:
        entries: dict[str, UserConfig] = {}
        for user in users:
            entries.setdefault(user.identifier, user)
        self._users: Mapping[str, UserConfig] = MappingProxyType(entries)
        self._order: tuple[str, ...] = tuple(entries)

    @classmethod
    def from_settings(cls, settings: AppSettings) -> CredentialRegistry:
        """Load one UserConfig per identifier listed in ``APP_USERS``."""
        users = []
        for ident in settings.user_identifiers:
            creds = UserCredentialsConfig(_env_prefix=f"{ident}_")
            users.append(UserConfig(
                identifier=ident,
                access_key_id=creds.aws_access_key_id,
                secret_access_key=creds.aws_secret_access_key,
                region=creds.aws_region,
                display_name=creds.display_name or ident,
                is_admin=creds.is_admin,
            ))
        return cls(users)

    def lookup(self, identifier: str | None) -> UserConfig | None:
        if identifier is None:
            return None
        return self._users.get(identifier)

    def list(self) -> tuple[str, ...]:
        return self._order

    def default_identifier(self) -> str | None:
        return self._order[0] if self._order else None

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._users

    def __len__(self) -> int:
        return len(self._order)
