"""Tests for SessionResolver."""

from __future__ import annotations

import pytest

from dynaswitch.credentials.registry import CredentialRegistry
from dynaswitch.credentials.session import SESSION_USER_KEY, SessionResolver
from dynaswitch.models.user_config import UserConfig


@pytest.fixture
def resolver():
    registry = CredentialRegistry([
        UserConfig(identifier="alice", display_name="Alice", is_admin=True),
        UserConfig(identifier="bob", display_name="Bob"),
    ])
    return SessionResolver(registry)


class TestResolve:
    def test_new_session_gets_default_and_keeps_it(self, resolver):
        session: dict = {}
        assert resolver.resolve(session) == "alice"
        assert session[SESSION_USER_KEY] == "alice"
        assert resolver.resolve(session) == "alice"

    def test_valid_identifier_returned_unchanged(self, resolver):
        session = {SESSION_USER_KEY: "bob"}
        assert resolver.resolve(session) == "bob"
        assert session[SESSION_USER_KEY] == "bob"

    def test_unknown_identifier_replaced_with_default(self, resolver):
        session = {SESSION_USER_KEY: "removed-user"}
        assert resolver.resolve(session) == "alice"
        assert session[SESSION_USER_KEY] == "alice"

    def test_no_default_returns_none_and_clears_stale_value(self):
        resolver = SessionResolver(CredentialRegistry([]))
        session = {SESSION_USER_KEY: "ghost"}
        assert resolver.resolve(session) is None
        assert SESSION_USER_KEY not in session


class TestSwitch:
    def test_switch_to_configured_identifier(self, resolver):
        session: dict = {}
        resolver.resolve(session)
        assert resolver.switch(session, "bob") is True
        assert resolver.resolve(session) == "bob"

    def test_switch_to_unconfigured_identifier_is_ignored(self, resolver):
        session = {SESSION_USER_KEY: "bob"}
        assert resolver.switch(session, "mallory") is False
        assert session[SESSION_USER_KEY] == "bob"

    def test_invalid_switch_on_fresh_session_leaves_it_empty(self, resolver):
        session: dict = {}
        resolver.switch(session, "mallory")
        assert session == {}


class TestContext:
    def test_context_carries_user_config(self, resolver):
        ctx = resolver.context({SESSION_USER_KEY: "alice"})
        assert ctx.identifier == "alice"
        assert ctx.user.display_name == "Alice"
        assert ctx.is_admin is True

    def test_context_without_users(self):
        ctx = SessionResolver(CredentialRegistry([])).context({})
        assert ctx.identifier is None
        assert ctx.user is None
        assert ctx.is_admin is False
